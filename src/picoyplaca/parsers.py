"""Parsers that turn date and time text into structured values."""

from __future__ import annotations

from datetime import date

from .const import (
    DATE_CALENDAR_MESSAGE,
    DATE_EMPTY_MESSAGE,
    DATE_FORMAT_MESSAGE,
    DATE_REQUIRED_MESSAGE,
    TIME_EMPTY_MESSAGE,
    TIME_FORMAT_MESSAGE,
    TIME_REQUIRED_MESSAGE,
)
from .exceptions import CalendarInvalidError, FormatMismatchError
from .models import CalendarDate, ClockTime
from .util import DATE_RE, TIME_RE, require_text, sunday_based_weekday


class DateParser:
    """Parse DD/MM/YYYY or DD-MM-YYYY dates."""

    def parse(self, value: str) -> CalendarDate:
        text = require_text(
            value,
            field="date",
            required_message=DATE_REQUIRED_MESSAGE,
            empty_message=DATE_EMPTY_MESSAGE,
        )
        match = DATE_RE.fullmatch(text)
        if match is None:
            raise FormatMismatchError(DATE_FORMAT_MESSAGE, field="date")
        try:
            parsed = date(int(match["year"]), int(match["month"]), int(match["day"]))
        except ValueError as exc:
            raise CalendarInvalidError(
                DATE_CALENDAR_MESSAGE.format(date=value),
                field="date",
            ) from exc
        return CalendarDate(
            year=parsed.year,
            month=parsed.month,
            day=parsed.day,
            weekday=sunday_based_weekday(parsed),
        )

    def weekday(self, value: str) -> int:
        """Return the weekday of the date, 0=Sunday through 6=Saturday."""
        return self.parse(value).weekday

    def format(self, value: str) -> str:
        """Render the date as e.g. ``Monday, March 18, 2024``."""
        parsed = self.parse(value)
        return f"{parsed.weekday_name}, {parsed.month_name} {parsed.day}, {parsed.year}"


class TimeParser:
    """Parse and compare 24-hour H:MM or HH:MM times."""

    def parse(self, value: str | ClockTime) -> ClockTime:
        if isinstance(value, ClockTime):
            return value
        text = require_text(
            value,
            field="time",
            required_message=TIME_REQUIRED_MESSAGE,
            empty_message=TIME_EMPTY_MESSAGE,
        )
        match = TIME_RE.fullmatch(text)
        if match is None:
            raise FormatMismatchError(TIME_FORMAT_MESSAGE, field="time")
        return ClockTime(hours=int(match["hours"]), minutes=int(match["minutes"]))

    def to_minutes(self, value: str | ClockTime) -> int:
        return self.parse(value).total_minutes

    def normalize(self, value: str | ClockTime) -> str:
        return self.parse(value).normalized

    def compare(self, first: str | ClockTime, second: str | ClockTime) -> int:
        """Return a negative, zero or positive number like a classic comparator."""
        return self.to_minutes(first) - self.to_minutes(second)

    def is_between(
        self,
        value: str | ClockTime,
        start: str | ClockTime,
        end: str | ClockTime,
    ) -> bool:
        """Return True when start <= value <= end. Callers pass start <= end."""
        return self.to_minutes(start) <= self.to_minutes(value) <= self.to_minutes(end)
