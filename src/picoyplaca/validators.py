"""Input validators for plate, date and time text.

Validators never raise on bad input: ``validate`` answers yes or no and
``explain`` returns the single highest-priority error message, or ``None``.
``ensure`` is the raising variant used by the predictor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from .const import (
    DATE_CALENDAR_MESSAGE,
    DATE_DAY_RANGE_MESSAGE,
    DATE_EMPTY_MESSAGE,
    DATE_FORMAT_MESSAGE,
    DATE_MONTH_RANGE_MESSAGE,
    DATE_REQUIRED_MESSAGE,
    PLATE_EMPTY_MESSAGE,
    PLATE_FORMAT_MESSAGE,
    PLATE_REQUIRED_MESSAGE,
    TIME_EMPTY_MESSAGE,
    TIME_FORMAT_MESSAGE,
    TIME_REQUIRED_MESSAGE,
)
from .exceptions import (
    CalendarInvalidError,
    FormatMismatchError,
    RangeViolationError,
    ValidationError,
)
from .util import DATE_RE, PLATE_RE, TIME_RE, require_text


class BaseValidator(ABC):
    """Base class for string validators."""

    field: str
    required_message: str
    empty_message: str

    def validate(self, value: object) -> bool:
        return self.diagnose(value) is None

    def explain(self, value: object) -> str | None:
        error = self.diagnose(value)
        if error is None:
            return None
        return str(error)

    def ensure(self, value: object) -> str:
        """Return the trimmed value or raise its validation error."""
        error = self.diagnose(value)
        if error is not None:
            raise error
        return value.strip()  # type: ignore[union-attr]

    def diagnose(self, value: object) -> ValidationError | None:
        try:
            trimmed = require_text(
                value,
                field=self.field,
                required_message=self.required_message,
                empty_message=self.empty_message,
            )
        except ValidationError as exc:
            return exc
        return self._diagnose_text(trimmed)

    @abstractmethod
    def _diagnose_text(self, text: str) -> ValidationError | None:
        """Check non-empty, trimmed text."""


class PlateValidator(BaseValidator):
    """Validates plates shaped like ABC-1234, ignoring case."""

    field = "plate"
    required_message = PLATE_REQUIRED_MESSAGE
    empty_message = PLATE_EMPTY_MESSAGE

    def _diagnose_text(self, text: str) -> ValidationError | None:
        if PLATE_RE.fullmatch(text.upper()) is None:
            return FormatMismatchError(PLATE_FORMAT_MESSAGE, field=self.field)
        return None


class DateValidator(BaseValidator):
    """Validates DD/MM/YYYY or DD-MM-YYYY dates that exist in the calendar."""

    field = "date"
    required_message = DATE_REQUIRED_MESSAGE
    empty_message = DATE_EMPTY_MESSAGE

    def _diagnose_text(self, text: str) -> ValidationError | None:
        match = DATE_RE.fullmatch(text)
        if match is None:
            return FormatMismatchError(DATE_FORMAT_MESSAGE, field=self.field)
        day = int(match["day"])
        month = int(match["month"])
        year = int(match["year"])
        if not 1 <= month <= 12:
            return RangeViolationError(DATE_MONTH_RANGE_MESSAGE, field=self.field)
        if not 1 <= day <= 31:
            return RangeViolationError(DATE_DAY_RANGE_MESSAGE, field=self.field)
        try:
            date(year, month, day)
        except ValueError:
            return CalendarInvalidError(DATE_CALENDAR_MESSAGE.format(date=text), field=self.field)
        return None


class TimeValidator(BaseValidator):
    """Validates 24-hour H:MM or HH:MM times."""

    field = "time"
    required_message = TIME_REQUIRED_MESSAGE
    empty_message = TIME_EMPTY_MESSAGE

    def _diagnose_text(self, text: str) -> ValidationError | None:
        # Out-of-range hours and minutes report the same message as a bad shape.
        if TIME_RE.fullmatch(text) is None:
            return FormatMismatchError(TIME_FORMAT_MESSAGE, field=self.field)
        return None
