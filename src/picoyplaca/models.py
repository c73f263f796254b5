"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from .const import MONTH_NAMES, WEEKDAY_NAMES
from .util import extract_last_digit, format_minutes, normalize_license_plate


@dataclass(frozen=True, slots=True)
class LicensePlate:
    plate_number: str
    last_digit: int

    @classmethod
    def from_string(cls, plate: str) -> LicensePlate:
        """Build a plate from raw text without checking its canonical shape."""
        normalized = normalize_license_plate(plate)
        return cls(plate_number=normalized, last_digit=extract_last_digit(normalized))

    def __str__(self) -> str:
        return f"LicensePlate({self.plate_number}, last digit: {self.last_digit})"


@dataclass(frozen=True, slots=True)
class CalendarDate:
    year: int
    month: int
    day: int
    weekday: int

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.weekday]

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)


@dataclass(frozen=True, slots=True)
class ClockTime:
    hours: int
    minutes: int

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    @property
    def normalized(self) -> str:
        return format_minutes(self.total_minutes)

    def __str__(self) -> str:
        return self.normalized


@dataclass(frozen=True, slots=True)
class PredictionResult:
    plate_number: str
    last_digit: int
    date: str
    time: str
    day_of_week: str
    can_drive: bool
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "plateNumber": self.plate_number,
            "lastDigit": self.last_digit,
            "date": self.date,
            "time": self.time,
            "dayOfWeek": self.day_of_week,
            "canDrive": self.can_drive,
            "reason": self.reason,
        }
