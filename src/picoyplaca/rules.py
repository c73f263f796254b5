"""Restriction rule table and time windows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .const import QUITO_RESTRICTED_DIGITS, QUITO_RESTRICTED_WINDOWS, WEEKDAY_NAMES
from .exceptions import ConfigError, ValidationError
from .models import ClockTime
from .parsers import TimeParser

# Monday first, as printed in the restriction table.
_DISPLAY_ORDER = (1, 2, 3, 4, 5, 6, 0)


@dataclass(frozen=True, slots=True)
class TimeWindow:
    start: ClockTime
    end: ClockTime

    def contains(self, value: ClockTime) -> bool:
        return self.start.total_minutes <= value.total_minutes <= self.end.total_minutes

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _build_digit_table(
    table: Mapping[int, Iterable[int]],
) -> Mapping[int, tuple[int, ...]]:
    if not isinstance(table, Mapping):
        raise ConfigError("Restricted digits must be a mapping of weekday to digits.")
    built: dict[int, tuple[int, ...]] = {}
    for weekday, digits in table.items():
        if not _is_int(weekday) or not 0 <= weekday <= 6:
            raise ConfigError(f"Weekday {weekday!r} must be an integer between 0 and 6.")
        if isinstance(digits, (str, bytes)) or not isinstance(digits, Iterable):
            raise ConfigError(f"Restricted digits for weekday {weekday} must be a collection.")
        values = tuple(dict.fromkeys(digits))
        for digit in values:
            if not _is_int(digit) or not 0 <= digit <= 9:
                raise ConfigError(f"Restricted digit {digit!r} must be an integer between 0 and 9.")
        if values:
            built[weekday] = values
    return MappingProxyType(built)


def _build_windows(
    windows: Iterable[tuple[str, str]],
    parser: TimeParser,
) -> tuple[TimeWindow, ...]:
    built: list[TimeWindow] = []
    for entry in windows:
        try:
            start_text, end_text = entry
            start = parser.parse(start_text)
            end = parser.parse(end_text)
        except (TypeError, ValueError, ValidationError) as exc:
            raise ConfigError(f"Restricted window {entry!r} must be a pair of HH:MM times.") from exc
        if start.total_minutes > end.total_minutes:
            raise ConfigError(f"Restricted window {start}-{end} ends before it starts.")
        built.append(TimeWindow(start=start, end=end))
    return tuple(built)


class RestrictionRule:
    """Maps last digit, weekday and time of day to a restriction verdict.

    Defaults to the Quito table; other tables are a seam for tests.
    Tables are frozen when the rule is built.
    """

    def __init__(
        self,
        restricted_digits: Mapping[int, Iterable[int]] | None = None,
        windows: Iterable[tuple[str, str]] | None = None,
    ) -> None:
        self._time_parser = TimeParser()
        self._restricted_digits = _build_digit_table(
            QUITO_RESTRICTED_DIGITS if restricted_digits is None else restricted_digits
        )
        self._windows = _build_windows(
            QUITO_RESTRICTED_WINDOWS if windows is None else windows,
            self._time_parser,
        )

    @property
    def windows(self) -> tuple[TimeWindow, ...]:
        return self._windows

    @property
    def windows_label(self) -> str:
        return ", ".join(str(window) for window in self._windows)

    def restricted_digits(self, weekday: int) -> tuple[int, ...] | None:
        """Return the digits restricted on the weekday (0=Sunday), or None."""
        return self._restricted_digits.get(weekday)

    def is_within_restricted_window(self, value: str | ClockTime) -> bool:
        clock = self._time_parser.parse(value)
        return any(window.contains(clock) for window in self._windows)

    def is_restricted(self, last_digit: int, weekday: int, value: str | ClockTime) -> bool:
        digits = self.restricted_digits(weekday)
        if not digits:
            return False
        if last_digit not in digits:
            return False
        return self.is_within_restricted_window(value)

    def describe(self) -> list[str]:
        """Return the restriction table as printable lines."""
        lines = []
        for weekday in _DISPLAY_ORDER:
            label = f"{WEEKDAY_NAMES[weekday]}:"
            digits = self.restricted_digits(weekday)
            if digits:
                lines.append(f"{label:<11}Digits {', '.join(str(digit) for digit in digits)}")
            else:
                lines.append(f"{label:<11}No restrictions")
        lines.append(f"Restricted hours: {self.windows_label or 'none'}")
        return lines
