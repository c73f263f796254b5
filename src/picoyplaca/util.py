"""Shared utilities for validation and normalization."""

from __future__ import annotations

import re
from datetime import date

from .const import PLATE_NO_DIGIT_MESSAGE, PLATE_REQUIRED_MESSAGE
from .exceptions import EmptyFieldError, FormatMismatchError, RequiredFieldError

PLATE_RE = re.compile(r"[A-Z]{3}-[0-9]{4}")
DATE_RE = re.compile(r"(?P<day>[0-9]{2})(?P<sep>[/-])(?P<month>[0-9]{2})(?P=sep)(?P<year>[0-9]{4})")
TIME_RE = re.compile(r"(?P<hours>[01]?[0-9]|2[0-3]):(?P<minutes>[0-5][0-9])")

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_PLATE_CHAR_RE = re.compile(r"[A-Z0-9]")


def normalize_license_plate(plate: str) -> str:
    if not isinstance(plate, str) or not plate:
        raise RequiredFieldError(PLATE_REQUIRED_MESSAGE, field="plate")
    return plate.strip().upper()


def extract_last_digit(plate: str) -> int:
    """Return the final digit found anywhere in the plate text."""
    digits = _NON_DIGIT_RE.sub("", plate)
    if not digits:
        raise FormatMismatchError(PLATE_NO_DIGIT_MESSAGE, field="plate")
    return int(digits[-1])


def mask_license_plate(plate: str) -> str:
    """Mask a plate keeping its separators, e.g. ``PBX-1001`` -> ``PB*-*01``."""
    if not isinstance(plate, str):
        return "***"
    normalized = plate.strip().upper()
    positions = [index for index, char in enumerate(normalized) if _PLATE_CHAR_RE.fullmatch(char)]
    if not positions:
        return "***"
    if len(positions) <= 2:
        kept: set[int] = set()
    elif len(positions) <= 4:
        kept = {positions[0], positions[-1]}
    else:
        kept = {*positions[:2], *positions[-2:]}
    hidden = set(positions) - kept
    return "".join("*" if index in hidden else char for index, char in enumerate(normalized))


def sunday_based_weekday(value: date) -> int:
    """Return the weekday with 0=Sunday through 6=Saturday."""
    return value.isoweekday() % 7


def format_minutes(total_minutes: int) -> str:
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def require_text(value: object, *, field: str, required_message: str, empty_message: str) -> str:
    """Return the trimmed text or raise the required/empty error for the field."""
    if not isinstance(value, str):
        raise RequiredFieldError(required_message, field=field)
    trimmed = value.strip()
    if not trimmed:
        raise EmptyFieldError(empty_message, field=field)
    return trimmed
