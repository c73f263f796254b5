"""picoyplaca package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    CalendarInvalidError,
    ConfigError,
    EmptyFieldError,
    FormatMismatchError,
    PicoYPlacaError,
    RangeViolationError,
    RequiredFieldError,
    ValidationError,
)
from .models import CalendarDate, ClockTime, LicensePlate, PredictionResult
from .parsers import DateParser, TimeParser
from .predictor import Predictor, can_drive, predict
from .rules import RestrictionRule, TimeWindow
from .validators import DateValidator, PlateValidator, TimeValidator

try:
    __version__ = version("picoyplaca")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "CalendarDate",
    "CalendarInvalidError",
    "ClockTime",
    "ConfigError",
    "DateParser",
    "DateValidator",
    "EmptyFieldError",
    "FormatMismatchError",
    "LicensePlate",
    "PicoYPlacaError",
    "PlateValidator",
    "PredictionResult",
    "Predictor",
    "RangeViolationError",
    "RequiredFieldError",
    "RestrictionRule",
    "TimeParser",
    "TimeValidator",
    "TimeWindow",
    "ValidationError",
    "__version__",
    "can_drive",
    "predict",
]
