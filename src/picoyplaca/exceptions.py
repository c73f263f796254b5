"""Library exceptions."""

from __future__ import annotations


class PicoYPlacaError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
        field: str | None = None,
    ) -> None:
        text = message if message is not None else detail
        super().__init__(text if text is not None else "")
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.detail = detail if detail is not None else message
        self.user_message = user_message
        self.field = field


class ValidationError(PicoYPlacaError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class RequiredFieldError(ValidationError):
    """Raised when a value is missing or is not a string."""

    default_error_code = "required_field"


class EmptyFieldError(RequiredFieldError):
    """Raised when a value is blank after trimming."""

    default_error_code = "empty_field"


class FormatMismatchError(ValidationError):
    """Raised when a value does not match its expected shape."""

    default_error_code = "format_mismatch"


class RangeViolationError(ValidationError):
    """Raised when a date component is outside its nominal bounds."""

    default_error_code = "range_violation"


class CalendarInvalidError(ValidationError):
    """Raised when a well-formed date does not exist in the calendar."""

    default_error_code = "calendar_invalid"


class ConfigError(PicoYPlacaError):
    """Raised when a restriction table is misconfigured."""

    error_type = "config"
    default_error_code = "config_error"
