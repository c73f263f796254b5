"""Constants for the Quito Pico y Placa scheme."""

from types import MappingProxyType

WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SUNDAY = 0
SATURDAY = 6
WEEKEND_DAYS = frozenset({SUNDAY, SATURDAY})

# Weekday (0=Sunday) -> restricted last digits.
QUITO_RESTRICTED_DIGITS = MappingProxyType(
    {
        1: (1, 2),
        2: (3, 4),
        3: (5, 6),
        4: (7, 8),
        5: (9, 0),
    }
)

QUITO_RESTRICTED_WINDOWS = (
    ("07:00", "09:30"),
    ("16:00", "19:30"),
)

REASON_WEEKEND = "No Pico y Placa restrictions on weekends"
REASON_OUTSIDE_HOURS = "Outside restricted hours (07:00-09:30, 16:00-19:30)"
REASON_DIGIT_NOT_RESTRICTED = "Vehicle digit not restricted on {day}"
REASON_RESTRICTED = "Vehicle is restricted by Pico y Placa"

PLATE_REQUIRED_MESSAGE = "License plate is required and must be a string"
PLATE_EMPTY_MESSAGE = "License plate cannot be empty"
PLATE_FORMAT_MESSAGE = "License plate must follow the format: ABC-1234 (3 letters, hyphen, 4 digits)"
PLATE_NO_DIGIT_MESSAGE = "License plate must contain at least one digit"

DATE_REQUIRED_MESSAGE = "Date is required and must be a string"
DATE_EMPTY_MESSAGE = "Date cannot be empty"
DATE_FORMAT_MESSAGE = (
    "Date must be in format DD/MM/YYYY or DD-MM-YYYY (e.g., 15/03/2024 or 15-03-2024)"
)
DATE_MONTH_RANGE_MESSAGE = "Month must be between 01 and 12"
DATE_DAY_RANGE_MESSAGE = "Day must be between 01 and 31"
DATE_CALENDAR_MESSAGE = "Invalid date: {date} does not exist in the calendar"

TIME_REQUIRED_MESSAGE = "Time is required and must be a string"
TIME_EMPTY_MESSAGE = "Time cannot be empty"
TIME_FORMAT_MESSAGE = "Time must be in 24-hour format HH:MM (e.g., 08:30, 17:00)"
