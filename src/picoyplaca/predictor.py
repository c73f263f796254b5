"""Predictor facade combining validation, parsing and the rule table."""

from __future__ import annotations

import logging

from .const import (
    REASON_DIGIT_NOT_RESTRICTED,
    REASON_OUTSIDE_HOURS,
    REASON_RESTRICTED,
    REASON_WEEKEND,
    WEEKDAY_NAMES,
    WEEKEND_DAYS,
)
from .exceptions import ValidationError
from .models import ClockTime, LicensePlate, PredictionResult
from .parsers import DateParser, TimeParser
from .rules import RestrictionRule
from .util import mask_license_plate
from .validators import BaseValidator, DateValidator, PlateValidator, TimeValidator

_LOGGER = logging.getLogger(__name__)
_DEFAULT_PREDICTOR: Predictor | None = None


class Predictor:
    """Decides whether a vehicle may circulate at a given date and time."""

    def __init__(self, rule: RestrictionRule | None = None) -> None:
        self._rule = rule or RestrictionRule()
        self._plate_validator = PlateValidator()
        self._date_validator = DateValidator()
        self._time_validator = TimeValidator()
        self._date_parser = DateParser()
        self._time_parser = TimeParser()

    @property
    def rule(self) -> RestrictionRule:
        return self._rule

    def can_drive(self, plate_number: str, date_string: str, time_string: str) -> bool:
        return self.predict(plate_number, date_string, time_string).can_drive

    def predict(self, plate_number: str, date_string: str, time_string: str) -> PredictionResult:
        """Validate the inputs and return the circulation verdict.

        Inputs are validated in plate, date, time order and the first failure
        is raised as a ``ValidationError``; later inputs are not inspected.
        """
        _LOGGER.debug("Prediction started plate=%s", mask_license_plate(plate_number))
        self._validate_inputs(plate_number, date_string, time_string)

        plate = LicensePlate.from_string(plate_number)
        calendar_date = self._date_parser.parse(date_string)
        clock = self._time_parser.parse(time_string)
        restricted = self._rule.is_restricted(plate.last_digit, calendar_date.weekday, clock)

        result = PredictionResult(
            plate_number=plate.plate_number,
            last_digit=plate.last_digit,
            date=date_string,
            time=clock.normalized,
            day_of_week=calendar_date.weekday_name,
            can_drive=not restricted,
            reason=self._reason(restricted, calendar_date.weekday, clock),
        )
        _LOGGER.debug(
            "Prediction completed plate=%s day=%s time=%s can_drive=%s",
            mask_license_plate(result.plate_number),
            result.day_of_week,
            result.time,
            result.can_drive,
        )
        return result

    def _validate_inputs(self, plate_number: str, date_string: str, time_string: str) -> None:
        checks: tuple[tuple[BaseValidator, object], ...] = (
            (self._plate_validator, plate_number),
            (self._date_validator, date_string),
            (self._time_validator, time_string),
        )
        for validator, value in checks:
            try:
                validator.ensure(value)
            except ValidationError as exc:
                _LOGGER.debug(
                    "Prediction rejected field=%s code=%s",
                    exc.field,
                    exc.error_code,
                )
                raise

    def _reason(self, restricted: bool, weekday: int, clock: ClockTime) -> str:
        if weekday in WEEKEND_DAYS:
            return REASON_WEEKEND
        if not restricted and self._rule.restricted_digits(weekday):
            if not self._rule.is_within_restricted_window(clock):
                return REASON_OUTSIDE_HOURS
            return REASON_DIGIT_NOT_RESTRICTED.format(day=WEEKDAY_NAMES[weekday])
        return REASON_RESTRICTED


def _default_predictor() -> Predictor:
    global _DEFAULT_PREDICTOR
    if _DEFAULT_PREDICTOR is None:
        _DEFAULT_PREDICTOR = Predictor()
    return _DEFAULT_PREDICTOR


def predict(plate_number: str, date_string: str, time_string: str) -> PredictionResult:
    """Predict with the default Quito rule."""
    return _default_predictor().predict(plate_number, date_string, time_string)


def can_drive(plate_number: str, date_string: str, time_string: str) -> bool:
    return _default_predictor().can_drive(plate_number, date_string, time_string)
