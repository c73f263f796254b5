import pytest

from picoyplaca import can_drive, predict
from picoyplaca.exceptions import (
    CalendarInvalidError,
    EmptyFieldError,
    FormatMismatchError,
    RangeViolationError,
    RequiredFieldError,
    ValidationError,
)
from picoyplaca.predictor import Predictor
from picoyplaca.rules import RestrictionRule
from picoyplaca.validators import DateValidator, TimeValidator


def test_restricted_monday_morning() -> None:
    result = predict("PBX-1001", "18/03/2024", "07:30")
    assert result.can_drive is False
    assert result.last_digit == 1
    assert result.day_of_week == "Monday"
    assert result.reason == "Vehicle is restricted by Pico y Placa"


def test_outside_restricted_hours() -> None:
    result = predict("PBX-1001", "18/03/2024", "22:00")
    assert result.can_drive is True
    assert "Outside restricted hours" in result.reason
    assert result.reason == "Outside restricted hours (07:00-09:30, 16:00-19:30)"


def test_digit_not_restricted_today() -> None:
    result = predict("ABC-5555", "18/03/2024", "08:00")
    assert result.can_drive is True
    assert result.reason == "Vehicle digit not restricted on Monday"


def test_outside_hours_wins_over_unrestricted_digit() -> None:
    result = predict("ABC-5555", "18/03/2024", "12:00")
    assert result.reason == "Outside restricted hours (07:00-09:30, 16:00-19:30)"


def test_weekend() -> None:
    result = predict("PBX-1001", "16/03/2024", "10:00")
    assert result.can_drive is True
    assert result.day_of_week == "Saturday"
    assert "weekend" in result.reason
    assert predict("PBX-1002", "17/03/2024", "08:00").reason == (
        "No Pico y Placa restrictions on weekends"
    )


def test_result_normalizes_plate_and_time_but_keeps_date() -> None:
    result = predict("  pbx-1001 ", "18-03-2024", "7:05")
    assert result.plate_number == "PBX-1001"
    assert result.time == "07:05"
    assert result.date == "18-03-2024"


@pytest.mark.parametrize(
    ("plate", "date_string"),
    [
        ("ABC-1231", "18/03/2024"),
        ("ABC-1233", "19/03/2024"),
        ("ABC-1235", "20/03/2024"),
        ("ABC-1237", "21/03/2024"),
        ("ABC-1239", "22/03/2024"),
        ("ABC-1230", "22/03/2024"),
    ],
)
def test_each_weekday_restricts_its_digits(plate: str, date_string: str) -> None:
    assert can_drive(plate, date_string, "08:00") is False
    assert can_drive(plate, date_string, "17:00") is False
    assert can_drive(plate, date_string, "13:00") is True


@pytest.mark.parametrize(
    ("value", "allowed"),
    [
        ("06:59", True),
        ("07:00", False),
        ("09:30", False),
        ("09:31", True),
        ("15:59", True),
        ("16:00", False),
        ("19:30", False),
        ("19:31", True),
    ],
)
def test_window_boundaries(value: str, allowed: bool) -> None:
    assert can_drive("PBX-1001", "18/03/2024", value) is allowed


def test_calendar_invalid_date() -> None:
    with pytest.raises(CalendarInvalidError, match="does not exist in the calendar"):
        predict("ABC-1234", "31/02/2024", "08:00")


def test_invalid_plate_reported_before_date_and_time() -> None:
    with pytest.raises(FormatMismatchError) as excinfo:
        predict("INVALID", "99/99/9999", "99:99")
    assert excinfo.value.field == "plate"
    assert "ABC-1234" in str(excinfo.value)


def test_plate_format_error_stops_before_other_validators(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    def record(name):
        def diagnose(self, value):
            calls.append(name)
            return None

        return diagnose

    monkeypatch.setattr(DateValidator, "diagnose", record("date"))
    monkeypatch.setattr(TimeValidator, "diagnose", record("time"))
    with pytest.raises(ValidationError):
        Predictor().predict("INVALID", "19/03/2024", "08:00")
    assert calls == []


def test_date_error_reported_before_time() -> None:
    with pytest.raises(RangeViolationError, match="Month must be between 01 and 12") as excinfo:
        predict("ABC-1234", "15/13/2024", "not a time")
    assert excinfo.value.field == "date"


def test_time_error() -> None:
    with pytest.raises(FormatMismatchError, match="24-hour format") as excinfo:
        predict("ABC-1234", "18/03/2024", "25:00")
    assert excinfo.value.field == "time"


def test_missing_and_empty_inputs() -> None:
    with pytest.raises(RequiredFieldError, match="License plate is required"):
        predict(None, "18/03/2024", "08:00")
    with pytest.raises(EmptyFieldError, match="Date cannot be empty"):
        predict("ABC-1234", "  ", "08:00")
    with pytest.raises(EmptyFieldError, match="Time cannot be empty"):
        predict("ABC-1234", "18/03/2024", "")


def test_predict_is_idempotent() -> None:
    predictor = Predictor()
    first = predictor.predict("PBX-1001", "18/03/2024", "07:30")
    second = predictor.predict("PBX-1001", "18/03/2024", "07:30")
    assert first == second


def test_sequence_of_predictions_is_independent() -> None:
    predictor = Predictor()
    assert predictor.can_drive("PBX-1001", "18/03/2024", "08:00") is False
    assert predictor.can_drive("PBX-1003", "18/03/2024", "08:00") is True
    assert predictor.can_drive("PBX-1001", "18/03/2024", "08:00") is False


def test_injected_rule_verdicts() -> None:
    rule = RestrictionRule({2: [1]}, [("10:00", "12:00")])
    predictor = Predictor(rule)
    assert predictor.rule is rule

    restricted = predictor.predict("PBX-1001", "19/03/2024", "11:00")
    assert restricted.can_drive is False
    assert restricted.reason == "Vehicle is restricted by Pico y Placa"

    other_digit = predictor.predict("PBX-1002", "19/03/2024", "11:00")
    assert other_digit.can_drive is True
    assert other_digit.reason == "Vehicle digit not restricted on Tuesday"

    outside = predictor.predict("PBX-1001", "19/03/2024", "08:00")
    assert outside.can_drive is True
    assert outside.reason == "Outside restricted hours (07:00-09:30, 16:00-19:30)"


def test_weekend_reason_comes_first_for_injected_rule() -> None:
    predictor = Predictor(RestrictionRule({6: [1]}, [("10:00", "12:00")]))
    result = predictor.predict("PBX-1001", "16/03/2024", "11:00")
    assert result.can_drive is False
    assert result.reason == "No Pico y Placa restrictions on weekends"


def test_weekday_without_digits_uses_restricted_template() -> None:
    predictor = Predictor(RestrictionRule({6: [1]}, [("10:00", "12:00")]))
    result = predictor.predict("PBX-1001", "18/03/2024", "11:00")
    assert result.can_drive is True
    assert result.reason == "Vehicle is restricted by Pico y Placa"


@pytest.mark.parametrize(
    ("plate", "date_string", "time_string"),
    [
        ("PBX-1001", "18/03/2024", "07:30"),
        ("PBX-1001", "18/03/2024", "22:00"),
        ("ABC-5555", "18/03/2024", "08:00"),
        ("PBX-1001", "16/03/2024", "10:00"),
        ("PBX-1001", "17/03/2024", "08:00"),
    ],
)
def test_reason_is_one_of_four_templates(plate: str, date_string: str, time_string: str) -> None:
    reason = predict(plate, date_string, time_string).reason
    assert reason in {
        "No Pico y Placa restrictions on weekends",
        "Outside restricted hours (07:00-09:30, 16:00-19:30)",
        "Vehicle digit not restricted on Monday",
        "Vehicle is restricted by Pico y Placa",
    }


def test_validation_failure_raised_from_ensure(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[object] = []
    original = TimeValidator.ensure

    def wrapped(self, value):
        calls.append(value)
        return original(self, value)

    monkeypatch.setattr(TimeValidator, "ensure", wrapped)
    with pytest.raises(FormatMismatchError):
        Predictor().predict("ABC-1234", "18/03/2024", "7:30 PM")
    assert calls == ["7:30 PM"]


def test_predict_logs_masked_plate(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("DEBUG", logger="picoyplaca.predictor"):
        predict("PBX-1001", "18/03/2024", "07:30")
    assert "PB*-*01" in caplog.text
    assert "PBX-1001" not in caplog.text
