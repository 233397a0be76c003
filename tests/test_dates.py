"""Tests for date helpers and normalization."""

from datetime import date, datetime, timezone

import pytest

from jpbizdays.dates import (
    MONDAY,
    SATURDAY,
    SUNDAY,
    ensure_date,
    next_day,
    previous_day,
    restore_type,
    to_date,
    weekday_of,
)
from jpbizdays.errors import ComputationImpossibleError, InvalidArgumentError, InvalidDateError


def test_weekday_of():
    """Weekdays are numbered from Sunday."""
    assert weekday_of(date(2024, 1, 7)) == SUNDAY
    assert weekday_of(date(2024, 1, 8)) == MONDAY
    assert weekday_of(date(2024, 1, 6)) == SATURDAY


def test_stepping_rolls_over():
    """Day steps cross month, year and leap day boundaries."""
    assert next_day(date(2024, 2, 28)) == date(2024, 2, 29)
    assert next_day(date(2024, 2, 29)) == date(2024, 3, 1)
    assert next_day(date(2023, 12, 31)) == date(2024, 1, 1)
    assert previous_day(date(2023, 3, 1)) == date(2023, 2, 28)


def test_stepping_overflow():
    """Stepping past the calendar's ends is a computation failure."""
    with pytest.raises(ComputationImpossibleError):
        next_day(date.max)
    with pytest.raises(ComputationImpossibleError):
        previous_day(date.min)


def test_ensure_date():
    """Only plain dates pass the core type guard."""
    assert ensure_date(date(2024, 1, 1)) == date(2024, 1, 1)
    with pytest.raises(InvalidArgumentError, match="cannot be None"):
        ensure_date(None)
    with pytest.raises(InvalidArgumentError):
        ensure_date(datetime(2024, 1, 1))
    with pytest.raises(InvalidArgumentError) as exc_info:
        ensure_date("2024-01-01", "start")
    assert exc_info.value.parameter == "start"


@pytest.mark.parametrize(
    "value",
    [
        date(2024, 1, 5),
        datetime(2024, 1, 5, 23, 59),
        "2024-01-05",
        " 2024-01-05 ",
        "2024-01-05T10:30:00",
        "2024/01/05",
    ],
)
def test_to_date_shapes(value):
    """Every recognized shape normalizes to the same date."""
    assert to_date(value) == date(2024, 1, 5)


@pytest.mark.parametrize("value", ["", "   ", "2024-13-01", "yesterday", "2024/02/30"])
def test_to_date_invalid_strings(value):
    """Unparsable strings raise InvalidDateError."""
    with pytest.raises(InvalidDateError):
        to_date(value)


@pytest.mark.parametrize("value", [None, 20240105, 2024.1, [2024, 1, 5]])
def test_to_date_invalid_types(value):
    """Unsupported types raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        to_date(value)


def test_restore_type():
    """Results come back in the caller's representation."""
    result = date(2024, 1, 9)
    assert restore_type(date(2024, 1, 5), result) == result
    assert restore_type("2024-01-05", result) == "2024-01-09"

    original = datetime(2024, 1, 5, 14, 30, 15, tzinfo=timezone.utc)
    restored = restore_type(original, result)
    assert restored == datetime(2024, 1, 9, 14, 30, 15, tzinfo=timezone.utc)
    assert restored.tzinfo is timezone.utc


def test_restore_type_keeps_time_of_iso_datetime_strings():
    """A string with a time of day comes back with that time."""
    result = date(2024, 1, 9)
    assert restore_type("2024-01-05T10:30", result) == "2024-01-09T10:30:00"
    assert restore_type("2024-01-05T10:30:00+09:00", result) == "2024-01-09T10:30:00+09:00"
    assert restore_type("2024/01/05", result) == "2024-01-09"
