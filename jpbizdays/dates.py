"""Date helpers and normalization of date-like input."""

from datetime import date, datetime, timedelta
from typing import TypeVar

from jpbizdays.errors import ComputationImpossibleError, InvalidArgumentError, InvalidDateError

# Weekday numbering used throughout: 0 = Sunday ... 6 = Saturday
SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)
WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

ONE_DAY = timedelta(days=1)

DateLike = TypeVar("DateLike", date, datetime, str)


def weekday_of(target_date: date) -> int:
    """Weekday of a date with Sunday as 0."""
    return target_date.isoweekday() % 7


def ensure_date(value: object, parameter: str = "date") -> date:
    """Check that a value is a plain calendar date (not a datetime)."""
    if value is None:
        msg = f"{parameter} cannot be None"
        raise InvalidArgumentError(msg, parameter=parameter, value=value)
    if isinstance(value, datetime) or not isinstance(value, date):
        msg = f"{parameter} must be a datetime.date, got {type(value).__name__}"
        raise InvalidArgumentError(msg, parameter=parameter, value=value)
    return value


def next_day(target_date: date) -> date:
    """Step one day forward."""
    try:
        return target_date + ONE_DAY
    except OverflowError as e:
        msg = f"No date exists after {target_date.isoformat()}"
        raise ComputationImpossibleError(msg, parameter="date", value=target_date) from e


def previous_day(target_date: date) -> date:
    """Step one day backward."""
    try:
        return target_date - ONE_DAY
    except OverflowError as e:
        msg = f"No date exists before {target_date.isoformat()}"
        raise ComputationImpossibleError(msg, parameter="date", value=target_date) from e


def to_date(value: object, parameter: str = "date") -> date:
    """
    Normalize a date-like value into a date.

    Accepted shapes:
    - date: returned as-is
    - datetime: its calendar date (time of day and tzinfo dropped)
    - str: ISO date ("2024-01-01"), ISO datetime, or "2024/01/01"
    """
    if value is None:
        msg = f"{parameter} cannot be None"
        raise InvalidArgumentError(msg, parameter=parameter, value=value)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_date_string(value, parameter)

    msg = f"{parameter} must be a date, datetime or str, got {type(value).__name__}"
    raise InvalidArgumentError(msg, parameter=parameter, value=value)


def _parse_date_string(value: str, parameter: str) -> date:
    """Parse a date string in one of the recognized formats."""
    text = value.strip()
    if not text:
        msg = f"{parameter} cannot be an empty string"
        raise InvalidDateError(msg, parameter=parameter, value=value)

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    try:
        return datetime.strptime(text, "%Y/%m/%d").date()
    except ValueError as e:
        msg = f"Invalid date string: {value!r}"
        raise InvalidDateError(msg, parameter=parameter, value=value) from e


def restore_type(original: DateLike, result: date) -> DateLike:
    """
    Convert a computed date back to the type of the caller's original value.

    A datetime keeps its time of day and tzinfo. A string comes back as an
    ISO date string, or as an ISO datetime string if it carried a time.
    """
    if isinstance(original, datetime):
        return original.replace(year=result.year, month=result.month, day=result.day)
    if isinstance(original, str):
        timestamp = _parse_datetime_string(original.strip())
        if timestamp is None:
            return result.isoformat()
        return restore_type(timestamp, result).isoformat()
    return result


def _parse_datetime_string(text: str) -> datetime | None:
    # Plain dates are not timestamps, even though datetime.fromisoformat reads them
    try:
        date.fromisoformat(text)
    except ValueError:
        pass
    else:
        return None

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None
