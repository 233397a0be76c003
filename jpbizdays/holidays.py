"""Japanese public holiday rules."""

import logging
import math
from calendar import monthrange
from datetime import date

from jpbizdays.dates import (
    MONDAY,
    SUNDAY,
    WEEKDAY_NAMES,
    ensure_date,
    next_day,
    previous_day,
    weekday_of,
)
from jpbizdays.errors import ComputationImpossibleError, InvalidArgumentError
from jpbizdays.models import Holiday, HolidayKind

logger = logging.getLogger(__name__)

MIN_YEAR = 1000
MAX_YEAR = 9999

FIXED_HOLIDAYS: dict[tuple[int, int], str] = {
    (1, 1): "New Year's Day",
    (2, 11): "National Foundation Day",
    (4, 29): "Showa Day",
    (5, 3): "Constitution Memorial Day",
    (5, 4): "Greenery Day",
    (5, 5): "Children's Day",
    (8, 11): "Mountain Day",
    (11, 3): "Culture Day",
    (11, 23): "Labor Thanksgiving Day",
    (12, 23): "Emperor's Birthday",
}

# (month, nth Monday) -> name
HAPPY_MONDAY_HOLIDAYS: dict[tuple[int, int], str] = {
    (1, 2): "Coming of Age Day",
    (7, 3): "Marine Day",
    (9, 3): "Respect for the Aged Day",
    (10, 2): "Sports Day",
}

VERNAL_EQUINOX_NAME = "Vernal Equinox Day"
AUTUMNAL_EQUINOX_NAME = "Autumnal Equinox Day"
SUBSTITUTE_HOLIDAY_NAME = "Substitute Holiday"

# (first year, last year, vernal base day, autumnal base day)
EQUINOX_COEFFICIENTS: tuple[tuple[int, int, float, float], ...] = (
    (1851, 1899, 19.8277, 22.7020),
    (1900, 1979, 21.124, 23.73),
    (1980, 2099, 20.8431, 23.2488),
    (2100, 2150, 21.851, 24.2488),
)
FALLBACK_COEFFICIENTS = EQUINOX_COEFFICIENTS[2]
EQUINOX_DRIFT = 0.2422


def _equinox_day(year: int, month: int, vernal: bool) -> date:
    """
    Approximate an equinox date with the piecewise linear formula.

    Outside 1851-2150 the 1980-2099 coefficients are used. Far from that
    range the formula drifts out of the month, so the day is clamped into it.
    """
    coefficients = next(
        (row for row in EQUINOX_COEFFICIENTS if row[0] <= year <= row[1]),
        FALLBACK_COEFFICIENTS,
    )
    start, _, vernal_base, autumnal_base = coefficients

    base = vernal_base if vernal else autumnal_base
    elapsed = year - start
    day = math.floor(base + EQUINOX_DRIFT * elapsed - elapsed // 4)

    _, days_in_month = monthrange(year, month)
    return date(year, month, min(max(day, 1), days_in_month))


def vernal_equinox_day(year: int) -> date:
    """Vernal Equinox Day (March) for a year."""
    return _equinox_day(validate_year(year), 3, vernal=True)


def autumnal_equinox_day(year: int) -> date:
    """Autumnal Equinox Day (September) for a year."""
    return _equinox_day(validate_year(year), 9, vernal=False)


def nth_weekday(year: int, month: int, nth: int, weekday: int) -> date:
    """
    Find the nth occurrence of a weekday (0=Sunday) in a month.

    Raises ComputationImpossibleError when the month has no such occurrence,
    e.g. a 5th Monday in a month with only four.
    """
    year = validate_year(year)
    for name, value in (("month", month), ("nth", nth), ("weekday", weekday)):
        _validate_int(value, name)

    if not 1 <= month <= 12:
        msg = f"month must be between 1 and 12, got {month}"
        raise InvalidArgumentError(msg, parameter="month", value=month)
    if nth < 1:
        msg = f"nth must be at least 1, got {nth}"
        raise InvalidArgumentError(msg, parameter="nth", value=nth)
    if not SUNDAY <= weekday <= 6:
        msg = f"weekday must be between 0 and 6, got {weekday}"
        raise InvalidArgumentError(msg, parameter="weekday", value=weekday)

    first_day = date(year, month, 1)
    offset = (weekday - weekday_of(first_day)) % 7 + 7 * (nth - 1)
    _, days_in_month = monthrange(year, month)
    if 1 + offset > days_in_month:
        msg = f"There is no {_ordinal(nth)} {WEEKDAY_NAMES[weekday]} in {year}/{month:02d}"
        raise ComputationImpossibleError(msg, parameter="nth", value=nth)

    return date(year, month, 1 + offset)


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _validate_int(value: object, parameter: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{parameter} must be an int, got {type(value).__name__}"
        raise InvalidArgumentError(msg, parameter=parameter, value=value)
    return value


def validate_year(year: object) -> int:
    """Check that a year is an integer within the supported range."""
    _validate_int(year, "year")
    if not MIN_YEAR <= year <= MAX_YEAR:
        msg = f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        raise InvalidArgumentError(msg, parameter="year", value=year)
    return year


class HolidayEngine:
    """Resolves Japanese public holidays for a date or a whole year."""

    def is_holiday(self, target_date: date) -> bool:
        """Check if a date is a public holiday under any rule."""
        target_date = ensure_date(target_date)
        return self._base_holiday(target_date) is not None or self._is_substitute(target_date)

    def is_substitute_holiday(self, target_date: date) -> bool:
        """Check if a date is a substitute holiday for a Sunday holiday."""
        return self._is_substitute(ensure_date(target_date))

    def holiday_on(self, target_date: date) -> Holiday | None:
        """Get the holiday falling on a date, or None."""
        target_date = ensure_date(target_date)
        holiday = self._base_holiday(target_date)
        if holiday is None and self._is_substitute(target_date):
            holiday = Holiday(target_date, SUBSTITUTE_HOLIDAY_NAME, HolidayKind.SUBSTITUTE)
        return holiday

    def holidays_in_year(self, year: int) -> list[Holiday]:
        """
        Get all holidays of a year, sorted by date.

        Fixed, equinox and happy-Monday holidays are computed first; substitute
        holidays are derived from that set and never land on an existing
        holiday date.
        """
        year = validate_year(year)

        holidays = [
            *self._fixed_holidays(year),
            *self._calculated_holidays(year),
            *self._happy_monday_holidays(year),
        ]
        holidays.extend(self._substitute_holidays(holidays))
        holidays.sort(key=lambda holiday: holiday.date)

        logger.debug("Computed %d holidays for %d", len(holidays), year)
        return holidays

    def _base_holiday(self, target_date: date) -> Holiday | None:
        """Match a date against the fixed, equinox and happy-Monday rules."""
        name = FIXED_HOLIDAYS.get((target_date.month, target_date.day))
        if name:
            return Holiday(target_date, name, HolidayKind.FIXED)

        year = target_date.year
        if target_date.month == 3 and target_date == _equinox_day(year, 3, vernal=True):
            return Holiday(target_date, VERNAL_EQUINOX_NAME, HolidayKind.CALCULATED)
        if target_date.month == 9 and target_date == _equinox_day(year, 9, vernal=False):
            return Holiday(target_date, AUTUMNAL_EQUINOX_NAME, HolidayKind.CALCULATED)

        if weekday_of(target_date) == MONDAY:
            nth = (target_date.day - 1) // 7 + 1
            name = HAPPY_MONDAY_HOLIDAYS.get((target_date.month, nth))
            if name:
                return Holiday(target_date, name, HolidayKind.HAPPY_MONDAY)

        return None

    def _is_substitute(self, target_date: date) -> bool:
        # Substitutes don't cascade: the Sunday must be a holiday in its own right
        if weekday_of(target_date) != MONDAY or target_date == date.min:
            return False
        sunday = previous_day(target_date)
        return self._base_holiday(sunday) is not None

    def _fixed_holidays(self, year: int) -> list[Holiday]:
        return [
            Holiday(date(year, month, day), name, HolidayKind.FIXED)
            for (month, day), name in FIXED_HOLIDAYS.items()
        ]

    def _calculated_holidays(self, year: int) -> list[Holiday]:
        return [
            Holiday(vernal_equinox_day(year), VERNAL_EQUINOX_NAME, HolidayKind.CALCULATED),
            Holiday(autumnal_equinox_day(year), AUTUMNAL_EQUINOX_NAME, HolidayKind.CALCULATED),
        ]

    def _happy_monday_holidays(self, year: int) -> list[Holiday]:
        return [
            Holiday(nth_weekday(year, month, nth, MONDAY), name, HolidayKind.HAPPY_MONDAY)
            for (month, nth), name in HAPPY_MONDAY_HOLIDAYS.items()
        ]

    def _substitute_holidays(self, holidays: list[Holiday]) -> list[Holiday]:
        taken = {holiday.date for holiday in holidays}
        substitutes = []
        for holiday in holidays:
            if weekday_of(holiday.date) != SUNDAY:
                continue
            monday = next_day(holiday.date)
            if monday in taken:
                continue
            taken.add(monday)
            substitutes.append(Holiday(monday, SUBSTITUTE_HOLIDAY_NAME, HolidayKind.SUBSTITUTE))
        return substitutes
