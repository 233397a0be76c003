"""Tests for the BusinessCalendar facade."""

from datetime import date, datetime

import pytest

from jpbizdays.business_calendar import BusinessCalendar
from jpbizdays.cache import HolidayCache
from jpbizdays.config import Configuration
from jpbizdays.errors import InvalidArgumentError, InvalidDateError
from jpbizdays.models import DayType, HolidayKind


@pytest.fixture
def calendar():
    return BusinessCalendar(Configuration())


def test_accepts_date_like_input(calendar):
    """Dates, datetimes and strings are all accepted."""
    assert calendar.is_holiday("2024-01-01")
    assert calendar.is_holiday(datetime(2024, 1, 8, 9, 0))
    assert not calendar.is_business_day(date(2024, 9, 23))
    assert calendar.business_days_between("2024-01-15", "2024-01-19") == 4


def test_results_keep_caller_type(calendar):
    """Arithmetic results mirror the input representation."""
    assert calendar.add_business_days(date(2024, 1, 5), 1) == date(2024, 1, 9)
    assert calendar.add_business_days("2024-01-05", 1) == "2024-01-09"
    assert calendar.subtract_business_days("2024-01-09", 1) == "2024-01-05"
    assert calendar.add_business_days("2024-01-05T10:30", 1) == "2024-01-09T10:30:00"

    moved = calendar.next_business_day(datetime(2024, 1, 5, 17, 45))
    assert moved == datetime(2024, 1, 9, 17, 45)
    assert calendar.previous_business_day(datetime(2024, 1, 9, 8, 0)) == datetime(2024, 1, 5, 8, 0)


def test_invalid_input(calendar):
    """Bad input surfaces as typed errors."""
    with pytest.raises(InvalidDateError):
        calendar.is_business_day("not-a-date")
    with pytest.raises(InvalidArgumentError):
        calendar.add_business_days(None, 1)
    with pytest.raises(InvalidArgumentError):
        calendar.add_business_days("2024-01-05", "1")
    with pytest.raises(InvalidArgumentError):
        calendar.holidays_in_year(999)


def test_holidays_in_year_uses_cache():
    """The second request for a year is a cache hit."""
    cache = HolidayCache(max_size=3)
    calendar = BusinessCalendar(cache=cache)

    first = calendar.holidays_in_year(2024)
    second = calendar.holidays_in_year(2024)

    assert first == second
    assert isinstance(first, tuple)
    assert len(first) == 21
    assert cache.access_count(2024) == 2
    assert cache.stats().hits == 1


def test_holiday_on(calendar):
    """Holiday details are available per date."""
    holiday = calendar.holiday_on("2024-09-23")
    assert holiday.kind == HolidayKind.SUBSTITUTE
    assert calendar.holiday_on("2024-09-24") is None


def test_month_calendar(calendar):
    """January 2024: 8 weekend days and 2 holidays leave 21 business days."""
    days = calendar.month_calendar(2024, 1)

    assert len(days) == 31
    assert days[0].day_type == DayType.HOLIDAY
    assert days[0].label == "New Year's Day"
    assert days[1].day_type == DayType.BUSINESS_DAY
    assert days[5].day_type == DayType.WEEKEND
    assert days[7].day_type == DayType.HOLIDAY
    assert calendar.business_days_in_month(2024, 1) == 21


def test_month_calendar_with_overrides():
    """Overrides change the month view and the business day count."""
    config = Configuration()
    config.add_business_day(date(2024, 1, 8))
    config.add_holiday(date(2024, 1, 2))
    calendar = BusinessCalendar(config)

    days = calendar.month_calendar(2024, 1)

    assert days[7].day_type == DayType.CUSTOM_BUSINESS_DAY
    assert days[7].label == "Business day override (Coming of Age Day)"
    assert days[1].day_type == DayType.CUSTOM_HOLIDAY
    assert calendar.business_days_in_month(2024, 1) == 21


def test_month_calendar_agrees_with_predicate():
    """Month view classification matches is_business_day."""
    config = Configuration()
    config.add_business_day(date(2024, 5, 4))
    config.add_holiday(date(2024, 5, 2))
    calendar = BusinessCalendar(config)

    for day in calendar.month_calendar(2024, 5):
        assert day.is_business_day == calendar.is_business_day(day.date), day.date


@pytest.mark.parametrize("month", [0, 13, "1", None])
def test_month_calendar_invalid_month(calendar, month):
    """Months must be integers 1-12."""
    with pytest.raises(InvalidArgumentError):
        calendar.month_calendar(2024, month)


def test_configurations_are_independent():
    """Two calendars with different configurations do not interfere."""
    friday_off = Configuration(weekend_days={5, 6})
    default = BusinessCalendar()
    custom = BusinessCalendar(friday_off)

    assert default.is_business_day("2024-01-05")
    assert not custom.is_business_day("2024-01-05")
    assert custom.is_business_day("2024-01-07")
