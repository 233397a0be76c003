"""Business day rules and arithmetic."""

from datetime import date
from typing import Protocol

from jpbizdays.dates import ensure_date, next_day, previous_day, weekday_of
from jpbizdays.errors import InvalidArgumentError
from jpbizdays.holidays import HolidayEngine


class CalendarRules(Protocol):
    """Queries a configuration must answer for business day decisions."""

    def is_weekend_weekday(self, weekday: int) -> bool: ...

    def is_custom_holiday(self, target_date: date) -> bool: ...

    def is_custom_business_day(self, target_date: date) -> bool: ...


class BusinessDayEngine:
    """
    Decides business days and steps through them.

    A business day is:
    - Any custom business day (this wins over everything else)
    - Otherwise a day that is not a weekend, not a public holiday,
      and not a custom holiday
    """

    def __init__(self, holiday_engine: HolidayEngine, configuration: CalendarRules) -> None:
        self.holiday_engine = holiday_engine
        self.configuration = configuration

    def is_business_day(self, target_date: date) -> bool:
        """Check if a date is a business day."""
        target_date = ensure_date(target_date)
        if self.configuration.is_custom_business_day(target_date):
            return True
        if (
            self.configuration.is_weekend_weekday(weekday_of(target_date))
            or self.holiday_engine.is_holiday(target_date)
            or self.configuration.is_custom_holiday(target_date)
        ):
            return False
        return True

    def business_days_between(self, start: date, end: date) -> int:
        """
        Count business days after start, up to and including end.

        Negative when end is before start.
        """
        start = ensure_date(start, "start")
        end = ensure_date(end, "end")
        if start == end:
            return 0
        if start > end:
            return -self.business_days_between(end, start)

        count = 0
        cursor = start
        while cursor < end:
            cursor = next_day(cursor)
            if self.is_business_day(cursor):
                count += 1
        return count

    def add_business_days(self, target_date: date, days: int) -> date:
        """
        Move forward by a number of business days.

        Zero days returns the date itself if it is a business day, otherwise
        the next business day. Negative days subtract.
        """
        target_date = ensure_date(target_date)
        days = _validate_days(days)
        if days == 0:
            return self._snap_forward(target_date)
        if days < 0:
            return self.subtract_business_days(target_date, -days)

        cursor = target_date
        remaining = days
        while remaining > 0:
            cursor = next_day(cursor)
            if self.is_business_day(cursor):
                remaining -= 1
        return cursor

    def subtract_business_days(self, target_date: date, days: int) -> date:
        """
        Move backward by a number of business days.

        Zero days snaps forward like add_business_days. Negative days add.
        """
        target_date = ensure_date(target_date)
        days = _validate_days(days)
        if days == 0:
            return self._snap_forward(target_date)
        if days < 0:
            return self.add_business_days(target_date, -days)

        cursor = target_date
        remaining = days
        while remaining > 0:
            cursor = previous_day(cursor)
            if self.is_business_day(cursor):
                remaining -= 1
        return cursor

    def next_business_day(self, target_date: date) -> date:
        """First business day strictly after a date."""
        cursor = next_day(ensure_date(target_date))
        while not self.is_business_day(cursor):
            cursor = next_day(cursor)
        return cursor

    def previous_business_day(self, target_date: date) -> date:
        """Last business day strictly before a date."""
        cursor = previous_day(ensure_date(target_date))
        while not self.is_business_day(cursor):
            cursor = previous_day(cursor)
        return cursor

    def _snap_forward(self, target_date: date) -> date:
        if self.is_business_day(target_date):
            return target_date
        return self.next_business_day(target_date)


def _validate_days(days: object) -> int:
    if days is None:
        msg = "days cannot be None"
        raise InvalidArgumentError(msg, parameter="days", value=days)
    if isinstance(days, bool) or not isinstance(days, int):
        msg = f"days must be an int, got {type(days).__name__}"
        raise InvalidArgumentError(msg, parameter="days", value=days)
    return days
