"""High-level calendar combining holidays, business days and the year cache."""

from calendar import monthrange
from datetime import date

from jpbizdays.cache import HolidayCache
from jpbizdays.calculator import BusinessDayEngine
from jpbizdays.config import Configuration
from jpbizdays.dates import DateLike, restore_type, to_date, weekday_of
from jpbizdays.errors import InvalidArgumentError
from jpbizdays.holidays import HolidayEngine, validate_year
from jpbizdays.models import DayInfo, DayType, Holiday


class BusinessCalendar:
    """
    Japanese business calendar bound to one configuration.

    Accepts dates, datetimes or ISO strings; results keep the caller's type,
    so a datetime keeps its time of day.
    """

    def __init__(
        self,
        configuration: Configuration | None = None,
        cache: HolidayCache | None = None,
    ) -> None:
        self.configuration = configuration if configuration is not None else Configuration()
        self.cache = cache if cache is not None else HolidayCache()
        self.holiday_engine = HolidayEngine()
        self.business_day_engine = BusinessDayEngine(self.holiday_engine, self.configuration)

    def is_holiday(self, value: DateLike) -> bool:
        """Check if a date is a Japanese public holiday."""
        return self.holiday_engine.is_holiday(to_date(value))

    def is_business_day(self, value: DateLike) -> bool:
        """Check if a date is a business day under this configuration."""
        return self.business_day_engine.is_business_day(to_date(value))

    def holiday_on(self, value: DateLike) -> Holiday | None:
        """Get the public holiday on a date, or None."""
        return self.holiday_engine.holiday_on(to_date(value))

    def holidays_in_year(self, year: int) -> tuple[Holiday, ...]:
        """All public holidays of a year, served from the cache when possible."""
        year = validate_year(year)
        return self.cache.get_or_compute(year, self.holiday_engine.holidays_in_year)

    def business_days_between(self, start: DateLike, end: DateLike) -> int:
        """Count business days after start, up to and including end."""
        return self.business_day_engine.business_days_between(
            to_date(start, "start"), to_date(end, "end")
        )

    def add_business_days(self, value: DateLike, days: int) -> DateLike:
        """Move forward by a number of business days."""
        result = self.business_day_engine.add_business_days(to_date(value), days)
        return restore_type(value, result)

    def subtract_business_days(self, value: DateLike, days: int) -> DateLike:
        """Move backward by a number of business days."""
        result = self.business_day_engine.subtract_business_days(to_date(value), days)
        return restore_type(value, result)

    def next_business_day(self, value: DateLike) -> DateLike:
        """First business day strictly after a date."""
        result = self.business_day_engine.next_business_day(to_date(value))
        return restore_type(value, result)

    def previous_business_day(self, value: DateLike) -> DateLike:
        """Last business day strictly before a date."""
        result = self.business_day_engine.previous_business_day(to_date(value))
        return restore_type(value, result)

    def month_calendar(self, year: int, month: int) -> list[DayInfo]:
        """Classify every day of a month."""
        year = validate_year(year)
        if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
            msg = f"month must be an int between 1 and 12, got {month!r}"
            raise InvalidArgumentError(msg, parameter="month", value=month)

        holidays_by_date = {holiday.date: holiday for holiday in self.holidays_in_year(year)}
        _, days_in_month = monthrange(year, month)
        calendar = []

        for day in range(1, days_in_month + 1):
            target_date = date(year, month, day)
            holiday = holidays_by_date.get(target_date)
            calendar.append(
                DayInfo(
                    date=target_date,
                    day_type=self._day_type(target_date, holiday),
                    holiday=holiday,
                )
            )

        return calendar

    def business_days_in_month(self, year: int, month: int) -> int:
        """Number of business days in a month."""
        return sum(1 for day in self.month_calendar(year, month) if day.is_business_day)

    def _day_type(self, target_date: date, holiday: Holiday | None) -> DayType:
        # Same precedence as BusinessDayEngine.is_business_day
        if self.configuration.is_custom_business_day(target_date):
            return DayType.CUSTOM_BUSINESS_DAY
        if holiday is not None:
            return DayType.HOLIDAY
        if self.configuration.is_custom_holiday(target_date):
            return DayType.CUSTOM_HOLIDAY
        if self.configuration.is_weekend_weekday(weekday_of(target_date)):
            return DayType.WEEKEND
        return DayType.BUSINESS_DAY
