"""Japanese public holidays and business day arithmetic."""

from jpbizdays.business_calendar import BusinessCalendar
from jpbizdays.cache import HolidayCache
from jpbizdays.calculator import BusinessDayEngine
from jpbizdays.config import Configuration
from jpbizdays.errors import (
    ComputationImpossibleError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidDateError,
    JapaneseBusinessDaysError,
)
from jpbizdays.holidays import HolidayEngine, nth_weekday
from jpbizdays.models import CacheStats, DayInfo, DayType, Holiday, HolidayKind

__all__ = [
    "BusinessCalendar",
    "BusinessDayEngine",
    "CacheStats",
    "ComputationImpossibleError",
    "Configuration",
    "ConfigurationError",
    "DayInfo",
    "DayType",
    "Holiday",
    "HolidayCache",
    "HolidayEngine",
    "HolidayKind",
    "InvalidArgumentError",
    "InvalidDateError",
    "JapaneseBusinessDaysError",
    "nth_weekday",
]
