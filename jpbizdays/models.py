"""Data models for holidays and calendar views."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from jpbizdays.errors import InvalidArgumentError


class HolidayKind(str, Enum):
    """Rule that produced a holiday."""

    FIXED = "fixed"
    CALCULATED = "calculated"
    HAPPY_MONDAY = "happy_monday"
    SUBSTITUTE = "substitute"


class DayType(str, Enum):
    """Classification of a single day in a month view."""

    BUSINESS_DAY = "business_day"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    CUSTOM_HOLIDAY = "custom_holiday"
    CUSTOM_BUSINESS_DAY = "custom_business_day"


@dataclass(frozen=True)
class Holiday:
    """A public holiday on a given date."""

    date: date
    name: str
    kind: HolidayKind

    def __post_init__(self) -> None:
        if isinstance(self.date, datetime) or not isinstance(self.date, date):
            msg = f"Holiday date must be a datetime.date, got {type(self.date).__name__}"
            raise InvalidArgumentError(msg, parameter="date", value=self.date)
        if not isinstance(self.name, str) or not self.name.strip():
            msg = f"Holiday name must be a non-empty string, got {self.name!r}"
            raise InvalidArgumentError(msg, parameter="name", value=self.name)
        if not isinstance(self.kind, HolidayKind):
            msg = f"Holiday kind must be a HolidayKind, got {self.kind!r}"
            raise InvalidArgumentError(msg, parameter="kind", value=self.kind)

    def __str__(self) -> str:
        return f"{self.date.isoformat()} - {self.name} ({self.kind.value})"


@dataclass
class DayInfo:
    """Record for a single day of a month calendar."""

    date: date
    day_type: DayType
    holiday: Holiday | None = None

    @property
    def is_business_day(self) -> bool:
        """Whether work happens on this day."""
        return self.day_type in (DayType.BUSINESS_DAY, DayType.CUSTOM_BUSINESS_DAY)

    @property
    def label(self) -> str:
        """Short description shown next to the date."""
        if self.day_type == DayType.CUSTOM_HOLIDAY:
            return "Company holiday"
        if self.day_type == DayType.CUSTOM_BUSINESS_DAY:
            suffix = f" ({self.holiday.name})" if self.holiday else ""
            return f"Business day override{suffix}"
        if self.holiday:
            return self.holiday.name
        return ""


@dataclass
class CacheStats:
    """Informational snapshot of a holiday cache."""

    size: int
    max_size: int
    most_accessed_year: int | None
    hits: int
    misses: int
    evictions: int
    memory_usage: str

    @property
    def hit_rate(self) -> float:
        """Fraction of lookups that were served from the cache."""
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0
