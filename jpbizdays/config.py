"""Configuration management."""

import configparser
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from jpbizdays.dates import SATURDAY, SUNDAY, to_date
from jpbizdays.errors import ConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "jpbizdays" / "config.ini"
DEFAULT_WEEKEND_DAYS = frozenset({SUNDAY, SATURDAY})

ENV_WEEKEND_DAYS = "JPBIZDAYS_WEEKEND_DAYS"
ENV_ADDITIONAL_HOLIDAYS = "JPBIZDAYS_ADDITIONAL_HOLIDAYS"
ENV_ADDITIONAL_BUSINESS_DAYS = "JPBIZDAYS_ADDITIONAL_BUSINESS_DAYS"


@dataclass
class Configuration:
    """
    Weekend days and per-date overrides used by the business day rules.

    Weekdays are numbered 0=Sunday ... 6=Saturday.
    """

    additional_holidays: set[date] = field(default_factory=set)
    additional_business_days: set[date] = field(default_factory=set)
    weekend_days: frozenset[int] = DEFAULT_WEEKEND_DAYS

    def __post_init__(self) -> None:
        self.additional_holidays = set(
            _parse_dates(self.additional_holidays, "additional_holidays")
        )
        self.additional_business_days = set(
            _parse_dates(self.additional_business_days, "additional_business_days")
        )
        self.weekend_days = _validate_weekend_days(self.weekend_days)

    def is_weekend_weekday(self, weekday: int) -> bool:
        """Check if a weekday (0=Sunday) is part of the weekend."""
        return weekday in self.weekend_days

    def is_custom_holiday(self, target_date: date) -> bool:
        """Check if a date is a company-specific non-business day."""
        return target_date in self.additional_holidays

    def is_custom_business_day(self, target_date: date) -> bool:
        """Check if a date is forced to be a business day."""
        return target_date in self.additional_business_days

    def add_holiday(self, value: date | str) -> None:
        """Mark a date as a non-business day."""
        target_date = _parse_date(value, "additional_holidays")
        self.additional_business_days.discard(target_date)
        self.additional_holidays.add(target_date)

    def add_business_day(self, value: date | str) -> None:
        """Mark a date as a business day, overriding weekends and holidays."""
        target_date = _parse_date(value, "additional_business_days")
        self.additional_holidays.discard(target_date)
        self.additional_business_days.add(target_date)

    def remove_override(self, value: date | str) -> None:
        """Remove any custom holiday or business day on a date."""
        target_date = _parse_date(value, "date")
        self.additional_holidays.discard(target_date)
        self.additional_business_days.discard(target_date)

    def set_weekend_days(self, days: Iterable[int]) -> None:
        """Replace the set of weekend weekdays."""
        self.weekend_days = _validate_weekend_days(days)

    def reset(self) -> None:
        """Restore defaults: Saturday/Sunday weekend, no overrides."""
        self.additional_holidays.clear()
        self.additional_business_days.clear()
        self.weekend_days = DEFAULT_WEEKEND_DAYS

    @classmethod
    def from_env(cls) -> "Configuration | None":
        """Load configuration from environment variables."""
        keys = (ENV_WEEKEND_DAYS, ENV_ADDITIONAL_HOLIDAYS, ENV_ADDITIONAL_BUSINESS_DAYS)
        if not any(key in os.environ for key in keys):
            return None

        return cls(
            additional_holidays=set(_split(os.environ.get(ENV_ADDITIONAL_HOLIDAYS, ""))),
            additional_business_days=set(_split(os.environ.get(ENV_ADDITIONAL_BUSINESS_DAYS, ""))),
            weekend_days=_parse_weekdays(os.environ.get(ENV_WEEKEND_DAYS, "0,6")),
        )

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Configuration | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path)
        section = config["calendar"] if config.has_section("calendar") else {}
        logger.info("Loaded calendar configuration from %s", path)
        return cls(
            additional_holidays=set(_split(section.get("additionalHolidays", ""))),
            additional_business_days=set(_split(section.get("additionalBusinessDays", ""))),
            weekend_days=_parse_weekdays(section.get("weekendDays", "0,6")),
        )

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["calendar"] = {
            "weekendDays": ",".join(str(day) for day in sorted(self.weekend_days)),
            "additionalHolidays": ",".join(d.isoformat() for d in sorted(self.additional_holidays)),
            "additionalBusinessDays": ",".join(
                d.isoformat() for d in sorted(self.additional_business_days)
            ),
        }
        with path.open("w") as config_file:
            config.write(config_file)


def _split(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _parse_date(value: object, key: str) -> date:
    try:
        return to_date(value, key)
    except InvalidArgumentError as e:
        raise ConfigurationError(str(e), parameter=key, value=value) from e


def _parse_dates(values: Iterable[object], key: str) -> list[date]:
    if isinstance(values, (str, date)):
        msg = f"{key} must be a collection of dates, got {type(values).__name__}"
        raise ConfigurationError(msg, parameter=key, value=values)
    return [_parse_date(value, key) for value in values]


def _parse_weekdays(raw: str) -> list[int]:
    try:
        return [int(part) for part in _split(raw)]
    except ValueError as e:
        msg = f"weekend_days must be comma-separated integers, got {raw!r}"
        raise ConfigurationError(msg, parameter="weekend_days", value=raw) from e


def _validate_weekend_days(days: Iterable[int]) -> frozenset[int]:
    if isinstance(days, (str, bytes)):
        msg = f"weekend_days must be a collection of integers, got {days!r}"
        raise ConfigurationError(msg, parameter="weekend_days", value=days)

    values = list(days)
    if not values:
        msg = "weekend_days cannot be empty"
        raise ConfigurationError(msg, parameter="weekend_days", value=values)
    for day in values:
        if isinstance(day, bool) or not isinstance(day, int) or not SUNDAY <= day <= SATURDAY:
            msg = f"weekend_days must contain integers between 0 and 6, got {day!r}"
            raise ConfigurationError(msg, parameter="weekend_days", value=values)
    if len(set(values)) != len(values):
        msg = f"weekend_days cannot contain duplicates, got {values}"
        raise ConfigurationError(msg, parameter="weekend_days", value=values)
    if len(set(values)) == 7:
        msg = "weekend_days cannot cover the whole week"
        raise ConfigurationError(msg, parameter="weekend_days", value=values)
    return frozenset(values)
