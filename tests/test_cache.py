"""Tests for the holiday cache."""

import threading
from datetime import date

import pytest

from jpbizdays.cache import DEFAULT_MAX_CACHE_SIZE, HolidayCache
from jpbizdays.errors import InvalidArgumentError
from jpbizdays.holidays import HolidayEngine
from jpbizdays.models import Holiday, HolidayKind


def _holidays(year: int) -> list[Holiday]:
    return [Holiday(date(year, 1, 1), "New Year's Day", HolidayKind.FIXED)]


def test_default_max_size():
    """Default capacity is ten years."""
    assert HolidayCache().max_size == DEFAULT_MAX_CACHE_SIZE == 10


def test_miss_returns_none():
    """A miss is a normal result, not an error."""
    cache = HolidayCache()
    assert cache.get(2024) is None
    assert cache.size() == 0
    assert cache.stats().misses == 1


def test_miss_only_changes_the_miss_counter():
    """A miss leaves entries, access counts and eviction order alone."""
    cache = HolidayCache(max_size=2)
    cache.put(2023, _holidays(2023))
    cache.put(2024, _holidays(2024))

    assert cache.get(2030) is None
    assert cache.years() == [2023, 2024]
    assert cache.access_count(2023) == cache.access_count(2024) == 1
    assert cache.access_count(2030) == 0

    cache.put(2025, _holidays(2025))
    assert cache.years() == [2024, 2025]

    stats = cache.stats()
    assert (stats.hits, stats.misses, stats.evictions) == (0, 1, 1)


def test_put_and_get():
    """Stored lists come back frozen."""
    cache = HolidayCache()
    holidays = _holidays(2024)
    cache.put(2024, holidays)

    cached = cache.get(2024)
    assert cached == tuple(holidays)
    assert isinstance(cached, tuple)


def test_stored_list_is_isolated_from_caller():
    """Mutating the caller's list does not change the cache."""
    cache = HolidayCache()
    holidays = _holidays(2024)
    cache.put(2024, holidays)
    holidays.append(Holiday(date(2024, 2, 11), "National Foundation Day", HolidayKind.FIXED))

    assert len(cache.get(2024)) == 1


def test_access_counts():
    """Puts and hits both count as touches."""
    cache = HolidayCache()
    cache.put(2024, _holidays(2024))
    assert cache.access_count(2024) == 1
    cache.get(2024)
    cache.get(2024)
    assert cache.access_count(2024) == 3
    assert cache.access_count(2025) == 0


def test_evicts_cold_entry_first():
    """Years accessed once are evicted before frequently used ones."""
    cache = HolidayCache(max_size=3)
    for year in (2020, 2021, 2022):
        cache.put(year, _holidays(year))
    cache.get(2020)
    cache.get(2021)

    cache.put(2023, _holidays(2023))

    assert cache.years() == [2020, 2021, 2023]


def test_cold_entry_evicted_even_if_more_recent():
    """An older hot entry survives a newer cold one."""
    cache = HolidayCache(max_size=2)
    cache.put(2020, _holidays(2020))
    cache.get(2020)  # 2020 is hot but least recent once 2021 arrives
    cache.put(2021, _holidays(2021))

    cache.put(2022, _holidays(2022))

    assert cache.years() == [2020, 2022]


def test_oldest_cold_entry_evicted():
    """Among cold entries the least recently touched goes first."""
    cache = HolidayCache(max_size=3)
    for year in (2020, 2021, 2022):
        cache.put(year, _holidays(year))

    cache.put(2023, _holidays(2023))

    assert cache.years() == [2021, 2022, 2023]


def test_evicts_oldest_when_all_hot():
    """With no cold entries the least recently touched year goes."""
    cache = HolidayCache(max_size=2)
    cache.put(2020, _holidays(2020))
    cache.put(2021, _holidays(2021))
    cache.get(2021)
    cache.get(2020)  # recency order is now 2021, 2020

    cache.put(2022, _holidays(2022))

    assert cache.years() == [2020, 2022]
    assert cache.stats().evictions == 1


def test_reput_existing_year_does_not_evict():
    """Replacing a cached year at capacity keeps the other entries."""
    cache = HolidayCache(max_size=2)
    cache.put(2020, _holidays(2020))
    cache.put(2021, _holidays(2021))
    cache.put(2021, _holidays(2021))

    assert cache.years() == [2020, 2021]
    assert cache.stats().evictions == 0


def test_size_never_exceeds_max():
    """Any sequence of puts stays within capacity."""
    cache = HolidayCache(max_size=5)
    for year in range(2000, 2050):
        cache.put(year, _holidays(year))
        if year % 3 == 0:
            cache.get(year)
        assert cache.size() <= 5


def test_invalidate():
    """Invalidation removes entries and their bookkeeping."""
    cache = HolidayCache()
    cache.put(2024, _holidays(2024))
    cache.put(2025, _holidays(2025))

    cache.invalidate(2024)
    assert cache.get(2024) is None
    assert cache.access_count(2024) == 0
    assert cache.years() == [2025]

    cache.invalidate(1999)  # not cached, nothing happens
    cache.invalidate_all()
    assert cache.size() == 0
    assert cache.years() == []


def test_get_or_compute_computes_once():
    """The second lookup is a hit and does not recompute."""
    cache = HolidayCache()
    engine = HolidayEngine()
    calls = []

    def compute(year):
        calls.append(year)
        return engine.holidays_in_year(year)

    first = cache.get_or_compute(2024, compute)
    second = cache.get_or_compute(2024, compute)

    assert first == second
    assert calls == [2024]
    assert cache.access_count(2024) == 2


def test_stats():
    """Stats report size, capacity, hottest year and memory estimate."""
    cache = HolidayCache(max_size=4)
    assert cache.stats().most_accessed_year is None

    cache.put(2024, _holidays(2024))
    cache.put(2025, _holidays(2025))
    cache.get(2024)
    cache.get(2023)

    stats = cache.stats()
    assert stats.size == 2
    assert stats.max_size == 4
    assert stats.most_accessed_year == 2024
    assert stats.hits == 1
    assert stats.misses == 1
    assert stats.hit_rate == pytest.approx(0.5)
    assert stats.memory_usage.endswith("B")


@pytest.mark.parametrize("year", [0, -1, "2024", 2024.0, None, True])
def test_invalid_year(year):
    """Years must be positive integers."""
    cache = HolidayCache()
    with pytest.raises(InvalidArgumentError):
        cache.get(year)
    with pytest.raises(InvalidArgumentError):
        cache.put(year, [])
    with pytest.raises(InvalidArgumentError):
        cache.invalidate(year)


def test_invalid_holidays():
    """Only lists or tuples of Holiday objects can be stored."""
    cache = HolidayCache()
    with pytest.raises(InvalidArgumentError):
        cache.put(2024, "holidays")
    with pytest.raises(InvalidArgumentError):
        cache.put(2024, [date(2024, 1, 1)])
    assert cache.size() == 0


@pytest.mark.parametrize("max_size", [0, -3, 2.5, None])
def test_invalid_max_size(max_size):
    """Capacity must be a positive integer."""
    with pytest.raises(InvalidArgumentError):
        HolidayCache(max_size=max_size)


def test_concurrent_access_keeps_state_consistent():
    """Many threads hitting the same years never overflow or corrupt the cache."""
    cache = HolidayCache(max_size=5)
    engine = HolidayEngine()
    errors = []

    def worker(offset: int) -> None:
        try:
            for i in range(200):
                year = 2000 + (i * 7 + offset) % 12
                cache.get_or_compute(year, engine.holidays_in_year)
                assert cache.size() <= 5
        except Exception as e:  # noqa: BLE001
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert cache.size() <= 5
    years = cache.years()
    assert len(years) == len(set(years))
    assert set(cache._cold) <= set(years)
    assert set(cache._access_counts) == set(years)
