"""Bounded in-memory cache of holidays per year."""

import logging
import sys
import threading
from collections import OrderedDict
from collections.abc import Callable, Sequence

from jpbizdays.errors import InvalidArgumentError
from jpbizdays.models import CacheStats, Holiday

logger = logging.getLogger(__name__)

DEFAULT_MAX_CACHE_SIZE = 10


class HolidayCache:
    """
    Memoizes holiday lists by year with recency+frequency eviction.

    Every touch (a hit or a put) moves the year to the most-recent end and
    bumps its access count. When full, years accessed at most once ("cold")
    are evicted oldest first; only if every year is hot does the overall
    oldest entry go.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_CACHE_SIZE) -> None:
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 1:
            msg = f"max_size must be a positive int, got {max_size!r}"
            raise InvalidArgumentError(msg, parameter="max_size", value=max_size)

        self.max_size = max_size
        self._lock = threading.Lock()
        # Recency order: least recently touched first
        self._entries: OrderedDict[int, tuple[Holiday, ...]] = OrderedDict()
        self._access_counts: dict[int, int] = {}
        # Years with access count <= 1, in recency order
        self._cold: OrderedDict[int, None] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, year: int) -> tuple[Holiday, ...] | None:
        """
        Get the cached holidays for a year, or None on a miss.

        A miss leaves the entries and their recency untouched; only the miss
        counter in stats() changes.
        """
        _validate_year(year)
        with self._lock:
            holidays = self._entries.get(year)
            if holidays is None:
                self._misses += 1
                return None
            self._hits += 1
            self._touch(year)
            return holidays

    def put(self, year: int, holidays: Sequence[Holiday]) -> tuple[Holiday, ...]:
        """Store the holidays for a year, evicting first if the cache is full."""
        _validate_year(year)
        frozen = _freeze(holidays)
        with self._lock:
            if year not in self._entries and len(self._entries) >= self.max_size:
                self._evict()
            self._entries[year] = frozen
            self._touch(year)
        return frozen

    def get_or_compute(
        self, year: int, compute: Callable[[int], Sequence[Holiday]]
    ) -> tuple[Holiday, ...]:
        """Read-through lookup: compute and store the year on a miss."""
        cached = self.get(year)
        if cached is not None:
            return cached
        return self.put(year, compute(year))

    def invalidate(self, year: int) -> None:
        """Drop one year from the cache."""
        _validate_year(year)
        with self._lock:
            self._entries.pop(year, None)
            self._access_counts.pop(year, None)
            self._cold.pop(year, None)

    def invalidate_all(self) -> None:
        """Drop every cached year."""
        with self._lock:
            self._entries.clear()
            self._access_counts.clear()
            self._cold.clear()

    def size(self) -> int:
        """Number of cached years."""
        with self._lock:
            return len(self._entries)

    def years(self) -> list[int]:
        """Cached years, sorted."""
        with self._lock:
            return sorted(self._entries)

    def access_count(self, year: int) -> int:
        """How many times a cached year has been touched (0 if not cached)."""
        with self._lock:
            return self._access_counts.get(year, 0)

    def stats(self) -> CacheStats:
        """Snapshot of cache usage."""
        with self._lock:
            most_accessed = (
                max(self._access_counts, key=self._access_counts.__getitem__)
                if self._access_counts
                else None
            )
            return CacheStats(
                size=len(self._entries),
                max_size=self.max_size,
                most_accessed_year=most_accessed,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                memory_usage=_format_bytes(self._estimate_memory()),
            )

    def _touch(self, year: int) -> None:
        """Record an access. Caller must hold the lock."""
        self._entries.move_to_end(year)
        count = self._access_counts.get(year, 0) + 1
        self._access_counts[year] = count
        if count <= 1:
            self._cold[year] = None
            self._cold.move_to_end(year)
        else:
            self._cold.pop(year, None)

    def _evict(self) -> None:
        """Evict one entry. Caller must hold the lock."""
        if self._cold:
            year, _ = self._cold.popitem(last=False)
        else:
            year = next(iter(self._entries))
        del self._entries[year]
        del self._access_counts[year]
        self._evictions += 1
        logger.debug("Evicted holidays for %d from cache", year)

    def _estimate_memory(self) -> int:
        """Rough size of the cached data in bytes. Caller must hold the lock."""
        total = sys.getsizeof(self._entries)
        for holidays in self._entries.values():
            total += sys.getsizeof(holidays)
            total += sum(
                sys.getsizeof(holiday) + sys.getsizeof(holiday.name) for holiday in holidays
            )
        return total


def _validate_year(year: object) -> None:
    if isinstance(year, bool) or not isinstance(year, int) or year <= 0:
        msg = f"year must be a positive int, got {year!r}"
        raise InvalidArgumentError(msg, parameter="year", value=year)


def _freeze(holidays: Sequence[Holiday]) -> tuple[Holiday, ...]:
    if not isinstance(holidays, (list, tuple)):
        msg = f"holidays must be a list or tuple, got {type(holidays).__name__}"
        raise InvalidArgumentError(msg, parameter="holidays", value=holidays)
    for index, holiday in enumerate(holidays):
        if not isinstance(holiday, Holiday):
            msg = f"holidays[{index}] must be a Holiday, got {type(holiday).__name__}"
            raise InvalidArgumentError(msg, parameter="holidays", value=holiday)
    return tuple(holidays)


def _format_bytes(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
