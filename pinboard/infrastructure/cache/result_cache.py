"""In-process TTL cache for search results.

One instance per SearchService (per process/worker). Entries are never
invalidated by member writes; staleness is bounded by the TTL. Expired
entries are treated as misses on read and removed by sweep(), which runs
after every put() instead of on a background timer.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from pinboard.application.dtos.search import CacheEntry, SearchQuery, SearchResult
from pinboard.infrastructure.cache.keys import search_result_key

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300


class ResultCache:
    """Dict-backed search result cache with lazy expiry.

    Args:
        ttl_seconds: Maximum entry age in seconds (default 300).
        clock: Monotonic time source; injectable for tests.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def key_for(self, query: SearchQuery) -> str:
        return search_result_key(query)

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.stored_at >= self.ttl_seconds

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry for key if it is younger than the TTL, else None."""
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Cache MISS: %s", key)
            return None
        if self._is_expired(entry, self._clock()):
            logger.debug("Cache EXPIRED: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return entry

    def put(self, key: str, result: SearchResult) -> None:
        """Store result under key, then sweep expired entries."""
        self._entries[key] = CacheEntry(result=result, stored_at=self._clock())
        logger.debug("Cache SET: %s (TTL: %ss)", key, self.ttl_seconds)
        self.sweep()

    def sweep(self) -> int:
        """Delete every expired entry. Returns the number removed."""
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if self._is_expired(entry, now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Cache SWEEP: %s expired entries removed", len(expired))
        return len(expired)

    def clear(self) -> None:
        """Remove every entry."""
        count = len(self._entries)
        self._entries.clear()
        logger.info("Search cache CLEARED: %s entries", count)
