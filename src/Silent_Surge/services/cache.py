"""In-memory TTL cache owned by a single signal adapter.

Each adapter builds its own ``TTLCache`` and keeps it for the life of the
process; caches are never shared between adapters. Entries are stamped with
a monotonic clock reading and are served only while younger than the TTL.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Generic, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")

# ---------------------------------------------------------------------------
# Constants (TTL values in seconds)
# ---------------------------------------------------------------------------

TTL_COMMUNITY_POSTS: Final[float] = 2 * 60  # 2 minutes
TTL_DELIVERY: Final[float] = 3 * 60  # 3 minutes

# Lazy cleanup: run eviction at most every N accesses
LAZY_CLEANUP_INTERVAL: Final[int] = 100


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """A cached value and the clock reading at which it was fetched."""

    value: V
    fetched_at: float


class TTLCache(Generic[V]):
    """Key -> (value, fetched_at) store with a fixed TTL.

    Usage::

        cache: TTLCache[float] = TTLCache("delivery", ttl_seconds=TTL_DELIVERY)
        cached = cache.get("RELIANCE")
        if cached is None:
            value = await fetch_delivery("RELIANCE")
            cache.set("RELIANCE", value)
    """

    def __init__(
        self,
        name: str,
        *,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._name = name
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry[V]] = {}
        self._access_count: int = 0

        logger.debug("TTLCache %s initialized: ttl=%.0fs", name, ttl_seconds)

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> V | None:
        """Return the value for *key*, or None on miss or expiry."""
        self._increment_access_count()

        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Cache miss: %s:%s", self._name, key)
            return None
        if self._is_expired(entry):
            del self._entries[key]
            logger.debug("Cache expired: %s:%s", self._name, key)
            return None
        logger.debug("Cache hit: %s:%s", self._name, key)
        return entry.value

    def set(self, key: str, value: V) -> None:
        """Store *value* under *key*, stamped with the current clock."""
        self._entries[key] = CacheEntry(value=value, fetched_at=self._clock())

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _is_expired(self, entry: CacheEntry[V]) -> bool:
        # An entry exactly TTL old is stale.
        return self._clock() - entry.fetched_at >= self._ttl_seconds

    def _increment_access_count(self) -> None:
        """Track accesses and trigger lazy cleanup when threshold is reached."""
        self._access_count += 1
        if self._access_count >= LAZY_CLEANUP_INTERVAL:
            self._access_count = 0
            self._evict_expired()

    def _evict_expired(self) -> None:
        expired_keys = [k for k, v in self._entries.items() if self._is_expired(v)]
        for key in expired_keys:
            del self._entries[key]

        if expired_keys:
            logger.debug(
                "Lazy cleanup: evicted %d expired %s entries",
                len(expired_keys),
                self._name,
            )
