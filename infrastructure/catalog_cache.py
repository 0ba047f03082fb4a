"""
In-memory TTL cache for exercise catalog responses.

ExerciseDB is rate limited, so fetched catalogs are cached for a bounded
time. The cache is an explicit object owned by the catalog provider; there
is no module-level state.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from core.constants import CATALOG_CACHE_MAX_SIZE, CATALOG_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Cache entry with TTL support."""

    value: Any
    created_at: float


class TTLCache:
    """
    Size-bounded cache whose entries expire after a fixed TTL.

    When full, expired entries are dropped first, then the oldest 20%.
    """

    def __init__(
        self,
        ttl_seconds: float = CATALOG_CACHE_TTL_SECONDS,
        max_size: int = CATALOG_CACHE_MAX_SIZE,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            ttl_seconds: Lifetime of an entry in seconds
            max_size: Maximum number of entries
            clock: Time source (injectable for tests)
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_size < 1:
            raise ValueError("max_size must be at least 1")

        self._entries: Dict[str, CacheEntry] = {}
        self._ttl = ttl_seconds
        self._max_size = max_size
        self._clock = clock

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.created_at > self._ttl

    def get(self, key: str) -> Optional[Any]:
        """
        Get a value if present and not expired.

        Args:
            key: Cache key

        Returns:
            Cached value, or None if missing or expired
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._is_expired(entry, self._clock()):
            del self._entries[key]
            logger.debug(f"Cache entry expired: {key}")
            return None

        return entry.value

    def set(self, key: str, value: Any) -> None:
        """Store a value, evicting old entries if the cache is full."""
        if key not in self._entries and len(self._entries) >= self._max_size:
            self._evict_oldest_entries()

        self._entries[key] = CacheEntry(value=value, created_at=self._clock())

    def _evict_oldest_entries(self) -> None:
        now = self._clock()
        expired_keys = [
            k for k, v in self._entries.items() if self._is_expired(v, now)
        ]
        for key in expired_keys:
            del self._entries[key]

        if len(self._entries) >= self._max_size:
            entries = sorted(self._entries.items(), key=lambda x: x[1].created_at)
            num_to_remove = max(1, len(entries) // 5)
            for key, _ in entries[:num_to_remove]:
                del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> dict:
        """
        Get cache statistics for monitoring.

        Returns:
            Dictionary with cache stats
        """
        now = self._clock()
        valid_entries = sum(
            1 for entry in self._entries.values() if not self._is_expired(entry, now)
        )
        return {
            "total_entries": len(self._entries),
            "valid_entries": valid_entries,
            "max_size": self._max_size,
            "ttl_seconds": self._ttl,
        }
