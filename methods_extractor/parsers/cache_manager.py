from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Hashable
from dataclasses import dataclass

from loguru import logger

from methods_extractor.core import logs as ls


@dataclass
class CacheStats:
    """
    Statistics for cache usage.

    Attributes:
        hits (int): Number of cache hits.
        misses (int): Number of cache misses.
        evictions (int): Number of evicted entries.
    """

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class CacheManager[K: Hashable, V]:
    """
    A thread-safe cache with least-recently-used eviction.

    Values may be None; `lookup` tells a cached None apart from a miss.

    Attributes:
        max_entries (int): Maximum number of entries in the cache.
    """

    def __init__(self, max_entries: int = 1000) -> None:
        """
        Initialize the CacheManager.

        Args:
            max_entries (int): Maximum number of entries to store, at least 1.
        """
        self.max_entries = max(1, max_entries)
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._stats = CacheStats()
        self._lock = threading.Lock()

    def lookup(self, key: K) -> tuple[bool, V | None]:
        """
        Retrieve a value from the cache, marking it as most recently used.

        Args:
            key (K): The key to retrieve.

        Returns:
            tuple[bool, V | None]: Whether the key was cached, and its value.
        """
        with self._lock:
            if key not in self._entries:
                self._stats.misses += 1
                return False, None
            self._entries.move_to_end(key)
            self._stats.hits += 1
            return True, self._entries[key]

    def get(self, key: K) -> V | None:
        return self.lookup(key)[1]

    def set(self, key: K, value: V) -> None:
        """
        Set a value in the cache, evicting the least recently used entries
        beyond `max_entries`.

        Args:
            key (K): The key to set.
            value (V): The value to cache.
        """
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
                self._stats.evictions += 1
                logger.debug(ls.CACHE_EVICTED.format(size=len(self._entries)))

    def stats(self) -> CacheStats:
        """
        Get a snapshot of the cache statistics.

        Returns:
            CacheStats: Hits, misses and evictions so far.
        """
        with self._lock:
            return CacheStats(
                hits=self._stats.hits,
                misses=self._stats.misses,
                evictions=self._stats.evictions,
            )

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> list[K]:
        """
        Get the cached keys, least recently used first.

        Returns:
            list[K]: List of cache keys.
        """
        with self._lock:
            return list(self._entries.keys())

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug(ls.CACHE_CLEARED.format(count=count))

    def __contains__(self, key: K) -> bool:
        """Check membership without updating recency or statistics."""
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        return self.size()
