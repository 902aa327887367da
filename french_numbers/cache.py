"""
Bounded least-recently-used cache of finished conversions.

Keys are normalized texts, values the integers they convert to. Recency is
kept by an OrderedDict (move_to_end / popitem are O(1)), and every operation
runs under a single lock so that "find → mark recent" and
"check size → evict → insert" are atomic with respect to other threads.
"""

from __future__ import annotations

import threading
from collections import OrderedDict

from .config import DEFAULT_CACHE_CAPACITY
from .models import CacheStats


class ConversionCache:
    """Thread-safe LRU mapping from normalized text to integer value.

    Usage:
        cache = ConversionCache(capacity=2)
        cache.put("cent", 100)
        cache.get("cent")      # 100, now most recently used
        cache.get("mille")     # None, counted as a miss
        cache.stats().hit_ratio  # 0.5
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[str, int] = OrderedDict()
        self._hits = 0
        self._lookups = 0
        self._lock = threading.Lock()

    def get(self, key: str) -> int | None:
        """Return the cached value and mark *key* most recently used, or None."""
        with self._lock:
            self._lookups += 1
            if key not in self._entries:
                return None
            self._hits += 1
            self._entries.move_to_end(key)
            return self._entries[key]

    def put(self, key: str, value: int) -> None:
        """Insert or update *key*, evicting the least recently used entry when full."""
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self.capacity:
                self._entries.popitem(last=False)
            self._entries[key] = value

    def clear(self) -> None:
        """Drop every entry and reset the hit/lookup counters."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._lookups = 0

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                capacity=self.capacity,
                hits=self._hits,
                lookups=self._lookups,
                hit_ratio=self._hits / self._lookups if self._lookups else 0.0,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        # Membership check only: no recency update, no counters
        with self._lock:
            return key in self._entries
