"""Fixed-capacity, recency-ordered, time-bounded cache.

Composes an `EntryStore` (values + refresh timestamps) with a
`RecencyTracker` (eviction order). Freshness is validated lazily on `get`;
eviction on `put` is purely by recency. One lock guards both structures so
every public operation is atomic for threads and asyncio tasks alike.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Generic, List, Optional, TypeVar

from core.entry_store import Entry, EntryStore
from core.errors import ConfigError
from core.recency import RecencyTracker

V = TypeVar("V")

logger = logging.getLogger(__name__)


class Cache(Generic[V]):
    """LRU + TTL cache keyed by string.

    Key behavior:
      - get(): missing -> None; older than ttl -> removed, None; else promoted.
      - put(): at capacity, evicts the least recently used key, then inserts.
        Overwriting a key in a full cache may evict that same key first.
      - keys(): snapshot, least recently used first.
    """

    def __init__(
        self,
        *,
        capacity: int,
        ttl_seconds: float,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        try:
            capacity_n = int(capacity)
            ttl_s = float(ttl_seconds)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid cache setting: {e}") from e

        if isinstance(capacity, bool) or capacity_n != capacity:
            raise ConfigError(f"Cache capacity must be a whole number, got {capacity!r}")
        if capacity_n < 1:
            raise ConfigError("Cache capacity must be at least 1")
        if ttl_s <= 0:
            raise ConfigError("Cache ttl must be positive")

        self._capacity = capacity_n
        self._ttl = ttl_s
        # Monotonic time so expiry isn't affected by wall clock changes
        self._clock = clock or time.monotonic

        self._entries: EntryStore[V] = EntryStore()
        self._recency = RecencyTracker()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if entry.is_stale(self._clock(), self._ttl):
                self._remove(key)
                return None

            self._recency.touch(key)
            return entry.value

    def put(self, key: str, value: V) -> None:
        with self._lock:
            # A full cache evicts before every insert, overwrites included
            if len(self._entries) >= self._capacity:
                self._evict_oldest()

            self._entries.set(key, value, now=self._clock())
            self._recency.touch(key)

    def peek(self, key: str) -> Optional[Entry[V]]:
        """Return the raw entry without promoting it or checking freshness."""
        with self._lock:
            return self._entries.get(key)

    def discard(self, key: str) -> bool:
        with self._lock:
            return self._remove(key)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._recency.clear()

    def keys(self) -> List[str]:
        with self._lock:
            return self._recency.snapshot()

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    # --- helpers (lock must be held) ---

    def _remove(self, key: str) -> bool:
        # Entry and recency slot always leave together
        removed = self._entries.remove(key) is not None
        self._recency.remove(key)
        return removed

    def _evict_oldest(self) -> None:
        victim = self._recency.pop_oldest()
        if victim is None:
            return
        self._entries.remove(victim)
        logger.debug("Evicted least recently used key: %s", victim)
