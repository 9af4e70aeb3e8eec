"""Entry storage for the lookup cache.

Maps a key to an immutable `Entry` holding the value and the monotonic
time it was last fetched. Entries are replaced wholesale, never mutated.
The store does no locking of its own; `core.cache.Cache` serializes access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar

V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class Entry(Generic[V]):
    key: str
    value: V
    refreshed_at: float  # time.monotonic()

    def age(self, now: float) -> float:
        return now - self.refreshed_at

    def is_stale(self, now: float, ttl: float) -> bool:
        # Age equal to ttl still counts as fresh
        return self.age(now) > ttl


class EntryStore(Generic[V]):
    def __init__(self) -> None:
        self._entries: Dict[str, Entry[V]] = {}

    def get(self, key: str) -> Optional[Entry[V]]:
        return self._entries.get(key)

    def set(self, key: str, value: V, *, now: float) -> Entry[V]:
        entry = Entry(key=key, value=value, refreshed_at=now)
        self._entries[key] = entry
        return entry

    def remove(self, key: str) -> Optional[Entry[V]]:
        return self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
