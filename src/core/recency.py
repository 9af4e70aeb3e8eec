"""Recency ordering of cached keys.

Keys are kept oldest-touched first. An OrderedDict is a hash map over a
doubly-linked list, so touch, removal and eviction of the oldest key are
all O(1).
"""

from __future__ import annotations

from collections import OrderedDict
from typing import List, Optional


class RecencyTracker:
    # Each key appears at most once; the first key is the eviction victim
    def __init__(self) -> None:
        self._order: "OrderedDict[str, None]" = OrderedDict()

    def touch(self, key: str) -> None:
        """Mark `key` as most recently used, adding it if unknown."""
        self._order[key] = None
        self._order.move_to_end(key, last=True)

    def remove(self, key: str) -> bool:
        if key not in self._order:
            return False
        del self._order[key]
        return True

    def pop_oldest(self) -> Optional[str]:
        if not self._order:
            return None
        key, _ = self._order.popitem(last=False)
        return key

    def snapshot(self) -> List[str]:
        return list(self._order)

    def clear(self) -> None:
        self._order.clear()
