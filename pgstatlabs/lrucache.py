"""A string cache that evicts the least recently used entry."""

from __future__ import annotations

from collections import OrderedDict

MAX_CACHE_SIZE = 100000


class LRUCache:
    """Maps keys to values, discarding the oldest entry when full.

    After each insertion, if the number of entries has reached
    ``max_size``, the least recently used entry is removed, so at most
    ``max_size - 1`` entries survive an insertion.
    """

    def __init__(self, max_size: int = MAX_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._entries: OrderedDict[str, str] = OrderedDict()

    def find(self, key: str) -> str | None:
        """Return the value for ``key`` and mark it most recently used."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def add(self, key: str, value: str) -> None:
        """Insert or replace ``key`` as the most recently used entry."""
        self._entries[key] = value
        self._entries.move_to_end(key)
        if len(self._entries) >= self.max_size:
            self._entries.popitem(last=False)

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries