"""A small fixed-capacity cache that keeps private copies of memory blocks."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence

MAX_CACHE_BUF = 100
MAX_CACHE_ENTRIES = 10


@dataclass(frozen=True)
class CacheEntry:
    """One cached block of bytes."""

    block: bytes

    @property
    def size(self) -> int:
        return len(self.block)

    @property
    def address(self) -> int:
        """An identifier for the stored block, unique while it is alive."""
        return id(self.block)


class CacheFullError(Exception):
    """Raised when a block is added to a cache that has no room left."""


class BlockCache:
    """Holds copies of up to ``capacity`` blocks in insertion order."""

    def __init__(self, capacity: int = MAX_CACHE_ENTRIES) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._entries: list[CacheEntry] = []

    def add(self, data: bytes | bytearray | memoryview) -> CacheEntry:
        """Store a copy of ``data`` and return the new entry."""
        if len(self._entries) >= self.capacity:
            raise CacheFullError(f"cache holds at most {self.capacity} entries")
        entry = CacheEntry(bytes(data))
        self._entries.append(entry)
        return entry

    def report(self) -> str:
        """Describe every entry: its position, size and address."""
        body = "".join(
            f"\n{index:2d}. {entry.size:2d} bytes at 0x{entry.address:X}"
            for index, entry in enumerate(self._entries)
        )
        return body + "\n"

    def clear(self) -> None:
        """Drop every stored block."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CacheEntry]:
        return iter(self._entries)


def rnd(limit: int, rng: random.Random | None = None) -> int:
    """Return a random integer scaled into ``[0, limit)``."""
    source = rng if rng is not None else random
    return int(source.random() * limit)


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a cache with five random-sized blocks and print its contents."""
    rng = random.Random()
    cache = BlockCache(MAX_CACHE_ENTRIES)
    for _ in range(5):
        cache.add(bytes(rnd(MAX_CACHE_BUF, rng)))
    sys.stdout.write(cache.report())
    cache.clear()
    return 0