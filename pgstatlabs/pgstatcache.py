"""Fill the database statistics table from a data file, reloading it on expiry."""

from __future__ import annotations

import time
from dataclasses import fields
from os import PathLike
from typing import Callable

from pgstatlabs.pgstat import AsnType, Column, DatabaseEntry, DatabaseTable

CACHE_TIMEOUT = 60
DATA_PATH = "/data/for/pgstatDatabaseTable"

_VALUE_COLUMNS = [column for column in Column if column is not Column.ID]
_INTEGER_COLUMNS = _VALUE_COLUMNS[1:]


def _parse_line(line: str, lineno: int) -> DatabaseEntry:
    parts = line.split()
    if len(parts) > 1 + len(_VALUE_COLUMNS):
        raise ValueError(f"line {lineno}: too many fields")
    try:
        database_id = int(parts[0])
        numbers = [int(part) for part in parts[2:]]
    except ValueError:
        raise ValueError(f"line {lineno}: expected integer fields") from None
    values: dict[str, object] = {}
    if len(parts) > 1:
        values[Column.NAME.attribute] = parts[1]
    for column, number in zip(_INTEGER_COLUMNS, numbers):
        values[column.attribute] = number
    return DatabaseEntry(database_id, **values)


def load_table(table: DatabaseTable, path: str | PathLike[str] = DATA_PATH) -> list[DatabaseEntry]:
    """Add one row per non-blank line of ``path`` to ``table``.

    Each line holds the database id, then optionally the name and the
    remaining columns in column order, separated by whitespace.
    """
    loaded = []
    with open(path, "r", encoding="utf-8") as source:
        for lineno, line in enumerate(source, start=1):
            if not line.strip():
                continue
            parsed = _parse_line(line, lineno)
            entry = table.create_entry(parsed.database_id)
            for item in fields(parsed):
                if item.name != "database_id":
                    setattr(entry, item.name, getattr(parsed, item.name))
            entry.valid = True
            loaded.append(entry)
    return loaded


class TableCache:
    """Keeps ``table`` filled from ``path``, reloading it once ``timeout`` seconds pass."""

    def __init__(
        self,
        table: DatabaseTable,
        path: str | PathLike[str] = DATA_PATH,
        timeout: float = CACHE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if timeout < 0:
            raise ValueError("timeout must not be negative")
        self.table = table
        self.path = path
        self.timeout = timeout
        self._clock = clock
        self._loaded_at: float | None = None

    @property
    def valid(self) -> bool:
        return self._loaded_at is not None

    @property
    def expired(self) -> bool:
        return self._loaded_at is None or self._clock() - self._loaded_at >= self.timeout

    def ensure_loaded(self) -> bool:
        """Reload the table if it is invalid or expired; return whether it was reloaded."""
        if not self.expired:
            return False
        self.invalidate()
        load_table(self.table, self.path)
        self._loaded_at = self._clock()
        return True

    def invalidate(self) -> None:
        """Empty the table and mark the cache as needing a reload."""
        self.table.clear()
        self._loaded_at = None

    def get(self, database_id: int, column: int) -> tuple[AsnType, int | bytes]:
        """Return one cell, loading the table first if needed."""
        self.ensure_loaded()
        return self.table.get(database_id, column)