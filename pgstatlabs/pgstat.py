"""A per-database statistics table, keyed by database id and read by column."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum, IntEnum
from typing import Iterator

TABLE_NAME = "pgstatDatabaseTable"
TABLE_OID = (1, 3, 6, 1, 4, 1, 27645, 3, 1)
MAX_NAME_BYTES = 64


class AsnType(Enum):
    """The wire type a column's value is reported with."""

    INTEGER = "INTEGER"
    OCTET_STR = "OCTET STRING"
    GAUGE = "Gauge32"
    COUNTER = "Counter32"
    UNSIGNED = "Unsigned32"


class Column(IntEnum):
    """Column numbers of the table."""

    ID = 1
    NAME = 2
    BACKENDS = 3
    COMMITS = 4
    ROLLBACKS = 5
    BLOCKS_READ = 6
    BLOCKS_HIT = 7
    TUPLES_RETURNED = 8
    TUPLES_FETCHED = 9
    TUPLES_INSERTED = 10
    TUPLES_UPDATED = 11
    TUPLES_DELETED = 12
    SIZE_MB = 13
    ROLLBACK_RATIO = 14
    CACHE_HIT_RATIO = 15
    TUPLES_MODIFIED = 16

    @property
    def attribute(self) -> str:
        """Name of the entry attribute that holds this column's value."""
        return "database_id" if self is Column.ID else self.name.lower()


MIN_COLUMN = Column.ID
MAX_COLUMN = Column.TUPLES_MODIFIED

_COLUMN_TYPES = {
    Column.ID: AsnType.INTEGER,
    Column.NAME: AsnType.OCTET_STR,
    Column.BACKENDS: AsnType.GAUGE,
    Column.COMMITS: AsnType.COUNTER,
    Column.ROLLBACKS: AsnType.COUNTER,
    Column.BLOCKS_READ: AsnType.COUNTER,
    Column.BLOCKS_HIT: AsnType.COUNTER,
    Column.TUPLES_RETURNED: AsnType.COUNTER,
    Column.TUPLES_FETCHED: AsnType.COUNTER,
    Column.TUPLES_INSERTED: AsnType.COUNTER,
    Column.TUPLES_UPDATED: AsnType.COUNTER,
    Column.TUPLES_DELETED: AsnType.COUNTER,
    Column.SIZE_MB: AsnType.UNSIGNED,
    Column.ROLLBACK_RATIO: AsnType.UNSIGNED,
    Column.CACHE_HIT_RATIO: AsnType.UNSIGNED,
    Column.TUPLES_MODIFIED: AsnType.COUNTER,
}


class NoSuchInstance(LookupError):
    """The requested row does not exist."""


class NoSuchObject(LookupError):
    """The requested column does not exist."""


def column_type(column: int) -> AsnType:
    """Return the wire type of ``column``; raises NoSuchObject for unknown columns."""
    try:
        return _COLUMN_TYPES[Column(column)]
    except ValueError:
        raise NoSuchObject(f"no column {column} in {TABLE_NAME}") from None


@dataclass
class DatabaseEntry:
    """One row: a database's identity and its activity counters."""

    database_id: int
    name: str = ""
    backends: int = 0
    commits: int = 0
    rollbacks: int = 0
    blocks_read: int = 0
    blocks_hit: int = 0
    tuples_returned: int = 0
    tuples_fetched: int = 0
    tuples_inserted: int = 0
    tuples_updated: int = 0
    tuples_deleted: int = 0
    size_mb: int = 0
    rollback_ratio: int = 0
    cache_hit_ratio: int = 0
    tuples_modified: int = 0
    valid: bool = False

    def __post_init__(self) -> None:
        if len(self.name.encode()) > MAX_NAME_BYTES:
            raise ValueError(f"name is longer than {MAX_NAME_BYTES} bytes")
        for item in fields(self):
            if item.name in ("database_id", "name", "valid"):
                continue
            if getattr(self, item.name) < 0:
                raise ValueError(f"{item.name} must not be negative")


class DatabaseTable:
    """Rows of database statistics, kept in index order."""

    oid = TABLE_OID
    min_column = MIN_COLUMN
    max_column = MAX_COLUMN

    def __init__(self) -> None:
        self._rows: dict[int, DatabaseEntry] = {}

    def create_entry(self, database_id: int) -> DatabaseEntry:
        """Add an empty row for ``database_id`` and return it."""
        if database_id in self._rows:
            raise ValueError(f"row {database_id} already exists")
        entry = DatabaseEntry(database_id)
        self._rows[database_id] = entry
        return entry

    def remove_entry(self, database_id: int) -> DatabaseEntry | None:
        """Remove the row for ``database_id``; a missing row is left alone."""
        return self._rows.pop(database_id, None)

    def clear(self) -> None:
        """Remove every row."""
        self._rows.clear()

    def get(self, database_id: int, column: int) -> tuple[AsnType, int | bytes]:
        """Return the wire type and value of one cell."""
        entry = self._rows.get(database_id)
        if entry is None:
            raise NoSuchInstance(f"no row {database_id} in {TABLE_NAME}")
        kind = column_type(column)
        value = getattr(entry, Column(column).attribute)
        if kind is AsnType.OCTET_STR:
            return kind, value.encode()
        return kind, value

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[DatabaseEntry]:
        return iter([self._rows[key] for key in sorted(self._rows)])