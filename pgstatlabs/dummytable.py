"""A test table of installed software, keyed by index and read by column."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from pgstatlabs.pgstat import AsnType, NoSuchInstance, NoSuchObject

TABLE_NAME = "testDummyTable"
TABLE_OID = (1, 3, 6, 1, 2, 1, 25, 6, 3)
NULL_OID = (0, 0)
OBJECT_ID = "OBJECT IDENTIFIER"


class DummyColumn(IntEnum):
    """Column numbers of the table."""

    INDEX = 1
    NAME = 2
    ID = 3
    TYPE = 4
    DATE = 5

    @property
    def wire_type(self) -> str:
        """The wire type this column's value is reported with."""
        if self is DummyColumn.ID:
            return OBJECT_ID
        if self in (DummyColumn.NAME, DummyColumn.DATE):
            return AsnType.OCTET_STR.value
        return AsnType.INTEGER.value


MIN_COLUMN = DummyColumn.INDEX
MAX_COLUMN = DummyColumn.DATE


@dataclass
class SoftwareEntry:
    """One installed piece of software."""

    index: int
    name: str = ""
    type: int = 1
    date: bytes = b""


def get_value(entry: SoftwareEntry, column: int) -> int | bytes | tuple[int, ...]:
    """Return the value of ``column`` for ``entry``; raises NoSuchObject for unknown columns."""
    try:
        which = DummyColumn(column)
    except ValueError:
        raise NoSuchObject(f"no column {column} in {TABLE_NAME}") from None
    if which is DummyColumn.INDEX:
        return entry.index
    if which is DummyColumn.NAME:
        return entry.name.encode()
    if which is DummyColumn.ID:
        return NULL_OID
    if which is DummyColumn.TYPE:
        return entry.type
    return bytes(entry.date)


class DummyTable:
    """Software rows, looked up by their index."""

    oid = TABLE_OID
    min_column = MIN_COLUMN
    max_column = MAX_COLUMN

    def __init__(self) -> None:
        self._rows: dict[int, SoftwareEntry] = {}

    def add(self, entry: SoftwareEntry) -> SoftwareEntry:
        """Add ``entry`` as a new row and return it."""
        if entry.index in self._rows:
            raise ValueError(f"row {entry.index} already exists")
        self._rows[entry.index] = entry
        return entry

    def get(self, index: int, column: int) -> int | bytes | tuple[int, ...]:
        """Return the value of one cell."""
        entry = self._rows.get(index)
        if entry is None:
            raise NoSuchInstance(f"no row {index} in {TABLE_NAME}")
        return get_value(entry, column)

    def clear(self) -> None:
        """Remove every row."""
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._rows)