import pytest

from pgstatlabs.dummytable import (
    DummyColumn,
    DummyTable,
    SoftwareEntry,
    get_value,
)
from pgstatlabs.pgstat import NoSuchInstance, NoSuchObject


@pytest.fixture
def table():
    t = DummyTable()
    t.add(SoftwareEntry(7, name="editor", type=4, date=b"\x07\xe8\x01\x02"))
    return t


def test_index_column(table):
    assert table.get(7, DummyColumn.INDEX) == 7


def test_name_is_bytes(table):
    assert table.get(7, DummyColumn.NAME) == b"editor"


def test_id_is_null_oid(table):
    assert table.get(7, DummyColumn.ID) == (0, 0)


def test_type_and_date(table):
    assert table.get(7, DummyColumn.TYPE) == 4
    assert table.get(7, DummyColumn.DATE) == b"\x07\xe8\x01\x02"


def test_missing_row(table):
    with pytest.raises(NoSuchInstance):
        table.get(8, DummyColumn.INDEX)


@pytest.mark.parametrize("column", [0, 6, 99])
def test_unknown_column(table, column):
    with pytest.raises(NoSuchObject):
        table.get(7, column)


def test_get_value_unknown_column():
    with pytest.raises(NoSuchObject):
        get_value(SoftwareEntry(1), 6)


def test_get_value_matches_table(table):
    entry = SoftwareEntry(3, name="shell")
    table.add(entry)
    for column in DummyColumn:
        assert table.get(3, column) == get_value(entry, column)


def test_duplicate_add(table):
    with pytest.raises(ValueError):
        table.add(SoftwareEntry(7))


def test_clear(table):
    table.add(SoftwareEntry(9))
    assert len(table) == 2
    table.clear()
    assert len(table) == 0
    with pytest.raises(NoSuchInstance):
        table.get(7, DummyColumn.INDEX)


def test_wire_types():
    assert DummyColumn(3).wire_type == "OBJECT IDENTIFIER"
    assert DummyColumn(2).wire_type == DummyColumn(5).wire_type
    assert DummyColumn(1).wire_type == DummyColumn(4).wire_type