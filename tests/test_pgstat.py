import pytest

from pgstatlabs.pgstat import (
    AsnType,
    Column,
    DatabaseEntry,
    DatabaseTable,
    NoSuchInstance,
    NoSuchObject,
    TABLE_OID,
    column_type,
)


def test_column_numbers_match_definitions():
    assert Column(1) is Column.ID
    assert Column(2) is Column.NAME
    assert Column(13) is Column.SIZE_MB
    assert Column(16) is Column.TUPLES_MODIFIED
    assert [int(column) for column in Column] == list(range(1, 17))
    assert column_type(13) is AsnType.UNSIGNED


def test_table_oid():
    assert DatabaseTable.oid == (1, 3, 6, 1, 4, 1, 27645, 3, 1)
    assert TABLE_OID == DatabaseTable().oid


@pytest.mark.parametrize(
    "column, expected",
    [
        (Column.ID, AsnType.INTEGER),
        (Column.NAME, AsnType.OCTET_STR),
        (Column.BACKENDS, AsnType.GAUGE),
        (Column.COMMITS, AsnType.COUNTER),
        (Column.TUPLES_MODIFIED, AsnType.COUNTER),
        (Column.SIZE_MB, AsnType.UNSIGNED),
        (Column.ROLLBACK_RATIO, AsnType.UNSIGNED),
        (Column.CACHE_HIT_RATIO, AsnType.UNSIGNED),
    ],
)
def test_column_types(column, expected):
    assert column_type(column) is expected
    assert column_type(int(column)) is expected


@pytest.mark.parametrize("column", [0, 17, -1])
def test_unknown_column_type(column):
    with pytest.raises(NoSuchObject):
        column_type(column)


def test_create_and_get_integer_column():
    table = DatabaseTable()
    entry = table.create_entry(7)
    entry.commits = 42
    assert table.get(7, Column.ID) == (AsnType.INTEGER, 7)
    assert table.get(7, Column.COMMITS) == (AsnType.COUNTER, 42)


def test_name_is_returned_as_bytes():
    table = DatabaseTable()
    entry = table.create_entry(1)
    entry.name = "postgres"
    assert table.get(1, Column.NAME) == (AsnType.OCTET_STR, b"postgres")


def test_every_column_readable_on_new_row():
    table = DatabaseTable()
    table.create_entry(3)
    for column in Column:
        kind, value = table.get(3, column)
        assert kind is column_type(column)
        if column is Column.ID:
            assert value == 3
        elif column is Column.NAME:
            assert value == b""
        else:
            assert value == 0


def test_missing_row_raises_no_such_instance():
    table = DatabaseTable()
    with pytest.raises(NoSuchInstance):
        table.get(99, Column.ID)


def test_unknown_column_raises_no_such_object():
    table = DatabaseTable()
    table.create_entry(1)
    with pytest.raises(NoSuchObject):
        table.get(1, 17)


def test_duplicate_entry_rejected():
    table = DatabaseTable()
    table.create_entry(5)
    with pytest.raises(ValueError):
        table.create_entry(5)
    assert len(table) == 1


def test_remove_entry():
    table = DatabaseTable()
    created = table.create_entry(2)
    assert table.remove_entry(2) is created
    assert len(table) == 0
    with pytest.raises(NoSuchInstance):
        table.get(2, Column.ID)


def test_remove_missing_entry_is_ignored():
    table = DatabaseTable()
    table.create_entry(1)
    assert table.remove_entry(8) is None
    assert len(table) == 1


def test_iteration_in_index_order():
    table = DatabaseTable()
    for database_id in (30, 10, 20):
        table.create_entry(database_id)
    assert [entry.database_id for entry in table] == [10, 20, 30]


def test_clear_empties_table():
    table = DatabaseTable()
    table.create_entry(1)
    table.create_entry(2)
    table.clear()
    assert len(table) == 0
    assert list(table) == []


def test_name_length_limit():
    with pytest.raises(ValueError):
        DatabaseEntry(1, name="x" * 65)
    assert DatabaseEntry(1, name="x" * 64).name == "x" * 64


def test_negative_counter_rejected():
    with pytest.raises(ValueError):
        DatabaseEntry(1, commits=-1)


def test_column_attribute_names():
    assert Column(1).attribute == "database_id"
    assert Column.BLOCKS_HIT.attribute == "blocks_hit"
    table = DatabaseTable()
    entry = table.create_entry(4)
    entry.name = "db"
    entry.blocks_hit = 11
    for column in Column:
        value = getattr(entry, column.attribute)
        expected = value.encode() if column is Column.NAME else value
        assert table.get(4, column) == (column_type(column), expected)