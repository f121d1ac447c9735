import pytest

from dbmc.schema import (
    MAX_ROWS_PER_PAGE,
    ColumnDef,
    ColumnType,
    Database,
    Page,
    PageFullError,
    Row,
    Table,
    TableSchema,
)


def _schema():
    return TableSchema(
        "users",
        [ColumnDef("id", ColumnType.INT, is_primary_key=True), ColumnDef("name", ColumnType.STRING, 64)],
    )


def test_column_names_keep_order():
    schema = _schema()
    schema.add_column(ColumnDef("score", ColumnType.FLOAT))
    assert schema.column_names() == ["id", "name", "score"]


def test_add_duplicate_column_rejected():
    schema = _schema()
    with pytest.raises(ValueError):
        schema.add_column(ColumnDef("id", ColumnType.INT))
    assert schema.column_names() == ["id", "name"]


def test_duplicate_columns_in_constructor_rejected():
    with pytest.raises(ValueError):
        TableSchema("t", [ColumnDef("a", ColumnType.INT), ColumnDef("a", ColumnType.FLOAT)])


def test_column_name_length_limit():
    assert ColumnDef("x" * 63, ColumnType.INT).name == "x" * 63
    with pytest.raises(ValueError):
        ColumnDef("x" * 64, ColumnType.INT)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ColumnDef("c", ColumnType.STRING, -1)


def test_page_fills_at_limit():
    page = Page(page_id=1)
    for i in range(MAX_ROWS_PER_PAGE):
        assert not page.is_full()
        page.add_row(Row([i]))
    assert page.is_full()
    assert page.row_count == MAX_ROWS_PER_PAGE
    with pytest.raises(PageFullError):
        page.add_row(Row([0]))
    assert page.row_count == MAX_ROWS_PER_PAGE


def test_row_defaults_not_deleted():
    row = Row([1, "a"])
    assert row.is_deleted is False
    assert row.values == [1, "a"]


def test_database_add_and_get():
    db = Database("shop")
    table = Table(_schema())
    db.add_table(table)
    assert db.get_table("users") is table
    assert table.name == "users"


def test_database_duplicate_and_missing():
    db = Database("shop")
    db.add_table(Table(_schema()))
    with pytest.raises(ValueError):
        db.add_table(Table(_schema()))
    with pytest.raises(KeyError):
        db.get_table("orders")


def test_column_type_members():
    columns = [ColumnDef(column_type.name.lower(), column_type) for column_type in ColumnType]
    schema = TableSchema("typed", columns)
    assert schema.column_names() == ["int", "string", "float"]