"""Table schemas, rows, pages and the database that holds tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

NAME_LIMIT = 63
PAGE_SIZE = 4096
MAX_ROWS_PER_PAGE = 100


def _check_name(name: str, what: str) -> None:
    if not name:
        raise ValueError(f"{what} name must not be empty")
    if len(name) > NAME_LIMIT:
        raise ValueError(f"{what} name longer than {NAME_LIMIT} characters: {name!r}")


class ColumnType(Enum):
    INT = "int"
    STRING = "string"
    FLOAT = "float"


@dataclass(frozen=True)
class ColumnDef:
    name: str
    type: ColumnType
    size: int = 0
    is_nullable: bool = False
    is_primary_key: bool = False

    def __post_init__(self) -> None:
        _check_name(self.name, "column")
        if self.size < 0:
            raise ValueError(f"column size must not be negative, got {self.size}")


@dataclass
class TableSchema:
    table_name: str
    columns: list[ColumnDef] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_name(self.table_name, "table")
        names = [column.name for column in self.columns]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate column names in table {self.table_name!r}")

    def add_column(self, column: ColumnDef) -> None:
        """Append a column; names must be unique within the table."""
        if column.name in self.column_names():
            raise ValueError(f"column {column.name!r} already exists in {self.table_name!r}")
        self.columns.append(column)

    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]


@dataclass
class Row:
    values: list[Any] = field(default_factory=list)
    is_deleted: bool = False


class PageFullError(Exception):
    """Raised when a row is added to a page that has no room left."""


@dataclass
class Page:
    page_id: int
    next_page: Optional[int] = None
    rows: list[Row] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def is_full(self) -> bool:
        return len(self.rows) >= MAX_ROWS_PER_PAGE

    def add_row(self, row: Row) -> None:
        if self.is_full():
            raise PageFullError(f"page {self.page_id} already holds {MAX_ROWS_PER_PAGE} rows")
        self.rows.append(row)


@dataclass
class Table:
    schema: TableSchema
    pages: list[Page] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.schema.table_name


@dataclass
class Database:
    db_name: str
    tables: dict[str, Table] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_name(self.db_name, "database")

    def add_table(self, table: Table) -> None:
        if table.name in self.tables:
            raise ValueError(f"table {table.name!r} already exists")
        self.tables[table.name] = table

    def get_table(self, name: str) -> Table:
        try:
            return self.tables[name]
        except KeyError:
            raise KeyError(f"no table named {name!r}") from None