# dbmc

`dbmc` is a small database management client. It has three parts:

- `dbmc.btree` is an in-memory B-tree of ordered keys. It supports insertion, search and in-order traversal.
- `dbmc.schema` holds types that describe tables: column types, column definitions, table schemas, rows, pages, tables and a database that holds tables.
- `dbmc.client` is a desktop front end built on tkinter. It has an SQL input field, an *Execute SQL* button, a list of tables and a table view.

The package uses only the standard library. The desktop client needs a Python that was built with tkinter, and it needs a display.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## The B-tree

```python
from dbmc.btree import BTree

tree = BTree(2)
for key in [10, 20, 5, 6, 12, 30, 7, 17, 1, 3, 8, 25, 35, 40]:
    tree.insert(key)

list(tree)          # [1, 3, 5, 6, 7, 8, 10, 12, 17, 20, 25, 30, 35, 40]
tree.traverse()     # the same list
7 in tree           # True
15 in tree          # False
tree.search(25)     # the BTreeNode that holds 25, or None if the key is absent
len(tree)           # 14
tree.is_empty()     # False
```

- `BTree(min_degree=2)` takes the minimum degree `t` of the tree. Each node holds at most `2t - 1` keys. A minimum degree below 2 raises `ValueError`.
- Keys can be any values that compare with `<` and `==`. Equal keys are kept, so `len(tree)` counts every insertion.
- `BTreeNode` exposes `is_leaf`, `keys` and `children`, and provides `search(key)` and `keys_in_order()` for its own subtree.

## Describing tables

```python
from dbmc.schema import ColumnDef, ColumnType, Database, Page, Row, Table, TableSchema

schema = TableSchema("users")
schema.add_column(ColumnDef("id", ColumnType.INT, is_primary_key=True))
schema.add_column(ColumnDef("name", ColumnType.STRING, size=64))
schema.column_names()   # ['id', 'name']

db = Database("demo")
db.add_table(Table(schema))
db.get_table("users").name   # 'users'

page = Page(page_id=0)
page.add_row(Row([1, "alice"]))
page.row_count               # 1
page.is_full()               # False
```

These rules raise errors:

- Names of columns, tables and databases must not be empty and must be at most 63 characters long. Otherwise `ValueError` is raised.
- A column size must not be negative. Otherwise `ValueError` is raised.
- Column names must be unique within a schema. `Database.add_table` rejects a second table with the same name. Both cases raise `ValueError`.
- `Database.get_table` raises `KeyError` for an unknown name.
- A `Page` holds at most 100 rows (`MAX_ROWS_PER_PAGE`). `Page.add_row` on a full page raises `PageFullError`.

## The desktop client

Start the client with this command:

```
dbmc
```

The same entry point is available as `python -m dbmc.client`. The client prints the platform name and a list of controls, and then opens a 1000×700 window:

- **SQL input field**: type a command here.
- **Execute SQL button**: shows the typed command in a message box, then clears the field.
- **Tables list**: selecting a table puts `Selected table: <name>` in the window title.
- **Table view**: fills the rest of the window as it is resized.
- **Esc**: closes the window.

If no window can be opened, for example because there is no display or no tkinter, the client prints an error and `main()` returns 1.

The logic behind the window can be used without a window through `ClientModel`:

```python
from dbmc.client import ClientModel, Region, table_view_geometry

model = ClientModel(["products", "users", "orders"])
model.execute("SELECT * FROM users")   # returns the command, cut to 1023 characters
model.select_table(1)                  # 'users'; model.title is now 'Selected table: users'
model.hit_test(650, 20)                # Region.EXECUTE_BUTTON
model.hit_test(900, 650)               # None
table_view_geometry(1000, 700)         # (220, 120, 760, 560)
```

`select_table` raises `IndexError` for a position outside the list.

## What it does not do

- Commands typed in the client are not parsed or run against any data. The *Execute SQL* button only echoes the command.
- The tables list shows fixed sample names: `products`, `users` and `orders`. The table view shows fixed sample columns and one sample row. Nothing is loaded from or stored to disk.
- The schema types only describe tables, rows and pages. No module inserts rows into a table or scans a table.
- The B-tree cannot delete keys.

## Running the tests

```
pytest
```