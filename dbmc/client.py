"""A windowed client: an SQL input field, a list of tables and a table view."""

from __future__ import annotations

import argparse
import platform
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

WINDOW_TITLE = "Database Management Client"
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 700
COMMAND_BUFFER_SIZE = 1024
MAX_COMMAND_LENGTH = COMMAND_BUFFER_SIZE - 1

SAMPLE_TABLES = ("products", "users", "orders")
SAMPLE_COLUMNS = ("Column 1", "Column 2", "Column 3")
SAMPLE_ROWS = (("Row 1 Col 1", "Row 1 Col 2", "Row 1 Col 3"),)

TABLE_VIEW_X = 220
TABLE_VIEW_Y = 120
TABLE_VIEW_RIGHT_MARGIN = 240
TABLE_VIEW_BOTTOM_MARGIN = 140


@dataclass(frozen=True)
class _Rect:
    x: int
    y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


class Region(Enum):
    """The areas of the client window, each with its initial rectangle."""

    SQL_INPUT = _Rect(10, 10, 600, 100)
    EXECUTE_BUTTON = _Rect(620, 10, 100, 30)
    TABLES_LIST = _Rect(10, 120, 200, 500)
    TABLE_VIEW = _Rect(220, 120, 750, 500)

    @property
    def rect(self) -> tuple[int, int, int, int]:
        r = self.value
        return (r.x, r.y, r.width, r.height)


_CLICKABLE = (Region.EXECUTE_BUTTON, Region.TABLES_LIST)


def table_view_geometry(width: int, height: int) -> tuple[int, int, int, int]:
    """Return the table view's (x, y, width, height) for a window of the given size."""
    return (
        TABLE_VIEW_X,
        TABLE_VIEW_Y,
        width - TABLE_VIEW_RIGHT_MARGIN,
        height - TABLE_VIEW_BOTTOM_MARGIN,
    )


class ClientModel:
    """The state behind the window, free of any toolkit."""

    def __init__(self, tables: Optional[Iterable[str]] = None) -> None:
        self.tables: list[str] = list(SAMPLE_TABLES if tables is None else tables)
        self.columns: list[str] = list(SAMPLE_COLUMNS)
        self.rows: list[tuple[str, ...]] = [tuple(row) for row in SAMPLE_ROWS]
        self.title = WINDOW_TITLE
        self.last_command = ""

    def execute(self, command: str) -> str:
        """Accept an SQL command and return it as it fits the command buffer."""
        self.last_command = command[:MAX_COMMAND_LENGTH]
        return self.last_command

    def select_table(self, index: int) -> str:
        """Select the table at ``index``, update the title and return its name."""
        if not 0 <= index < len(self.tables):
            raise IndexError(f"no table at position {index}")
        name = self.tables[index]
        self.title = f"Selected table: {name}"
        return name

    def hit_test(self, x: int, y: int) -> Optional[Region]:
        """Return the clickable region under the point, or None."""
        for region in _CLICKABLE:
            if region.value.contains(x, y):
                return region
        return None


class ClientWindow:
    """A tkinter window showing a :class:`ClientModel`."""

    def __init__(self, master, model: ClientModel) -> None:
        import tkinter as tk
        from tkinter import ttk

        self.master = master
        self.model = model
        master.title(model.title)
        master.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")

        x, y, w, h = Region.SQL_INPUT.rect
        self.sql_input = tk.Text(master, borderwidth=1, relief="sunken")
        self.sql_input.place(x=x, y=y, width=w, height=h)

        x, y, w, h = Region.EXECUTE_BUTTON.rect
        self.execute_button = tk.Button(master, text="Execute SQL", command=self._on_execute)
        self.execute_button.place(x=x, y=y, width=w, height=h)

        x, y, w, h = Region.TABLES_LIST.rect
        self.tables_list = tk.Listbox(master, exportselection=False)
        for name in model.tables:
            self.tables_list.insert("end", name)
        self.tables_list.place(x=x, y=y, width=w, height=h)
        self.tables_list.bind("<<ListboxSelect>>", self._on_select)

        x, y, w, h = Region.TABLE_VIEW.rect
        self.table_view = ttk.Treeview(master, columns=model.columns, show="headings")
        for column in model.columns:
            self.table_view.heading(column, text=column)
            self.table_view.column(column, width=100)
        for row in model.rows:
            self.table_view.insert("", "end", values=row)
        self.table_view.place(x=x, y=y, width=w, height=h)

        master.bind("<Configure>", self._on_resize)
        master.bind("<Escape>", lambda _event: master.destroy())

    def _on_execute(self) -> None:
        from tkinter import messagebox

        command = self.model.execute(self.sql_input.get("1.0", "end-1c"))
        messagebox.showinfo("SQL Command", command, parent=self.master)
        self.sql_input.delete("1.0", "end")

    def _on_select(self, _event) -> None:
        selection = self.tables_list.curselection()
        if selection:
            self.model.select_table(selection[0])
            self.master.title(self.model.title)

    def _on_resize(self, event) -> None:
        if event.widget is not self.master:
            return
        x, y, w, h = table_view_geometry(event.width, event.height)
        self.table_view.place(x=x, y=y, width=max(w, 1), height=max(h, 1))

    def run(self) -> None:
        self.master.mainloop()


def _platform_name() -> str:
    return {"Windows": "Windows", "Linux": "Linux"}.get(platform.system(), "Unknown")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="dbmc", description=WINDOW_TITLE)
    parser.parse_args(argv)

    print(WINDOW_TITLE)
    print(f"Platform: {_platform_name()}")

    try:
        import tkinter as tk

        root = tk.Tk()
    except Exception as exc:  # no display or no tkinter
        print(f"Failed to initialize window: {exc}", file=sys.stderr)
        return 1

    window = ClientWindow(root, ClientModel())
    print("Window created successfully")
    print("Controls:")
    print("- SQL Input Field: Enter SQL commands")
    print("- Execute Button: Run SQL commands")
    print("- Tables List: View available tables")
    print("- Table View: Display query results")
    print("- ESC key: Exit application")
    window.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())