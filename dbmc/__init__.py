"""A small database management client: a B-tree of ordered keys, table schema types and a tkinter front end."""

__version__ = "0.1.0"
__all__ = ["btree", "schema", "client"]