"""
tabedit — in-memory CSV table editor.

Load a delimited-text table, paginate it, blank rows or change single fields, and write it
back. See tabedit.core for the table model and tabedit.io for the codec and session facade.
"""

from __future__ import annotations

from importlib import metadata as _metadata

from .core import (
    IndexOutOfBounds,
    Page,
    Provenance,
    Table,
    create_pages,
    delete_row,
    modify_field,
    parse_dimension,
)
from .io import EditorSettings, TableSession, load_table, write_table

try:
    __version__ = _metadata.version("tabedit")
except _metadata.PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "EditorSettings",
    "IndexOutOfBounds",
    "Page",
    "Provenance",
    "Table",
    "TableSession",
    "__version__",
    "create_pages",
    "delete_row",
    "load_table",
    "modify_field",
    "parse_dimension",
    "write_table",
]
