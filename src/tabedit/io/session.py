"""
TableSession facade for tabedit.io.

Provides one object that owns a single Table for a run and threads it through
load -> resolve_dimensions -> paginate -> delete_row/modify_field -> write. Every call runs
to completion synchronously; file handles are opened and released within each call.

Source of truth
- Table model, pagination and mutation rules: tabedit.core.
- Codec, provenance and atomic writes: tabedit.io.read / tabedit.io.fs / tabedit.io.write.
"""

from __future__ import annotations

import os

from tabedit.core.errors import IndexOutOfBounds
from tabedit.core.mutate import delete_row as _delete_row
from tabedit.core.mutate import modify_field as _modify_field
from tabedit.core.pages import create_pages, page_rows
from tabedit.core.table import Page, Row, Table

from .config import EditorSettings
from .read import load_table
from .read import resolve_dimensions as _resolve_dimensions
from .write import write_table


class TableSession:
    """
    Facade bound to EditorSettings and a source path.

    Notes:
        - Construction performs no IO; call load() first.
        - Pages are not refreshed after mutations. Deletion is shape-preserving, so existing
          page boundaries stay valid.
    """

    def __init__(self, settings: EditorSettings, source: str | os.PathLike[str]) -> None:
        self.settings = settings
        self.source = os.fspath(source)
        self._table: Table | None = None

    @property
    def table(self) -> Table:
        if self._table is None:
            raise RuntimeError("no table loaded; call TableSession.load() first")
        return self._table

    # ---------------------------------------------------------------------
    # Load
    # ---------------------------------------------------------------------
    def load(self) -> Table:
        """
        Load the source into a new Table, replacing any previously loaded one.

        Raises:
            tabedit.io.errors.SourceUnreadable: The source cannot be opened or parsed.
            tabedit.io.errors.MetadataUnavailable: Provenance cannot be read.
        """
        self._table = load_table(self.source, self.settings)
        return self._table

    def resolve_dimensions(self, declaration: str | None = None) -> tuple[int, int]:
        """Apply a "<rows>,<cols>" override, or re-measure the source if absent or malformed."""
        return _resolve_dimensions(self.table, declaration, self.settings)

    # ---------------------------------------------------------------------
    # Pages
    # ---------------------------------------------------------------------
    def paginate(self, records_per_page: int | None = None) -> list[Page]:
        """Rebuild pages; None uses settings.records_per_page."""
        if records_per_page is None:
            records_per_page = self.settings.records_per_page
        return create_pages(self.table, records_per_page)

    def page(self, number: int) -> list[Row]:
        """
        Return the stored rows of page `number` (0-based).

        Raises:
            IndexOutOfBounds: axis="page" when no such page exists.
        """
        pages = self.table.pages
        if not 0 <= number < len(pages):
            raise IndexOutOfBounds("page", number, len(pages))
        return page_rows(self.table, pages[number])

    # ---------------------------------------------------------------------
    # Mutate
    # ---------------------------------------------------------------------
    def delete_row(self, index: int) -> None:
        _delete_row(self.table, index)

    def modify_field(self, row_index: int, field_index: int, value: str) -> None:
        _modify_field(self.table, row_index, field_index, value)

    # ---------------------------------------------------------------------
    # Write
    # ---------------------------------------------------------------------
    def write(self, destination: str | os.PathLike[str] | None = None) -> str:
        """
        Write the table; None writes to settings.output_path.

        Returns:
            str: The destination path written.

        Raises:
            tabedit.io.errors.DestinationUnwritable: The write failed.
        """
        dest = os.fspath(destination) if destination is not None else self.settings.output_path
        write_table(self.table, dest, self.settings)
        return dest
