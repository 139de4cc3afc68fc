"""
Polars views of a table for terminal display.

page_frame() builds an all-string DataFrame over a page (or the whole table). Rows are copied
and right-padded with "" to a common width, so ragged rows display without touching the Table.
"""

from __future__ import annotations

import polars as pl

from tabedit.core.pages import page_rows
from tabedit.core.table import Page, Row, Table


def _column_names(header: Row | None, width: int) -> list[str]:
    if header is not None and len(header) == width and all(header):
        if len(set(header)) == len(header):
            return list(header)
    return [f"column_{i + 1}" for i in range(width)]


def page_frame(table: Table, page: Page | None = None) -> pl.DataFrame:
    """
    Return the rows of `page` (or every stored row) as a polars DataFrame of strings.

    Args:
        table (Table): Source table.
        page (Page | None): Page to show; None shows all stored rows.

    Returns:
        pl.DataFrame: One String column per field. Columns take the header names when the
        header is present, non-empty, unique and as wide as the widest row; otherwise they are
        named column_1..column_n.
    """
    rows = table.rows if page is None else page_rows(table, page)
    width = max((len(r) for r in rows), default=len(table.header or []))
    if width == 0:
        return pl.DataFrame()
    names = _column_names(table.header, width)
    padded = [list(r) + [""] * (width - len(r)) for r in rows]
    return pl.DataFrame(
        padded,
        schema={name: pl.String for name in names},
        orient="row",
    )
