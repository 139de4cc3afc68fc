"""
Pagination over a table's logical row range.

Pages are computed from table.row_count, which may have been overridden to exceed the
number of stored rows. page_rows() reads through Python slicing, so indices past the end of
table.rows are dropped rather than raising.
"""

from __future__ import annotations

import logging

from .constants import DEFAULT_RECORDS_PER_PAGE
from .table import Page, Row, Table

__all__ = [
    "create_pages",
    "page_rows",
]

logger = logging.getLogger(__name__)


def create_pages(table: Table, records_per_page: int) -> list[Page]:
    """
    Replace table.pages with contiguous [start, end) ranges covering [0, row_count).

    Args:
        table (Table): Table whose pages are rebuilt in place.
        records_per_page (int): Page size; 0 is normalized to DEFAULT_RECORDS_PER_PAGE.

    Returns:
        list[Page]: The new table.pages (ceil(row_count / records_per_page) entries; the
        last page may be shorter).

    Raises:
        ValueError: If records_per_page is negative.

    Examples:
        >>> from datetime import datetime
        >>> from tabedit.core.table import Provenance
        >>> prov = Provenance(source_name="t.csv", modified_at=datetime(2024, 1, 1), byte_size=0)
        >>> t = Table(rows=[], row_count=25, field_count=1, provenance=prov)
        >>> [(p.start, p.end) for p in create_pages(t, 10)]
        [(0, 10), (10, 20), (20, 25)]
    """
    if records_per_page < 0:
        raise ValueError(f"records_per_page must be >= 0, got {records_per_page}")
    size = records_per_page or DEFAULT_RECORDS_PER_PAGE

    table.pages.clear()
    start = 0
    while start < table.row_count:
        end = min(start + size, table.row_count)
        table.pages.append(Page(start, end))
        start = end

    logger.info("created %d pages of up to %d rows", len(table.pages), size)
    return table.pages


def page_rows(table: Table, page: Page) -> list[Row]:
    """Return the stored rows within page; ranges past the stored rows are truncated."""
    return table.rows[page.start : page.end]
