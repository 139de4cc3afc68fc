"""
Index-based table mutations.

Deletion policy
- Deletion is shape-preserving: delete_row() overwrites the row with field_count empty
  strings. row_count, len(rows) and every later row index stay the same, so pages built
  before a deletion remain valid after it. Rows are never physically removed.

Bounds
- Row indices are checked against the logical row_count and against the stored rows (an
  index inside an inflated row_count that has no stored row is out of bounds).
- Field indices are checked against the physical width of the target row, not against
  table.field_count.
- A failed check raises IndexOutOfBounds before anything is modified.
"""

from __future__ import annotations

import logging

from .constants import EMPTY_FIELD
from .errors import IndexOutOfBounds
from .table import Row, Table

__all__ = [
    "delete_row",
    "modify_field",
]

logger = logging.getLogger(__name__)


def _check_row(table: Table, index: int) -> Row:
    bound = min(table.row_count, len(table.rows))
    if not 0 <= index < bound:
        raise IndexOutOfBounds("row", index, bound)
    return table.rows[index]


def delete_row(table: Table, index: int) -> None:
    """
    Blank out the row at index with table.field_count empty fields.

    Args:
        table (Table): Table to mutate in place.
        index (int): Row index, 0 <= index < row_count.

    Raises:
        IndexOutOfBounds: axis="row" when index is outside the valid range.
    """
    _check_row(table, index)
    table.rows[index] = [EMPTY_FIELD] * table.field_count
    logger.debug("blanked row %d (%d fields)", index, table.field_count)


def modify_field(table: Table, row_index: int, field_index: int, value: str) -> None:
    """
    Replace a single field value in place.

    Args:
        table (Table): Table to mutate in place.
        row_index (int): Row index, 0 <= row_index < row_count.
        field_index (int): Field index, 0 <= field_index < len(table.rows[row_index]).
        value (str): New field text.

    Raises:
        IndexOutOfBounds: axis="row" or axis="field" naming the index that failed.
    """
    row = _check_row(table, row_index)
    if not 0 <= field_index < len(row):
        raise IndexOutOfBounds("field", field_index, len(row))
    row[field_index] = value
    logger.debug("set row %d field %d", row_index, field_index)
