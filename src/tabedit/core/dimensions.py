"""
Dimension override parsing and application.

A dimension declaration is a "<rows>,<cols>" string. A well-formed declaration replaces a
table's logical row_count and field_count without any check against the stored rows. A
malformed one (wrong arity, non-numeric or negative component) is treated as absent so the
caller can fall back to measuring the source (see tabedit.io.read.measure_dimensions).

Zero-IO: stdlib only.
"""

from __future__ import annotations

import logging

from .constants import DIMENSION_SEPARATOR
from .table import Table

__all__ = [
    "parse_dimension",
    "apply_dimensions",
]

logger = logging.getLogger(__name__)


def parse_dimension(declaration: str | None) -> tuple[int, int] | None:
    """
    Parse a "<rows>,<cols>" declaration into a pair of non-negative integers.

    Args:
        declaration (str | None): Raw declaration, e.g. "25,6". Surrounding whitespace
            around each component is ignored.

    Returns:
        tuple[int, int] | None: (rows, cols), or None when the declaration is missing
        or malformed. Never raises.

    Examples:
        >>> parse_dimension("25, 6")
        (25, 6)
        >>> parse_dimension("25") is None
        True
        >>> parse_dimension("-1,3") is None
        True
    """
    if declaration is None:
        return None
    parts = [p.strip() for p in declaration.split(DIMENSION_SEPARATOR)]
    if len(parts) != 2:
        return None
    if not all(p.isascii() and p.isdecimal() for p in parts):
        return None
    return int(parts[0]), int(parts[1])


def apply_dimensions(table: Table, rows: int, cols: int) -> None:
    """
    Replace the table's logical dimensions unconditionally.

    Args:
        table (Table): Table to update in place.
        rows (int): New row_count (>= 0).
        cols (int): New field_count (>= 0).

    Raises:
        ValueError: If either value is negative.

    Notes:
        No cross-check against table.rows; pages are not regenerated.
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"dimensions must be non-negative, got ({rows}, {cols})")
    if rows != len(table.rows):
        logger.debug("row_count %d differs from %d stored rows", rows, len(table.rows))
    table.row_count = rows
    table.field_count = cols
