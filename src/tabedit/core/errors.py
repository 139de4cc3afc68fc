"""
Core exception types raised by table mutation and pagination lookups.

Provides typed exceptions for core-domain failures:
- TableError as the base for every core table failure.
- IndexOutOfBounds for row/field/page indices outside the valid range.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - IndexOutOfBounds is operation-local: callers report it and keep working on the
      same Table. IO failures live in tabedit.io.errors.

Examples:
    >>> from tabedit.core.errors import IndexOutOfBounds
    >>> err = IndexOutOfBounds("field", 7, 3)
    >>> (err.axis, err.index, err.bound)
    ('field', 7, 3)
"""

from __future__ import annotations

from typing import Literal

__all__ = [
    "Axis",
    "TableError",
    "IndexOutOfBounds",
]

Axis = Literal["row", "field", "page"]


class TableError(Exception):
    """Base class for core table failures."""


class IndexOutOfBounds(TableError, IndexError):
    """
    Raised when an index falls outside the valid range for an operation.

    Attributes:
        axis (Axis): Which index failed ("row", "field" or "page").
        index (int): The offending index as supplied by the caller.
        bound (int): Exclusive upper bound that was in force.
    """

    def __init__(self, axis: Axis, index: int, bound: int) -> None:
        self.axis = axis
        self.index = index
        self.bound = bound
        super().__init__(f"{axis} index {index} out of bounds (expected 0 <= index < {bound})")
