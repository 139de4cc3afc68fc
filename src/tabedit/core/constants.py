"""
Core defaults for tabedit tables.

Defines pagination and dimension-declaration defaults consumed by the core and IO
layers. This module is zero-IO and uses only the Python standard library.

Notes:
    - A page size of 0 is normalized to DEFAULT_RECORDS_PER_PAGE by the paginator.
    - Dimension declarations take the form "<rows><DIMENSION_SEPARATOR><cols>".
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_RECORDS_PER_PAGE",
    "DIMENSION_SEPARATOR",
    "EMPTY_FIELD",
]

# Rows per page when the caller asks for 0 (or does not configure a size).
DEFAULT_RECORDS_PER_PAGE: int = 10

# Separator between the row and column components of a dimension declaration.
DIMENSION_SEPARATOR: str = ","

# Value written into every field of a deleted row.
EMPTY_FIELD: str = ""
