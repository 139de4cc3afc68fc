"""
Core package for tabedit (table model, dimensions, pagination, mutation).

## Contracts
- Table — rows plus explicit logical row_count/field_count, derived pages and frozen provenance.
- Dimensions — "<rows>,<cols>" overrides replace measured counts without validation.
- Pages — contiguous [start, end) ranges over [0, row_count); 0 rows per page means 10.
- Mutation — shape-preserving delete_row() and single-field modify_field().

## Notes
- Zero-IO policy: stdlib + pydantic only. Reading and writing CSV lives in tabedit.io.
- Mutation failures raise IndexOutOfBounds and leave the table untouched.

## Examples
```python
from datetime import datetime
from tabedit.core import Provenance, Table, create_pages, delete_row, modify_field

prov = Provenance(source_name="demo.csv", modified_at=datetime(2024, 1, 1), byte_size=0)
table = Table.from_rows([[str(i), "x"] for i in range(25)], prov)
create_pages(table, 10)   # [Page(0, 10), Page(10, 20), Page(20, 25)]
delete_row(table, 0)      # row 0 -> ["", ""]
modify_field(table, 1, 0, "X")
```
"""

from __future__ import annotations

from .constants import DEFAULT_RECORDS_PER_PAGE, DIMENSION_SEPARATOR
from .dimensions import apply_dimensions, parse_dimension
from .errors import IndexOutOfBounds, TableError
from .mutate import delete_row, modify_field
from .pages import create_pages, page_rows
from .table import Page, Provenance, Row, Table

__all__ = [
    "DEFAULT_RECORDS_PER_PAGE",
    "DIMENSION_SEPARATOR",
    "IndexOutOfBounds",
    "Page",
    "Provenance",
    "Row",
    "Table",
    "TableError",
    "apply_dimensions",
    "create_pages",
    "delete_row",
    "modify_field",
    "page_rows",
    "parse_dimension",
]
