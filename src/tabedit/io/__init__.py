"""
tabedit.io — CSV codec, provenance, configuration and the session facade.

## Responsibilities
- Decode delimited text into string rows (Polars) and encode rows back (stdlib csv).
- Capture provenance metadata (size, creation/modification time) at load.
- Write atomically: tmp file -> fsync -> os.replace.
- Load EditorSettings with precedence env > TOML > defaults.

## Public API
- EditorSettings — configuration for codec and pagination defaults.
- TableSession — facade owning one Table through load/paginate/mutate/write.
- load_table / resolve_dimensions / measure_dimensions / write_table / page_frame.

## Errors
- SourceUnreadable, MetadataUnavailable, DestinationUnwritable, IoConfigError (all IoError).

## Examples
```python
from tabedit.io import EditorSettings, TableSession

session = TableSession(EditorSettings(records_per_page=10), "data.csv")  # doctest: +SKIP
session.load()                      # doctest: +SKIP
session.resolve_dimensions("25,6")  # doctest: +SKIP
session.paginate()                  # doctest: +SKIP
session.delete_row(0)               # doctest: +SKIP
session.write("out.csv")            # doctest: +SKIP
```
"""

from __future__ import annotations

from .config import EditorSettings
from .errors import (
    DestinationUnwritable,
    IoConfigError,
    IoError,
    MetadataUnavailable,
    SourceUnreadable,
)
from .frame import page_frame
from .read import load_table, measure_dimensions, read_rows, resolve_dimensions
from .session import TableSession
from .write import write_table

__all__ = [
    "DestinationUnwritable",
    "EditorSettings",
    "IoConfigError",
    "IoError",
    "MetadataUnavailable",
    "SourceUnreadable",
    "TableSession",
    "load_table",
    "measure_dimensions",
    "page_frame",
    "read_rows",
    "resolve_dimensions",
    "write_table",
]
