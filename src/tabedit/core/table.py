"""
In-memory table model: rows, pages and provenance.

Responsibilities
- Define Row (a list of opaque text fields), Page (a half-open row range) and Provenance
  (write-once source metadata).
- Define Table, the single mutable value threaded through load, dimension resolution,
  pagination, mutation and write.

Invariants
- row_count and field_count are explicit fields. They default to measured values but may be
  overridden by a dimension declaration and are never re-validated against row shapes.
- pages are derived and only rebuilt on request (see tabedit.core.pages).
- provenance is frozen after load.
- header, when present, is held apart from rows and is never paginated or mutated.

Style
- Zero-IO (stdlib + pydantic only).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Row",
    "Page",
    "Provenance",
    "Table",
]

Row = list[str]


@dataclass(frozen=True, slots=True)
class Page:
    """
    Half-open row-index range [start, end) over a table's rows.

    Attributes:
        start (int): First row index in the page (>= 0).
        end (int): One past the last row index in the page (>= start).

    Raises:
        ValueError: If start < 0 or end < start.

    Examples:
        >>> len(Page(10, 20))
        10
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"page start must be non-negative, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"page end {self.end} precedes start {self.start}")

    def __len__(self) -> int:
        return self.end - self.start


class Provenance(BaseModel):
    """
    Source metadata captured once at load time.

    Attributes:
        source_name (str): Path or name the table was loaded from.
        created_at (datetime | None): Creation time reported by the filesystem, if any.
        modified_at (datetime): Last modification time.
        byte_size (int): Source size in bytes.

    Notes:
        Values are opaque to the core; tabedit.io.fs produces them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source_name: str
    created_at: datetime | None = None
    modified_at: datetime
    byte_size: int = Field(..., ge=0)


@dataclass
class Table:
    """
    Rows plus logical dimensions, derived pages and provenance.

    Attributes:
        rows (list[Row]): Data rows in file order (header excluded).
        row_count (int): Logical row count used by pagination and bounds checks.
        field_count (int): Logical field count used for blank rows on deletion.
        provenance (Provenance): Write-once source metadata.
        header (Row | None): Header record when the source was read with a header.
        pages (list[Page]): Page ranges from the last create_pages() call.
    """

    rows: list[Row]
    row_count: int
    field_count: int
    provenance: Provenance
    header: Row | None = None
    pages: list[Page] = field(default_factory=list)

    @classmethod
    def from_rows(
        cls,
        rows: list[Row],
        provenance: Provenance,
        header: Row | None = None,
    ) -> Table:
        """
        Build a Table whose dimensions are measured from the given records.

        field_count comes from the header when present, else from the first row, else 0.
        """
        if header is not None:
            fields = len(header)
        elif rows:
            fields = len(rows[0])
        else:
            fields = 0
        return cls(
            rows=rows,
            row_count=len(rows),
            field_count=fields,
            provenance=provenance,
            header=header,
        )

    @property
    def source_name(self) -> str:
        return self.provenance.source_name

    @property
    def created_at(self) -> datetime | None:
        return self.provenance.created_at

    @property
    def modified_at(self) -> datetime:
        return self.provenance.modified_at

    @property
    def byte_size(self) -> int:
        return self.provenance.byte_size
