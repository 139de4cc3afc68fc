"""
Read utilities for delimited-text tables.

Overview
- read_rows(): Decodes a source into (header, rows) of opaque text fields via Polars.
- load_table(): Materializes a Table with measured dimensions and provenance.
- measure_dimensions(): Re-reads the live source to count data rows and header fields.
- resolve_dimensions(): Applies a "<rows>,<cols>" override, or falls back to measurement.

Codec semantics
- Every column is read as a string (no schema inference); nulls for empty and missing
  fields are mapped to "" when rows are materialized.
- A record with more fields than the first record is malformed and raises SourceUnreadable.
  A record with fewer fields is padded with "".
- An empty source decodes to no header and no rows.

Import DAG discipline
- Depends on stdlib, polars, tabedit.core and tabedit.io helpers.
"""

from __future__ import annotations

import logging
import os

import polars as pl

from tabedit.core.dimensions import apply_dimensions, parse_dimension
from tabedit.core.table import Row, Table

from .config import EditorSettings
from .errors import SourceUnreadable
from .fs import stat_provenance

logger = logging.getLogger(__name__)


def _read_frame(source: str, settings: EditorSettings) -> pl.DataFrame:
    """
    Decode the whole source into an all-string DataFrame, header included as a data row.

    Raises:
        SourceUnreadable: On IO, decoding or parse failure, or a separator polars rejects.
    """
    try:
        return pl.read_csv(
            source,
            has_header=False,
            separator=settings.delimiter,
            infer_schema=False,
            encoding=settings.encoding,
            raise_if_empty=False,
        )
    except (OSError, ValueError, LookupError, pl.exceptions.PolarsError) as exc:
        raise SourceUnreadable(f"cannot read {source!r}: {exc}") from exc


def read_rows(
    source: str | os.PathLike[str], settings: EditorSettings | None = None
) -> tuple[Row | None, list[Row]]:
    """
    Decode a delimited-text source into its header and data rows.

    Args:
        source (str | os.PathLike[str]): Path to the source file.
        settings (EditorSettings | None): Codec settings (delimiter, encoding, has_header).

    Returns:
        tuple[Row | None, list[Row]]: (header, rows). header is None when settings.has_header
        is False or the source is empty.

    Raises:
        SourceUnreadable: If the source is missing, unreadable or malformed.
    """
    settings = settings or EditorSettings()
    df = _read_frame(os.fspath(source), settings)
    records = [["" if v is None else v for v in rec] for rec in df.iter_rows()]
    if settings.has_header and records:
        return records[0], records[1:]
    return None, records


def load_table(
    source: str | os.PathLike[str], settings: EditorSettings | None = None
) -> Table:
    """
    Load a source into a fully materialized Table.

    Args:
        source (str | os.PathLike[str]): Path to the source file.
        settings (EditorSettings | None): Codec settings; defaults to EditorSettings().

    Returns:
        Table: row_count = number of data rows; field_count = header width (or first row
        width without a header, 0 when empty); provenance captured from the filesystem.

    Raises:
        SourceUnreadable: If the source cannot be opened or parsed.
        MetadataUnavailable: If provenance metadata cannot be retrieved.
    """
    header, rows = read_rows(source, settings)
    table = Table.from_rows(rows, stat_provenance(source), header=header)
    logger.info(
        "loaded %s: %d rows x %d fields",
        table.source_name,
        table.row_count,
        table.field_count,
    )
    return table


def measure_dimensions(
    source: str | os.PathLike[str], settings: EditorSettings | None = None
) -> tuple[int, int]:
    """
    Count data rows and header fields by re-reading the live source.

    Args:
        source (str | os.PathLike[str]): Path to the source file.
        settings (EditorSettings | None): Codec settings; defaults to EditorSettings().

    Returns:
        tuple[int, int]: (rows, cols). rows excludes the header when settings.has_header;
        cols is the width of the first record (the header when present).

    Raises:
        SourceUnreadable: If the source cannot be opened or parsed.

    Notes:
        Independent of any in-memory Table; mutations and overrides are not consulted.
    """
    settings = settings or EditorSettings()
    df = _read_frame(os.fspath(source), settings)
    if df.height == 0:
        return 0, 0
    rows = df.height - 1 if settings.has_header else df.height
    return rows, df.width


def resolve_dimensions(
    table: Table,
    declaration: str | None = None,
    settings: EditorSettings | None = None,
) -> tuple[int, int]:
    """
    Set the table's authoritative (row_count, field_count).

    Args:
        table (Table): Table to update in place.
        declaration (str | None): Optional "<rows>,<cols>" override. A malformed declaration
            is ignored and measurement is used instead.
        settings (EditorSettings | None): Codec settings for re-measurement.

    Returns:
        tuple[int, int]: The pair applied to the table.

    Raises:
        SourceUnreadable: If re-measurement is needed and the source cannot be read.
    """
    parsed = parse_dimension(declaration)
    if parsed is None:
        if declaration is not None:
            logger.warning("ignoring malformed dimension %r; measuring source", declaration)
        parsed = measure_dimensions(table.source_name, settings)
    else:
        logger.info("dimension override: %d rows x %d fields", *parsed)
    apply_dimensions(table, *parsed)
    return parsed
