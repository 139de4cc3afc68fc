"""
Writer for delimited-text tables.

Overview
- Serializes table.header (when present) and table.rows in order, one record per row.
- Fields are written exactly as stored: blanked rows and ragged rows keep their width.
- Writes go to a tmp sibling -> fsync -> os.replace(tmp, final), so a failed write leaves the
  destination as it was.

Source of truth
- Row and table shapes: tabedit.core.table.
- IO-layer errors: tabedit.io.errors.DestinationUnwritable.

Notes
- The stdlib csv writer is used because rows may be ragged after a dimension override, which a
  columnar frame cannot represent. Output uses "\\n" line endings and minimal quoting, which
  tabedit.io.read decodes back to the same fields.
"""

from __future__ import annotations

import csv
import logging
import os

from tabedit.core.table import Table

from .config import EditorSettings
from .errors import DestinationUnwritable
from .fs import fsync_file, open_write, remove_quietly, rename_atomic, tmp_path_for

logger = logging.getLogger(__name__)


def write_table(
    table: Table,
    destination: str | os.PathLike[str],
    settings: EditorSettings | None = None,
) -> int:
    """
    Write a table to a delimited-text destination.

    Args:
        table (Table): Table to serialize (header first, then rows).
        destination (str | os.PathLike[str]): Output path; replaced if it exists.
        settings (EditorSettings | None): Codec settings (delimiter, encoding).

    Returns:
        int: Number of records written, header included.

    Raises:
        DestinationUnwritable: On any IO or encoding failure. The tmp file is removed on a
            best-effort basis and the destination is left untouched.
    """
    settings = settings or EditorSettings()
    final = os.fspath(destination)
    tmp = tmp_path_for(final)

    records = [table.header] if table.header is not None else []
    records.extend(table.rows)

    try:
        with open_write(tmp, settings.encoding) as fh:
            writer = csv.writer(fh, delimiter=settings.delimiter, lineterminator="\n")
            for record in records:
                writer.writerow(record)
            fsync_file(fh)
        rename_atomic(tmp, final)
    except (OSError, UnicodeError, LookupError, csv.Error) as exc:
        remove_quietly(tmp)
        raise DestinationUnwritable(f"cannot write {final!r}: {exc}") from exc

    logger.info("wrote %d records to %s", len(records), final)
    return len(records)
