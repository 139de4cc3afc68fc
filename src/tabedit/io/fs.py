"""
Filesystem helpers for tabedit.io (local files only).

Responsibilities
- Read provenance metadata (size, creation and modification time) for a source.
- Establish the atomic write path used by tabedit.io.write: tmp write -> fsync -> atomic rename.

Notes
- Creation time comes from st_birthtime where the platform reports it; otherwise it is None
  (Linux stat does not expose a birth time). Modification time is always present.
- Atomicity via os.replace is guaranteed only when src and dst reside on the same filesystem,
  which is why the tmp file is created next to the destination.
- All helpers are synchronous; handles are opened and closed within a single call.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import TextIO

from tabedit.core.table import Provenance

from .errors import MetadataUnavailable


def stat_provenance(path: str | os.PathLike[str]) -> Provenance:
    """
    Capture provenance metadata for a source file.

    Args:
        path (str | os.PathLike[str]): Source path.

    Returns:
        Provenance: source_name, created_at (None when unsupported), modified_at, byte_size.

    Raises:
        MetadataUnavailable: If the path cannot be stat'ed.
    """
    name = os.fspath(path)
    try:
        st = os.stat(name)
    except OSError as exc:
        raise MetadataUnavailable(f"cannot read metadata for {name!r}: {exc}") from exc

    birth = getattr(st, "st_birthtime", None)
    return Provenance(
        source_name=name,
        created_at=datetime.fromtimestamp(birth, UTC) if birth is not None else None,
        modified_at=datetime.fromtimestamp(st.st_mtime, UTC),
        byte_size=st.st_size,
    )


def tmp_path_for(path: str) -> str:
    """
    Return a unique temporary sibling path for an atomic write to `path`.

    Returns:
        str: "<dir>/.<name>.<hex>.tmp" in the destination directory.
    """
    head, tail = os.path.split(os.path.abspath(path))
    return os.path.join(head, f".{tail}.{uuid.uuid4().hex}.tmp")


@contextmanager
def open_write(path: str, encoding: str) -> Iterator[TextIO]:
    """
    Open a file for text write as a context manager.

    Args:
        path (str): Destination path to open in write mode.
        encoding (str): Text encoding.

    Yields:
        TextIO: A writable handle opened with newline="" as the csv module requires.
    """
    fh = open(path, "w", encoding=encoding, newline="")
    try:
        yield fh
    finally:
        fh.close()


def fsync_file(fh: TextIO) -> None:
    """Flush and fsync an open file handle."""
    fh.flush()
    os.fsync(fh.fileno())


def rename_atomic(src: str, dst: str) -> None:
    """
    Atomically rename src -> dst on the same filesystem.

    Notes:
        Uses os.replace, which is atomic only if src and dst reside on the same filesystem.
    """
    os.replace(src, dst)


def remove_quietly(path: str) -> None:
    """Remove a leftover tmp file if it exists; a failure to remove is not reported."""
    try:
        os.remove(path)
    except OSError:
        pass
