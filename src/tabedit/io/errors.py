"""
Custom exceptions for the tabedit.io module.

Purpose
- Provide IO-layer specific error types that map cleanly to responsibilities in tabedit.io.
- Keep tabedit.core as the source of truth for table/index errors (see tabedit.core.errors).

Source of truth and boundaries
- tabedit.core.errors.IndexOutOfBounds is raised by the mutator and is operation-local.
- tabedit.io raises Io* errors for filesystem/codec/configuration concerns:
  - SourceUnreadable: the source could not be opened, decoded or parsed.
  - MetadataUnavailable: provenance (size/timestamps) could not be retrieved.
  - DestinationUnwritable: the destination could not be written.
  - IoConfigError: invalid or unsupported configuration.

Notes
- These exceptions do not perform any IO and are stdlib-only.
- Load and write failures are fatal to the operation that raised them; no partial Table is
  returned and nothing is retried.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in tabedit.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from tabedit.core errors.
    """


class SourceUnreadable(IoError):
    """
    Raised when a source cannot be opened or parsed.

    Examples:
        - Missing file or permission denied
        - Malformed delimited text (e.g. a record with more fields than the first one)
        - Bytes that do not decode with the configured encoding
    """


class MetadataUnavailable(IoError):
    """
    Raised when provenance metadata (size, creation and modification time) cannot be read.
    """


class DestinationUnwritable(IoError):
    """
    Raised when writing a table fails.

    Notes:
        The write path is tmp file -> fsync -> os.replace(tmp, final). Failures at any step
        surface as DestinationUnwritable (with best-effort cleanup of the tmp file).
    """


class IoConfigError(IoError):
    """
    Raised when editor configuration is invalid or unsupported.

    Examples:
        - An explicit config path that does not exist
        - A TOML file that fails to parse
    """
