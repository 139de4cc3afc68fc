"""
Configuration for the tabedit.io module.

Defines EditorSettings, a frozen dataclass carrying runtime configuration for loading,
paginating and writing tables. Defaults are sourced from tabedit.core.constants where the
core owns the value (page size); the rest are plain CSV defaults (comma, UTF-8, header row).

Precedence
- environment (TABEDIT_*) > TOML (./tabedit.toml or [tool.tabedit] in ./pyproject.toml) > defaults.
- Values that fail to parse or validate are ignored and the previous layer wins.

Import DAG discipline
- Depends only on stdlib and tabedit.core.constants.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from tabedit.core.constants import DEFAULT_RECORDS_PER_PAGE

from .errors import IoConfigError

_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}


@dataclass(frozen=True)
class EditorSettings:
    """
    Runtime settings for the tabedit.io layer.

    Attributes:
        records_per_page (int): Rows per page (0 means DEFAULT_RECORDS_PER_PAGE).
        has_header (bool): Treat the first record as a header kept apart from the rows.
        delimiter (str): Single-byte (ASCII) field delimiter for reading and writing.
        encoding (str): Text encoding for reading and writing ("utf8" by default).
        output_path (str): Destination used when a write does not name one.

    Examples:
        >>> EditorSettings(records_per_page=25, has_header=False)  # doctest: +ELLIPSIS
        EditorSettings(records_per_page=25, has_header=False, ...)
    """

    records_per_page: int = DEFAULT_RECORDS_PER_PAGE
    has_header: bool = True
    delimiter: str = ","
    encoding: str = "utf8"
    output_path: str = "output.csv"

    @classmethod
    def _apply_mapping(cls, base: EditorSettings, cfg: dict[str, Any] | None) -> EditorSettings:
        """Apply a loose config mapping onto EditorSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "records_per_page" in cfg:
            v = cfg["records_per_page"]
            try:
                n = -1 if isinstance(v, bool) else int(v)
            except (TypeError, ValueError):
                n = -1
            if n >= 0:
                s = replace(s, records_per_page=n)

        if "has_header" in cfg:
            v = cfg["has_header"]
            if isinstance(v, bool):
                s = replace(s, has_header=v)
            elif isinstance(v, str) and v.strip().lower() in _TRUE | _FALSE:
                s = replace(s, has_header=v.strip().lower() in _TRUE)

        if "delimiter" in cfg and isinstance(cfg["delimiter"], str):
            if _single_byte(cfg["delimiter"]):
                s = replace(s, delimiter=cfg["delimiter"])

        if "encoding" in cfg and isinstance(cfg["encoding"], str) and cfg["encoding"].strip():
            s = replace(s, encoding=cfg["encoding"].strip())

        if "output_path" in cfg and isinstance(cfg["output_path"], str) and cfg["output_path"]:
            s = replace(s, output_path=cfg["output_path"])

        return s

    @classmethod
    def from_env(
        cls, base: EditorSettings | None = None, prefix: str = "TABEDIT_"
    ) -> EditorSettings:
        """
        Build EditorSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - TABEDIT_RECORDS_PER_PAGE
            - TABEDIT_HAS_HEADER (1/0/true/false/yes/no/on/off)
            - TABEDIT_DELIMITER
            - TABEDIT_ENCODING
            - TABEDIT_OUTPUT_PATH
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in ("records_per_page", "has_header", "delimiter", "encoding", "output_path"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> EditorSettings:
        """
        Build EditorSettings from a TOML file.

        Search order when `path` is None:
            1) ./tabedit.toml (with either an [editor] table or top-level keys)
            2) ./pyproject.toml under [tool.tabedit]

        Returns defaults if no file is present.

        Raises:
            IoConfigError: If an explicit `path` is missing or is not valid TOML.
        """
        s = cls()

        if path is not None:
            p = Path(path)
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                raise IoConfigError(f"cannot load config {str(p)!r}: {exc}") from exc
            return cls._apply_mapping(s, _section(p, data))

        for p in (Path.cwd() / "tabedit.toml", Path.cwd() / "pyproject.toml"):
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                continue
            cfg = _section(p, data)
            if cfg:
                return cls._apply_mapping(s, cfg)
        return s

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> EditorSettings:
        """
        Load EditorSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search tabedit.toml then pyproject.toml.

        Returns:
            EditorSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s


def _single_byte(delimiter: str) -> bool:
    return len(delimiter.encode()) == 1


def _section(p: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    # pyproject.toml -> [tool.tabedit]; anything else -> [editor] or top-level keys
    if p.name == "pyproject.toml":
        tool = data.get("tool", {})
        cfg = tool.get("tabedit") if isinstance(tool, dict) else None
        return cfg if isinstance(cfg, dict) else None
    editor = data.get("editor")
    if isinstance(editor, dict):
        return editor
    return data
