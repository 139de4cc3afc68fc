from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any

import polars as pl

from .core.errors import IndexOutOfBounds
from .io.config import EditorSettings
from .io.errors import IoError
from .io.frame import page_frame
from .io.session import TableSession
from .log import configure_logging

logger = logging.getLogger(__name__)


def _print_frame(df: pl.DataFrame) -> None:
    """Print a frame with every row and full-width string cells."""
    with pl.Config(tbl_rows=-1, fmt_str_lengths=80):
        print(df)


def _parse_set(parser: argparse.ArgumentParser, triple: list[str]) -> tuple[int, int, str]:
    row, field, value = triple
    try:
        return int(row), int(field), value
    except ValueError:
        parser.error(f"--set expects ROW FIELD VALUE with integer ROW and FIELD, got {triple}")


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tabedit",
        description="Load a CSV table, page through it, edit rows and fields, and write it back.",
    )
    p.add_argument("file", help="Input CSV file.")
    p.add_argument(
        "--dimension",
        default=None,
        help='Declared dimensions "ROWS,COLS"; malformed values fall back to measuring the file.',
    )
    p.add_argument(
        "-d",
        "--debug",
        action="count",
        default=0,
        help="Increase log verbosity (-d info, -dd debug).",
    )
    p.add_argument(
        "-r",
        "--records-per-page",
        type=int,
        default=None,
        help="Rows per page (0 means 10; default from config).",
    )
    p.add_argument("--no-header", action="store_true", help="Treat the first record as data.")
    p.add_argument("--delimiter", default=None, help="Single-byte field delimiter.")
    p.add_argument("--config", default=None, help="Path to a tabedit TOML config file.")
    p.add_argument("--page", type=int, default=1, help="1-based page number to display.")
    p.add_argument("--all", action="store_true", help="Display every row instead of one page.")
    p.add_argument(
        "--delete-row",
        type=int,
        action="append",
        default=[],
        metavar="INDEX",
        help="Blank out the row at INDEX (0-based; repeatable).",
    )
    p.add_argument(
        "--set",
        nargs=3,
        action="append",
        default=[],
        metavar=("ROW", "FIELD", "VALUE"),
        help="Replace one field value (0-based indices; repeatable).",
    )
    p.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the table here (default from config when edits are made).",
    )
    p.add_argument(
        "--info", action="store_true", help="Print provenance and dimensions as JSON."
    )
    return p


def _settings_from_args(args: argparse.Namespace) -> EditorSettings:
    s = EditorSettings.load(args.config)
    if args.records_per_page is not None:
        s = replace(s, records_per_page=args.records_per_page)
    if args.no_header:
        s = replace(s, has_header=False)
    if args.delimiter is not None:
        s = replace(s, delimiter=args.delimiter)
    return s


def _info(session: TableSession) -> dict[str, Any]:
    table = session.table
    out: dict[str, Any] = table.provenance.model_dump(mode="json")
    out.update(
        {
            "row_count": table.row_count,
            "field_count": table.field_count,
            "stored_rows": len(table.rows),
            "pages": len(table.pages),
        }
    )
    return out


def _apply_edits(
    session: TableSession, deletes: list[int], sets: list[tuple[int, int, str]]
) -> int:
    """Apply deletions then field edits; failures are reported and skipped. Returns failures."""
    failures = 0
    for index in deletes:
        try:
            session.delete_row(index)
        except IndexOutOfBounds as exc:
            failures += 1
            logger.info("delete row %d skipped: %s", index, exc)
            print(f"Error deleting row: {exc}", file=sys.stderr)
    for row, field, value in sets:
        try:
            session.modify_field(row, field, value)
        except IndexOutOfBounds as exc:
            failures += 1
            logger.info("set row %d field %d skipped: %s", row, field, exc)
            print(f"Error modifying field: {exc}", file=sys.stderr)
    return failures


def main(argv: list[str] | None = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.records_per_page is not None and args.records_per_page < 0:
        parser.error("--records-per-page must be >= 0")
    if args.delimiter is not None and len(args.delimiter.encode()) != 1:
        parser.error("--delimiter must be a single-byte character")
    sets = [_parse_set(parser, triple) for triple in args.set]

    configure_logging(args.debug)

    try:
        settings = _settings_from_args(args)
        session = TableSession(settings, args.file)
        session.load()
        session.resolve_dimensions(args.dimension)
        pages = session.paginate()
    except IoError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Created {len(pages)} pages")
    if args.all:
        _print_frame(page_frame(session.table))
    elif pages:
        number = args.page - 1
        if 0 <= number < len(pages):
            _print_frame(page_frame(session.table, pages[number]))
        else:
            print(f"Error: page {args.page} does not exist (1..{len(pages)})", file=sys.stderr)

    edited = bool(args.delete_row or sets)
    if edited:
        failures = _apply_edits(session, args.delete_row, sets)
        if failures:
            logger.info("%d edit(s) skipped", failures)
        print("Data after edits:")
        _print_frame(page_frame(session.table))

    if args.output is not None or edited:
        try:
            dest = session.write(args.output)
        except IoError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(f"Wrote {dest}")

    if args.info:
        print(json.dumps(_info(session), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
