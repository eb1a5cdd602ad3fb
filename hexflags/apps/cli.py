from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from hexflags.config import ensure_storage_dir, storage_dir
from hexflags.core.decode import decode_flags
from hexflags.core.hexval import parse_hex_u64
from hexflags.core.render import dumps, render_text, report_to_json
from hexflags.core.storage import list_types, open_in_file_browser
from hexflags.core.table import load_flag_table
from hexflags.errors import ArgumentError
from hexflags.logging import parse_log_level, setup_logging


log = logging.getLogger(__name__)

_SHOW_COMMANDS = {"show", "db"}
_TYPES_COMMAND = "types"


class _ArgumentParser(argparse.ArgumentParser):
    # Usage errors go through the same "Error: ..." boundary as everything else.
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="hexflags",
        description="Decode a 64-bit hex value into its set bits, optionally naming them from a flag table.",
        epilog="Commands: 'types' lists available tables, 'show' (or 'db') opens the table directory.",
    )
    parser.add_argument("value", nargs="?", default=None, help="Hex value (e.g. 0x1F, 80000001) or a command")
    parser.add_argument("type_name", nargs="?", default=None, help="Flag table name (<dir>/<type>.yml)")
    parser.add_argument("--dir", dest="storage_dir", default=None, help="Override table dir (default: ~/.bitflags)")
    parser.add_argument("--json", action="store_true", help="Output deterministic JSON instead of text")
    _add_logging_args(parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Every failure is reported as ``Error: <message>`` on stdout and the
    exit status stays 0.
    """

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        if args.verbose:
            level = logging.DEBUG
        else:
            level = parse_log_level(args.log_level)
        setup_logging(
            level=level,
            log_format=args.log_format,
            log_file=args.log_file,
            no_color=args.no_color,
        )
        log.debug("CLI start", extra={"cmd": args.value, "type_name": args.type_name})
        _dispatch(args)
    except Exception as exc:
        log.debug("command failed", exc_info=True)
        sys.stdout.write(f"Error: {exc}\n")
    return 0


def _dispatch(args: argparse.Namespace) -> None:
    if args.value is None:
        raise ArgumentError("Required hex var argument")

    if args.value in _SHOW_COMMANDS:
        path = ensure_storage_dir(storage_dir(args.storage_dir))
        open_in_file_browser(path)
        return None

    if args.value == _TYPES_COMMAND:
        path = ensure_storage_dir(storage_dir(args.storage_dir))
        for name in list_types(path):
            sys.stdout.write(name + "\n")
        return None

    try:
        value = parse_hex_u64(args.value)
    except ValueError as exc:
        raise ArgumentError(str(exc)) from exc

    table = None
    if args.type_name is not None:
        path = ensure_storage_dir(storage_dir(args.storage_dir))
        table = load_flag_table(args.type_name, path)

    report = decode_flags(value, table)
    if args.json:
        sys.stdout.write(dumps(report_to_json(report, table.type_name if table is not None else None)))
    else:
        sys.stdout.write(render_text(report))
    return None


def _add_logging_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        choices=["error", "warning", "info", "debug"],
        default=None,
        help="Logging level (default: warning)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Alias for --log-level=debug")
    parser.add_argument("--log-file", default=None, help="Optional log file path")
    parser.add_argument(
        "--log-format",
        choices=["pretty", "json"],
        default="pretty",
        help="Log output format (default: pretty)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in pretty logs")
