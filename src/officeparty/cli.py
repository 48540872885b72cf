"""
OfficeParty CLI entrypoint.

Reads a JSON-lines customer list (stdin by default) and writes the customers living
within `--distance` of `--office` to stdout, sorted by user id, in the same format:

    officeparty --office dublin --distance 100km < customers.txt

Logs go to stderr. Exit status is 1 when the office, distance or input is invalid
or the output cannot be written.
"""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Any, TextIO

from officeparty.catalog.offices import list_offices
from officeparty.config.settings import LOG_LEVELS, get_settings
from officeparty.core.errors import PartyError, ReadFailure, WriteFailure
from officeparty.core.logging import configure_logging
from officeparty.invites.pipeline import customers_in_office_radius

logger = logging.getLogger(__name__)


def _cmd_list_offices(_: argparse.Namespace) -> int:
    for name in list_offices():
        print(name)
    return 0


def _open_input(path: Path) -> TextIO:
    try:
        return path.open(encoding="utf-8")
    except OSError as exc:
        raise ReadFailure(f"unable to open customer list {str(path)!r}: {exc.strerror or exc}") from exc


def _open_output(path: Path) -> TextIO:
    try:
        return path.open("w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise WriteFailure(f"unable to open output {str(path)!r}: {exc.strerror or exc}") from exc


def _close_output(writer: TextIO) -> None:
    # Closing flushes whatever is still buffered.
    try:
        writer.close()
    except OSError as exc:
        raise WriteFailure(f"unable to close output: {exc}") from exc


def _cmd_invite(args: argparse.Namespace) -> int:
    """Run the invite pipeline for the parsed flags."""
    with ExitStack() as stack:
        reader = sys.stdin
        if args.input:
            reader = stack.enter_context(_open_input(args.input))
        writer = sys.stdout
        if args.output:
            writer = _open_output(args.output)
            stack.callback(_close_output, writer)
        customers_in_office_radius(reader, writer, args.office, args.distance)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the OfficeParty CLI."""
    defaults = get_settings().defaults
    parser = argparse.ArgumentParser(
        prog="officeparty",
        description="Select the customers living within a distance of an office.",
    )
    parser.add_argument("--office", default=defaults.office, help="Office to hold the party at.")
    parser.add_argument(
        "--distance",
        default=defaults.distance,
        help="Maximum distance from the office, e.g. 100km, 1km500m (case-insensitive).",
    )
    parser.add_argument("--input", type=Path, default=None, help="Customer list file (default: stdin).")
    parser.add_argument("--output", type=Path, default=None, help="Where to write invited customers (default: stdout).")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the configured log level.",
    )
    parser.add_argument("--list-offices", action="store_true", help="Print the known offices and exit.")
    parser.set_defaults(func=_cmd_invite)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by the `officeparty` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    if args.list_offices:
        args.func = _cmd_list_offices

    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except PartyError as exc:
        logger.debug("Invite run failed", exc_info=True)
        print(f"officeparty: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
