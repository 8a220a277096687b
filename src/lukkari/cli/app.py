"""CLI application entry point and command routing for lukkari.

Every invocation is one request/response cycle: load the grid, apply
at most one command, persist, then print the table.  The trailing print
runs after *every* command, and on its own when no command is given.

Error policy
------------
* Invalid day codes and time arguments are silent no-ops (kept for
  compatibility with existing timetables); they are only visible with
  ``--verbose``.
* Store errors are shown as ``Error: <message>`` and the process still
  exits with :data:`exit_codes.SUCCESS`.
* :func:`cli` is the outer boundary for anything that escapes
  :func:`main`, translating it into an OS exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from lukkari.cli import exit_codes
from lukkari.cli.console import configure_logging, console, escape_markup
from lukkari.cli.table_view import print_table
from lukkari.config import DEFAULT_TIMETABLE_PATH, load_settings
from lukkari.core.models import WEEKDAYS
from lukkari.core.timetable_service import TimetableService
from lukkari.exceptions import TimetableError
from lukkari.infra.csv_store import CsvGridStore
from lukkari.version import __version__

logger = logging.getLogger(__name__)

CLEARED_MESSAGE: str = "Timetable cleared!"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``lukkari add <day> <time> <subject>``
    * ``lukkari print``
    * ``lukkari clear``
    * ``lukkari`` — same as ``print``
    """
    parser = argparse.ArgumentParser(
        prog="lukkari",
        description="A simple weekly timetable manager.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        metavar="PATH",
        help=f"Timetable file (default: {DEFAULT_TIMETABLE_PATH}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and file access to stderr.",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Render the timetable as a Rich table.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    day_codes = ", ".join(day.code for day in WEEKDAYS)
    add_parser = subparsers.add_parser(
        "add",
        help="Add a subject to the timetable.",
        description="Usage: add [DAY] [HOUR] [SUBJECT]",
    )
    add_parser.add_argument("day", help=f"Day of the week ({day_codes}).")
    add_parser.add_argument(
        "time",
        help="Hour of the day (e.g. 9, 9:00 or a range like 9-11).",
    )
    add_parser.add_argument("subject", help="The subject name.")

    subparsers.add_parser("print", help="Print the timetable.")
    subparsers.add_parser("clear", help="Clear the timetable.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _report(exc: TimetableError) -> None:
    """Show a store error as one unwrapped ``Error:`` line, plus any hint.

    Messages carry user-supplied paths, so they are escaped before Rich
    parses markup.
    """
    console.print(
        f"[bold red]Error:[/bold red] {escape_markup(str(exc))}",
        soft_wrap=True,
    )
    if exc.hint:
        console.print(
            f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}",
            soft_wrap=True,
        )


def _handle_add(
    service: TimetableService, day: str, time: str, subject: str,
) -> None:
    """Dispatch ``add``; unknown day or time silently changes nothing."""
    try:
        written = service.add(day, time, subject)
    except TimetableError as exc:
        _report(exc)
        return
    if not written:
        logger.debug("add %s %s %r changed nothing", day, time, subject)


def _handle_clear(service: TimetableService) -> None:
    """Dispatch ``clear`` and confirm."""
    try:
        service.clear()
    except TimetableError as exc:
        _report(exc)
        return
    print(CLEARED_MESSAGE)


def _handle_print(service: TimetableService, *, use_rich: bool) -> None:
    """Load and print the current grid, reporting load failures."""
    try:
        grid = service.load()
    except TimetableError as exc:
        _report(exc)
        return
    print_table(grid, use_rich=use_rich)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the lukkari CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    settings = load_settings(args.file)
    service = TimetableService(CsvGridStore.from_settings(settings))

    if args.command == "add":
        _handle_add(service, args.day, args.time, args.subject)
    elif args.command == "clear":
        _handle_clear(service)

    # Always runs, also after ``add`` and ``clear``.
    _handle_print(service, use_rich=args.rich)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TimetableError as exc:
        _report(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
