"""Timetable output for the CLI layer.

The default view is the plain bordered table produced by
:func:`lukkari.core.renderer.render_table`, written to stdout.  With
``--rich`` the same grid is shown as a Rich table instead.
"""

from __future__ import annotations

import sys
from typing import Any

from lukkari.cli.console import get_rich_console
from lukkari.core.models import Grid
from lukkari.core.renderer import render_table
from lukkari.exceptions import MissingDependencyError


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for styled rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def _print_plain_table(grid: Grid) -> None:
    for line in render_table(grid):
        print(line, file=sys.stdout)


def _print_rich_table(grid: Grid) -> None:
    """Row 0 becomes the header, column 0 is styled as the time axis."""
    table_class = _import_rich_table()
    from rich.markup import escape

    table = table_class(
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
        show_lines=True,
    )
    header, *body = grid
    for index, label in enumerate(header):
        table.add_column(escape(label), style="bold" if index == 0 else None)
    for row in body:
        table.add_row(*(escape(cell) for cell in row))

    get_rich_console(stderr=False).print(table)


def print_table(grid: Grid, *, use_rich: bool = False) -> None:
    """Print *grid* to stdout, plain by default."""
    if use_rich:
        _print_rich_table(grid)
    else:
        _print_plain_table(grid)
