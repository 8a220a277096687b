"""Plain-text table rendering.

Every function here is pure: the renderer returns lines and the CLI
layer decides where to print them.

Layout for ``[["a", "bb"], ["c", "d"]]``::

    ----------
    | a | bb |
    ----------
    | c | d  |
    ----------
"""

from __future__ import annotations

from collections.abc import Sequence


def column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    """Return the longest cell length of every column.

    The number of columns is taken from the first row.
    """
    widths = [0] * len(rows[0])
    for row in rows:
        for index, cell in enumerate(row[: len(widths)]):
            widths[index] = max(widths[index], len(cell))
    return widths


def border_line(widths: Sequence[int]) -> str:
    """Horizontal dash line matching the padded column widths."""
    return "".join("-" + "-" * (width + 2) for width in widths) + "-"


def format_row(row: Sequence[str], widths: Sequence[int]) -> str:
    """Pipe-delimited row with each cell padded to its column width."""
    cells = "".join(
        f"| {cell:<{width}} " for cell, width in zip(row, widths)
    )
    return cells + "|"


def render_table(rows: Sequence[Sequence[str]]) -> list[str]:
    """Render *rows* as a bordered table, header separated from the body.

    *rows* must contain at least one row.
    """
    widths = column_widths(rows)
    border = border_line(widths)

    lines = [border]
    for row_index, row in enumerate(rows):
        lines.append(format_row(row, widths))
        if row_index == 0:
            lines.append(border)
    lines.append(border)
    return lines
