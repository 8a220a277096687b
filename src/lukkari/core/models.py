"""Domain models and fixed layout constants for the weekly grid.

The grid itself is a plain ``list[list[str]]`` so that it maps one-to-one
onto the delimited file.  Everything that gives the grid its shape — the
weekday columns and the hour rows — lives here as static lookup tables
instead of being scattered as literals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

Grid: TypeAlias = list[list[str]]
"""Row-major table of cells.  Row 0 is the header, column 0 the time labels."""


# ---------------------------------------------------------------------------
# Weekdays
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Weekday:
    """One day column of the grid."""

    code: str
    """Two-letter abbreviation accepted on the command line (e.g. ``ma``)."""

    name: str
    """Header label stored in row 0 (e.g. ``Maanantai``)."""

    column: int
    """Column index of the day in the grid (1–7)."""


WEEKDAYS: tuple[Weekday, ...] = (
    Weekday("ma", "Maanantai", 1),
    Weekday("ti", "Tiistai", 2),
    Weekday("ke", "Keskiviikko", 3),
    Weekday("to", "Torstai", 4),
    Weekday("pe", "Perjantai", 5),
    Weekday("la", "Lauantai", 6),
    Weekday("su", "Sunnuntai", 7),
)

DAY_COLUMNS: dict[str, int] = {day.code: day.column for day in WEEKDAYS}
"""Day code → column index."""


# ---------------------------------------------------------------------------
# Hours
# ---------------------------------------------------------------------------

FIRST_HOUR: int = 8
LAST_HOUR: int = 20

TIME_LABELS: tuple[str, ...] = tuple(
    f"{hour}:00" for hour in range(FIRST_HOUR, LAST_HOUR + 1)
)
"""Column-0 labels of rows 1..13 (``"8:00"`` … ``"20:00"``)."""

HEADER_ROW: tuple[str, ...] = ("", *(day.name for day in WEEKDAYS))

ROW_COUNT: int = len(TIME_LABELS) + 1
COLUMN_COUNT: int = len(HEADER_ROW)


def blank_grid() -> Grid:
    """Return a fresh 14×8 template: header, time labels, empty cells."""
    grid: Grid = [list(HEADER_ROW)]
    for label in TIME_LABELS:
        grid.append([label] + [""] * (COLUMN_COUNT - 1))
    return grid


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Entry:
    """A single ``(time, day) → subject`` assignment."""

    day_code: str
    time_key: str
    subject: str
