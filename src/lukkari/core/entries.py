"""Entry mutation — write a subject into a single grid cell."""

from __future__ import annotations

import logging

from lukkari.core.models import DAY_COLUMNS, Entry, Grid

logger = logging.getLogger(__name__)


def resolve_day(day_code: str) -> int | None:
    """Return the column index for *day_code*, or ``None`` if unknown."""
    return DAY_COLUMNS.get(day_code)


def set_entry(grid: Grid, day_code: str, time_key: str, subject: str) -> bool:
    """Overwrite the ``[time_key][day_code]`` cell of *grid* in place.

    Rows are scanned top to bottom and only the first row whose time
    label equals *time_key* (and that is wide enough) is touched.
    Unknown day codes, unknown time keys and too-short rows leave the
    grid unchanged.

    Returns ``True`` when a cell was written.
    """
    column = resolve_day(day_code)
    if column is None:
        logger.debug("Unknown day code %r, entry skipped", day_code)
        return False

    # Row 0 holds the day names and is never a write target.
    for row in grid[1:]:
        if row and row[0] == time_key:
            if len(row) > column:
                row[column] = subject
                return True

    logger.debug("No row for time %r on %r, entry skipped", time_key, day_code)
    return False


def apply_entry(grid: Grid, entry: Entry) -> bool:
    """Convenience wrapper around :func:`set_entry` for an :class:`Entry`."""
    return set_entry(grid, entry.day_code, entry.time_key, entry.subject)
