"""Core timetable service — one load/mutate/save cycle per command.

Depends on a :class:`~lukkari.core.protocols.GridStore` injected at
construction time, keeping the core free of any filesystem imports.

Guarantees
----------
* No ``print()``; the CLI layer renders results.
* Only :class:`~lukkari.exceptions.TimetableError` subclasses escape.
* Invalid day codes and time arguments are silent no-ops: nothing is
  written and nothing is raised.
"""

from __future__ import annotations

import logging

from lukkari.core.entries import apply_entry
from lukkari.core.models import Entry, Grid, blank_grid
from lukkari.core.protocols import GridStore
from lukkari.core.time_expander import expand_time

logger = logging.getLogger(__name__)


class TimetableService:
    """Apply timetable commands against a :class:`GridStore`.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`GridStore` protocol.
    """

    def __init__(self, store: GridStore) -> None:
        self._store: GridStore = store

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self) -> Grid:
        """Return the current grid as stored."""
        return self._store.load()

    def add(self, day_code: str, time_spec: str, subject: str) -> int:
        """Write *subject* into every slot that *time_spec* denotes on *day_code*.

        The grid is saved only when at least one cell changed, so an
        invalid day or time leaves the file untouched.

        Returns
        -------
        int
            Number of cells written.
        """
        time_keys = expand_time(time_spec)
        if not time_keys:
            logger.debug("Time %r expanded to no slots, nothing to add", time_spec)
            return 0

        grid = self._store.load()
        entries = [Entry(day_code, time_key, subject) for time_key in time_keys]
        written = sum(apply_entry(grid, entry) for entry in entries)

        if written:
            self._store.save(grid)
            logger.info(
                "Added %r on %s for %d slot(s)", subject, day_code, written,
            )
        return written

    def clear(self) -> Grid:
        """Reset the stored grid to the blank template and return it."""
        grid = blank_grid()
        self._store.save(grid)
        logger.info("Timetable reset to blank template")
        return grid
