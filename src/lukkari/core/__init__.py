"""Core / service layer — pure grid logic and command orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O (persistence goes through :class:`GridStore`).
* No imports from ``cli`` or ``infra``.
"""

from lukkari.core.entries import set_entry
from lukkari.core.models import Entry, Grid, Weekday, blank_grid
from lukkari.core.protocols import GridStore
from lukkari.core.renderer import render_table
from lukkari.core.time_expander import expand_time
from lukkari.core.timetable_service import TimetableService

__all__: list[str] = [
    "Entry",
    "Grid",
    "GridStore",
    "TimetableService",
    "Weekday",
    "blank_grid",
    "expand_time",
    "render_table",
    "set_entry",
]
