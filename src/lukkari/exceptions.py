"""Custom exception hierarchy for lukkari.

All exceptions that cross layer boundaries must inherit from
:class:`TimetableError`.  Raw ``OSError`` / ``csv.Error`` instances must
NEVER propagate beyond the infrastructure layer — they are caught there
and re-raised as a typed subclass defined here.

Invalid user input (unknown day code, unparseable time) is deliberately
*not* represented here: it is a silent no-op, not an error.

Hierarchy
---------
TimetableError
├── GridFileError
├── GridParseError
├── GridWriteError
└── MissingDependencyError
"""

from __future__ import annotations


class TimetableError(Exception):
    """Base exception for all lukkari errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI can render a clean ``Error:`` line
    without leaking stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Grid file -------------------------------------------------------------

class GridFileError(TimetableError):
    """Raised when the timetable file is missing or cannot be read."""


class GridParseError(TimetableError):
    """Raised when the timetable file content is malformed."""


class GridWriteError(TimetableError):
    """Raised when the timetable file cannot be written."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(TimetableError):
    """Raised when an optional runtime dependency is not installed."""


def append_clear_suggestion(hint: str | None) -> str:
    """Append ``lukkari clear`` guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Create a blank timetable with: lukkari clear"
    if not hint:
        return marker
    if marker in hint:
        return hint
    return "\n".join((hint, marker))
