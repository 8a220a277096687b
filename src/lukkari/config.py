"""Runtime configuration — single source of truth for the timetable file.

The file location used to be a compiled-in constant; it is now an
injectable :class:`Settings` value so that tests and the ``--file``
option can point the store elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_TIMETABLE_PATH: Path = Path("timetable.csv")
"""Timetable file used when ``--file`` is not given (relative to CWD)."""

DELIMITER: str = ";"
ENCODING: str = "utf-8"


@dataclass(frozen=True, slots=True)
class Settings:
    """Where and how the grid is persisted."""

    timetable_path: Path
    """Path of the delimited timetable file."""

    delimiter: str = DELIMITER
    """Single-character field separator."""

    encoding: str = ENCODING
    """Text encoding of the file."""


def load_settings(file: str | Path | None = None) -> Settings:
    """Build :class:`Settings`, falling back to :data:`DEFAULT_TIMETABLE_PATH`."""
    path = Path(file).expanduser() if file else DEFAULT_TIMETABLE_PATH
    return Settings(timetable_path=path)
