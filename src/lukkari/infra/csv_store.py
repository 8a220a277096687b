"""Delimited-file implementation of :class:`~lukkari.core.protocols.GridStore`.

This module is the **only** place in the codebase that touches the
timetable file.  ``OSError``, ``csv.Error`` and ``UnicodeDecodeError``
are caught here and re-raised as typed
:class:`~lukkari.exceptions.TimetableError` subclasses — nothing raw
escapes the infrastructure boundary.

Writes overwrite the file in place; there is no backup or atomic
rename, so a failed write may leave a partial file behind.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from lukkari.config import Settings
from lukkari.core.models import Grid
from lukkari.exceptions import (
    GridFileError,
    GridParseError,
    GridWriteError,
    append_clear_suggestion,
)

logger = logging.getLogger(__name__)


class CsvGridStore:
    """Concrete :class:`GridStore` backed by a semicolon-delimited file.

    Usage::

        store = CsvGridStore(Path("timetable.csv"))
        grid = store.load()

    Every row of the file is one grid row; there is no header record.
    """

    def __init__(
        self,
        path: Path,
        *,
        delimiter: str = ";",
        encoding: str = "utf-8",
    ) -> None:
        self.path: Path = Path(path)
        self._delimiter = delimiter
        self._encoding = encoding

    @classmethod
    def from_settings(cls, settings: Settings) -> CsvGridStore:
        """Build a store from resolved :class:`~lukkari.config.Settings`."""
        return cls(
            settings.timetable_path,
            delimiter=settings.delimiter,
            encoding=settings.encoding,
        )

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load(self) -> Grid:
        """Read the file into a grid.

        Raises
        ------
        GridFileError
            When the file does not exist or cannot be opened.
        GridParseError
            When the file is empty, undecodable, or its rows differ in
            length.
        """
        logger.debug("Loading timetable from %s", self.path)
        try:
            with self.path.open(encoding=self._encoding, newline="") as handle:
                rows = [
                    list(record)
                    for record in csv.reader(handle, delimiter=self._delimiter)
                    if record
                ]
        except FileNotFoundError as exc:
            raise GridFileError(
                f"Timetable file not found: {self.path}",
                hint=append_clear_suggestion(None),
            ) from exc
        except UnicodeDecodeError as exc:
            raise GridParseError(
                f"Timetable file is not valid {self._encoding} text: {self.path}",
            ) from exc
        except csv.Error as exc:
            raise GridParseError(
                f"Malformed timetable file {self.path}: {exc}",
            ) from exc
        except OSError as exc:
            raise GridFileError(
                f"Cannot read timetable file {self.path}: {exc.strerror or exc}",
            ) from exc

        self._validate(rows)
        return rows

    def save(self, grid: Grid) -> None:
        """Overwrite the file with *grid*.

        Raises
        ------
        GridWriteError
            When the file or its parent directory cannot be written.
        """
        logger.debug("Saving %d row(s) to %s", len(grid), self.path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding=self._encoding, newline="") as handle:
                writer = csv.writer(
                    handle,
                    delimiter=self._delimiter,
                    lineterminator="\n",
                )
                writer.writerows(grid)
        except (OSError, csv.Error) as exc:
            raise GridWriteError(
                f"Cannot write timetable file {self.path}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate(self, rows: Grid) -> None:
        """Reject empty files and ragged rows.

        Blank lines were already dropped by :meth:`load`.
        """
        if not rows:
            raise GridParseError(
                f"Timetable file is empty: {self.path}",
                hint=append_clear_suggestion(None),
            )

        expected = len(rows[0])
        for row_number, row in enumerate(rows, start=1):
            if len(row) != expected:
                raise GridParseError(
                    f"Malformed timetable file {self.path}: row {row_number} "
                    f"has {len(row)} field(s), expected {expected}",
                    hint=append_clear_suggestion(None),
                )
