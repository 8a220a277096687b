"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on the concrete
file-backed store — so services can be exercised with an in-memory
fake.
"""

from __future__ import annotations

from typing import Protocol

from lukkari.core.models import Grid


class GridStore(Protocol):
    """Contract for grid persistence backends.

    Implementations must map all backend-specific exceptions to
    :class:`~lukkari.exceptions.TimetableError` subclasses.
    """

    def load(self) -> Grid:
        """Read the whole grid.

        Raises
        ------
        GridFileError
            When the backing file is missing or unreadable.
        GridParseError
            When the stored content is malformed.
        """
        ...  # pragma: no cover

    def save(self, grid: Grid) -> None:
        """Replace the stored grid with *grid*.

        Raises
        ------
        GridWriteError
            When the grid cannot be written.
        """
        ...  # pragma: no cover
