"""Infrastructure layer — persistence of the grid.

Every raw I/O or csv exception is caught here and re-raised as a
:class:`~lukkari.exceptions.TimetableError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from lukkari.infra.csv_store import CsvGridStore

__all__: list[str] = ["CsvGridStore"]
