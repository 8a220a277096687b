"""lukkari — personal weekly timetable manager.

Stores a fixed Monday–Sunday, 8:00–20:00 grid in a semicolon-delimited
file and edits it from the command line.
"""

from lukkari.version import __version__

__all__: list[str] = ["__version__"]
