"""Pure parsing of the ``<time>`` argument into concrete time keys.

Accepted shapes:

* ``"9"``       → ``("9:00",)``
* ``"9:00"``    → used verbatim, as is any string containing a colon
* ``"9-11"``    → ``("9:00", "10:00", "11:00")``

A malformed range yields an empty tuple, which makes the whole ``add``
a no-op.  So does a reversed range such as ``"11-9"``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

RANGE_SEPARATOR: str = "-"
MAX_HOUR_VALUE: int = 255
"""Largest hour accepted in a range bound; larger values reject the range."""


def _parse_hour(text: str) -> int | None:
    """Parse an unsigned range bound, or return ``None``."""
    # One optional plus sign, as an unsigned integer parse allows.
    if text.startswith("+"):
        text = text[1:]
    if not text or not text.isascii() or not text.isdigit():
        return None
    value = int(text)
    if value > MAX_HOUR_VALUE:
        return None
    return value


def format_hour(hour: int) -> str:
    """Render *hour* as a time key (``9`` → ``"9:00"``)."""
    return f"{hour}:00"


def expand_range(spec: str) -> tuple[str, ...]:
    """Expand ``"H1-H2"`` into every hour from H1 to H2 inclusive."""
    parts = spec.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        logger.debug("Time range %r must have exactly two bounds", spec)
        return ()

    start, end = (_parse_hour(part) for part in parts)
    if start is None or end is None:
        logger.debug("Time range %r has a non-numeric bound", spec)
        return ()

    return tuple(format_hour(hour) for hour in range(start, end + 1))


def expand_time(spec: str) -> tuple[str, ...]:
    """Turn a free-form time argument into the time keys it denotes."""
    if RANGE_SEPARATOR in spec:
        return expand_range(spec)
    if ":" in spec:
        return (spec,)
    return (f"{spec}:00",)
