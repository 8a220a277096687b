"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and plain table output keep
working when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from lukkari.exceptions import MissingDependencyError

LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance (stderr unless told otherwise)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, soft_wrap: bool = False) -> None:
		"""Render with Rich when available, else plain stderr print.

		With *soft_wrap* Rich leaves long lines unbroken.
		"""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, soft_wrap=soft_wrap)


console = _ConsoleProxy()


def escape_markup(text: str) -> str:
	"""Escape Rich markup in *text*; unchanged when Rich is absent."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


def configure_logging(verbose: bool = False) -> None:
	"""Route library logging to stderr.

	WARNING and above by default, DEBUG with ``--verbose``.  Uses
	``rich.logging.RichHandler`` when Rich is installed.
	"""
	level = logging.DEBUG if verbose else logging.WARNING
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(LOG_FORMAT))
	else:
		handler = RichHandler(
			console=get_rich_console(),
			show_time=False,
			show_path=False,
		)
		handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

	package_logger = logging.getLogger("lukkari")
	package_logger.handlers.clear()
	package_logger.addHandler(handler)
	package_logger.setLevel(level)
