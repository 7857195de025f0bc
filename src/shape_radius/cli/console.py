"""CLI console and logging helpers with optional Rich support.

Optional UI dependencies are imported lazily so that ``--help``,
``--version`` and ``doctor`` keep working when Rich is not installed.
Results go to stdout; diagnostics, errors and log records go to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from shape_radius.exceptions import EnvironmentError

_LOG_FORMAT = "%(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible stderr proxy with plain-text fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr ``print``."""
		try:
			rich_console = get_rich_console(stderr=True)
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
"""Diagnostics console (stderr)."""


def emit(text: str) -> None:
	"""Write a command result to stdout, unstyled, for piping."""
	sys.stdout.write(text if text.endswith("\n") else text + "\n")


def configure_logging(level: str | int = logging.WARNING) -> None:
	"""Route ``shape_radius`` log records to stderr.

	Uses ``rich.logging.RichHandler`` when Rich is installed, else a
	plain ``StreamHandler``.  Calling it again replaces the handler.
	"""
	root = logging.getLogger("shape_radius")
	for handler in list(root.handlers):
		root.removeHandler(handler)

	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(f"%(levelname)s {_LOG_FORMAT}"))
	else:
		handler = RichHandler(
			console=get_rich_console(stderr=True),
			show_path=False,
			show_time=False,
		)
		handler.setFormatter(logging.Formatter(_LOG_FORMAT))

	root.addHandler(handler)
	root.setLevel(level)
	root.propagate = False
