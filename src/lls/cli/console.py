"""CLI console helpers with optional Rich support.

Diagnostics (warnings and errors) are rendered on stderr.  This module
avoids module-level imports of Rich so that listing, ``--help`` and
``--version`` keep working when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from lls.exceptions import EnvironmentError, LlsError

_MARKUP_TAG = re.compile(r"\[/?(?:bold red|yellow)\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, soft_wrap=True, emoji=False)


def escape(text: str) -> str:
	"""Escape *text* for Rich markup; identity when Rich is missing."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


def strip_markup(text: str) -> str:
	"""Remove the style tags this module emits."""
	return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def report_warning(error: LlsError) -> None:
	"""Show a non-fatal error on stderr and carry on."""
	console.print(f"[yellow]{escape(str(error))}[/yellow]")


def report_error(error: LlsError) -> None:
	"""Show an error, and its hint when present, on stderr."""
	console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
	if error.hint:
		console.print(f"[yellow]Hint:[/yellow] {escape(error.hint)}")
