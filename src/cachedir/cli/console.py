"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so every command keeps working, in plain text, even when
Rich is not installed.  All output targets stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from cachedir.exceptions import CachedirError


class ConsoleUnavailableError(CachedirError):
	"""Raised when Rich cannot be imported."""


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``ConsoleUnavailableError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise ConsoleUnavailableError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain stderr fallback."""

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain stderr print.

		Text is never parsed as Rich markup, so paths containing square
		brackets come out verbatim.  Lines are never wrapped.
		"""
		try:
			rich_console = get_rich_console()
		except ConsoleUnavailableError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(
			*objects,
			style=style,
			markup=False,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
