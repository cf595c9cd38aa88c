"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so every subcommand, ``--help`` and ``--version`` remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from strkit.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"(?<!\\)\[/?[a-z][a-z ]*\]")


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
	"""Create a Rich console instance targeting stderr.

	Diagnostics are never wrapped, and user text is printed exactly as
	typed instead of being read for emoji codes or highlighted.
	"""
	console_class = _load_rich_console_class()
	return console_class(
		stderr=True,
		soft_wrap=True,
		emoji=False,
		highlight=False,
	)


def escape_markup(text: str) -> str:
	"""Escape user-supplied text so Rich does not read it as markup."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text.replace("[", "\\[")
	return escape(text)


def strip_markup(text: str) -> str:
	"""Drop console markup tags for plain-text rendering."""
	return _MARKUP_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
			print(*plain, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
