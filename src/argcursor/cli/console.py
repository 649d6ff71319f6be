"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
and plain-text fallbacks keep working when it is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from argcursor.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def _load_rich_table_class() -> type[Any]:
	try:
		from rich.table import Table
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Table


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain stderr print.

		Pass ``markup=False`` for text taken from the command line, so
		brackets in user tokens are not read as Rich styles.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, markup=markup)

	def table(
		self,
		title: str,
		columns: Sequence[str],
		rows: Sequence[Sequence[str]],
	) -> None:
		"""Render *rows* as a table, or as tab-separated lines without Rich."""
		try:
			rich_console = get_rich_console()
			table_class = _load_rich_table_class()
		except EnvironmentError:
			print(title, file=sys.stderr)
			print("\t".join(columns), file=sys.stderr)
			for row in rows:
				print("\t".join(row), file=sys.stderr)
			return

		from rich.text import Text

		table = table_class(title=title, show_lines=False)
		for column in columns:
			table.add_column(column)
		for row in rows:
			table.add_row(*(Text(cell) for cell in row))
		rich_console.print(table)


console = _ConsoleProxy()
