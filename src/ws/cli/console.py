"""CLI console helpers with optional Rich support.

Rich is imported lazily so every command still works, in plain text,
when it is not installed.  Two streams matter to ws:

* **stdout** carries command results only (``ws <name>`` must print
  the bare path so that ``cd "$(ws <name>)"`` works).
* **stderr** carries confirmations, errors and hints.
"""

from __future__ import annotations

import sys
from typing import Any

from ws.exceptions import WsError


class RichUnavailableError(WsError):
    """Raised internally when ``rich`` cannot be imported."""


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` or raise ``RichUnavailableError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise RichUnavailableError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console targeting stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


def emit(text: str) -> None:
	"""Write *text* and a newline to stdout, unstyled."""
	sys.stdout.write(f"{text}\n")
	sys.stdout.flush()


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, plain: str | None = None) -> None:
		"""Render with Rich when available, else plain print.

		*plain* replaces *objects* in the fallback so Rich markup never
		leaks into plain-text output.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except RichUnavailableError:
			stream = sys.stderr if self._stderr else sys.stdout
			if plain is not None:
				print(plain, file=stream)
			else:
				print(*objects, file=stream)
			return
		rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
out_console = _ConsoleProxy(stderr=False)
