"""CLI console helpers with optional Rich support.

Rich is imported lazily so that plain token output, ``--help`` and
``--version`` keep working when it is not installed.  Diagnostics go to
stderr; stdout is reserved for resolved input.
"""

from __future__ import annotations

import sys
from typing import Any

from clin.exceptions import EnvironmentError


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
    """Create a Rich console targeting stderr (default) or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


def escape_markup(text: object) -> str:
    """Escape Rich markup in *text* so it renders verbatim.

    Without rich the text is returned unchanged, matching the plain
    ``print`` fallback of :class:`_ConsoleProxy`.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return str(text)
    return escape(str(text))


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-text fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else a plain ``print``."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
