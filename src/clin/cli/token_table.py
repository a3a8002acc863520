"""Rich table view of resolved tokens for ``clin args --table``.

Tokens are shown through :func:`repr` so that leading and trailing
whitespace, empty tokens, and control characters stay visible.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from clin.cli.console import get_rich_console
from clin.exceptions import EnvironmentError


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for token rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
            hint="Drop --table to print tokens as plain lines.",
        ) from exc
    return Table


def build_token_table(tokens: Sequence[str]) -> Any:
    """Return a Rich ``Table`` with one row per token."""
    table_class = _import_rich_table()
    from rich.markup import escape

    table = table_class(
        title="Resolved Tokens",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Length", justify="right", min_width=6)
    table.add_column("Token", justify="left")

    for i, token in enumerate(tokens, start=1):
        table.add_row(str(i), str(len(token)), escape(repr(token)))
    return table


def render_token_table(tokens: Sequence[str]) -> None:
    """Print the token table to stdout."""
    table = build_token_table(tokens)
    get_rich_console(stderr=False).print(table)
