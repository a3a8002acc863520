"""Process-wide default configuration and the top-level resolution functions.

A single :class:`~clin.core.models.Input` lives here for the lifetime of
the process.  :func:`resolve_args` and :func:`resolve_stream` use it
unless an explicit ``config`` is passed; :func:`default` hands out
independent copies for callers who want to tune the behaviour.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import IO, Any

from clin.core.input_service import InputService
from clin.core.models import Input
from clin.infra.file_opener import LocalFileOpener
from clin.infra.stream_scanner import StreamScanner

_DEFAULT_INPUT = Input()


def default() -> Input:
    """Return a copy of the default configuration."""
    return _DEFAULT_INPUT.copy()


def _service(config: Input | None) -> InputService:
    return InputService(
        config if config is not None else _DEFAULT_INPUT,
        scanner=StreamScanner(),
        opener=LocalFileOpener(),
    )


def resolve_args(args: Sequence[str], config: Input | None = None) -> list[str]:
    """Return *args* if non-empty, otherwise tokens read from the fallback stream.

    The fallback stream is ``config.stream`` (standard input by default),
    split on ``config.args_delim``.  A trailing delimiter does not produce
    an empty final token; a ``\\r`` before a ``\\n`` delimiter is dropped.
    """
    return _service(config).resolve_args(args)


def resolve_stream(args: Sequence[str], config: Input | None = None) -> IO[Any]:
    """Return a readable byte stream chosen from *args*.

    With no arguments this is the fallback stream.  A single argument
    naming a file that can be opened (and ``config.literal`` false)
    yields that file, left open for the caller to close.  Otherwise the
    stream holds the argument text, several arguments being joined by
    ``config.read_delim``.
    """
    return _service(config).resolve_stream(args)
