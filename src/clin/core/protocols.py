"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
:class:`~clin.core.input_service.InputService` depends ONLY on these
protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, Any, BinaryIO, Protocol

from clin.core.tokenizer import SplitFunc


class TokenScanner(Protocol):
    """Contract for the read loop that drives a split function."""

    def scan(self, stream: IO[Any], split: SplitFunc) -> Iterator[bytes]:
        """Yield tokens read from *stream* until it is exhausted.

        Implementations must not raise on read failures: an ``OSError``
        ends the iteration early, keeping every token already yielded.
        """
        ...  # pragma: no cover


class FileOpener(Protocol):
    """Contract for opening a named file as a binary stream."""

    def open(self, path: str) -> BinaryIO | None:
        """Return an open binary handle for *path*, or ``None`` on failure.

        Implementations must never raise for an unopenable path; the
        caller falls back to treating *path* as literal text.
        """
        ...  # pragma: no cover
