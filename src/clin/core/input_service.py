"""Core input service: decides where text comes from and how it is chunked.

The service reads its :class:`~clin.core.models.Input` on every call, so
callers may mutate the configuration between calls.  Infrastructure is
injected at construction time (dependency inversion), keeping the core
free of direct filesystem access.

Guarantees
----------
* No method raises: unopenable files and failing streams degrade to a
  well-defined fallback.
* Non-empty argument lists are returned untouched.
* Files opened by :meth:`InputService.resolve_stream` are handed to the
  caller still open.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Sequence
from typing import IO, Any

from clin.core.models import Input
from clin.core.protocols import FileOpener, TokenScanner
from clin.core.tokenizer import make_splitter

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class _EncodedTextReader(io.RawIOBase):
    """Byte view over a text stream that has no binary buffer.

    Text is encoded as UTF-8 with ``surrogateescape`` as it is read.
    Closing the view leaves the wrapped stream open.
    """

    def __init__(self, text: IO[str], chunk_size: int = 4096) -> None:
        super().__init__()
        self._text = text
        self._chunk_size = chunk_size
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        while not self._pending:
            chunk = self._text.read(self._chunk_size)
            if not chunk:
                return 0
            self._pending = chunk.encode(_ENCODING, _ERRORS)
        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size


def _stdin() -> IO[Any]:
    """Return the process standard input as a binary stream."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is not None:
        return buffer
    return _EncodedTextReader(sys.stdin)  # type: ignore[return-value]


class InputService:
    """Resolve argument lists and byte streams against one configuration.

    Parameters
    ----------
    config:
        The caller-owned configuration consulted on each call.
    scanner:
        Any object satisfying the :class:`TokenScanner` protocol.
    opener:
        Any object satisfying the :class:`FileOpener` protocol.
    """

    def __init__(
        self,
        config: Input,
        *,
        scanner: TokenScanner,
        opener: FileOpener,
    ) -> None:
        self._config: Input = config
        self._scanner: TokenScanner = scanner
        self._opener: FileOpener = opener

    @property
    def config(self) -> Input:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fallback_stream(self) -> IO[Any]:
        """Return the configured fallback stream, defaulting to stdin."""
        if self._config.stream is not None:
            return self._config.stream
        return _stdin()

    def resolve_args(self, args: Sequence[str]) -> list[str]:
        """Return *args* if non-empty, else the tokens of the fallback stream.

        Tokens are split on ``config.args_delim`` and decoded as UTF-8
        with ``surrogateescape`` so that undecodable bytes survive.
        Reading consumes the stream; an exhausted stream yields ``[]``.
        """
        if len(args) > 0:
            return args if isinstance(args, list) else list(args)

        split = make_splitter(self._config.args_delim)
        tokens = [
            token.decode(_ENCODING, _ERRORS)
            for token in self._scanner.scan(self.fallback_stream(), split)
        ]
        logger.debug("Resolved %d token(s) from the fallback stream", len(tokens))
        return tokens

    def resolve_stream(self, args: Sequence[str]) -> IO[Any]:
        """Return a readable byte stream selected from *args*.

        * No arguments: the fallback stream itself.
        * One argument: the named file when ``literal`` is false and the
          file opens, otherwise the argument's own text.
        * Several arguments: their text joined by ``config.read_delim``.
        """
        if len(args) == 0:
            return self.fallback_stream()

        if len(args) == 1:
            if not self._config.literal:
                handle = self._opener.open(args[0])
                if handle is not None:
                    return handle
            return io.BytesIO(self._encode(args[0]))

        joined = bytes(self._config.read_delim).join(self._encode(a) for a in args)
        return io.BytesIO(joined)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _encode(text: str) -> bytes:
        return text.encode(_ENCODING, _ERRORS)
