"""Infrastructure: incremental read loop driving a split function.

:class:`StreamScanner` reads a stream in fixed-size chunks, keeps the
unconsumed bytes in a growing buffer, and hands that buffer to a split
function from :mod:`clin.core.tokenizer` until the split function reports
a final token or the stream is exhausted.

Rules
-----
* Read failures (``OSError``) are treated as end of stream: the bytes
  already buffered are flushed through the split function as usual.
* ``str`` chunks from text-mode streams are encoded as UTF-8 with
  ``surrogateescape``.
* No ``print()``; diagnostics go to the module logger.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import IO, Any

from clin.core.tokenizer import SplitFunc

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE: int = 4096


class StreamScanner:
    """Concrete :class:`~clin.core.protocols.TokenScanner`.

    Parameters
    ----------
    chunk_size:
        Maximum number of bytes requested per ``read`` call.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size: int = chunk_size

    def scan(self, stream: IO[Any], split: SplitFunc) -> Iterator[bytes]:
        """Yield each token *split* produces from *stream*."""
        buf = bytearray()
        at_eof = False

        while True:
            if buf or at_eof:
                result = split(buf, at_eof)
                if result.advance:
                    del buf[: result.advance]
                if result.final:
                    if result.token is not None and result.keep:
                        yield result.token
                    return
                if result.token is not None:
                    yield result.token
                    continue
                if result.advance:
                    continue
                if at_eof:
                    return

            chunk = self._read(stream)
            if chunk:
                buf.extend(chunk)
            else:
                at_eof = True

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def _read(self, stream: IO[Any]) -> bytes | None:
        """Read one chunk; ``None`` signals a read failure."""
        try:
            chunk = stream.read(self._chunk_size)
        except OSError as exc:
            logger.debug("Stopped reading %r: %s", stream, exc)
            return None
        if chunk is None:
            # Non-blocking stream with nothing buffered: end of input.
            return b""
        if isinstance(chunk, str):
            return chunk.encode("utf-8", "surrogateescape")
        return bytes(chunk)
