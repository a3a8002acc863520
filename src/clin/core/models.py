"""Domain models for clin.

:class:`Input` is the caller-owned configuration shared by the list and
stream resolution paths.  Unlike the frozen result types it is mutable:
callers tune one instance and reuse it across calls.

:class:`ScanResult` is the immutable outcome of a single split step.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import BinaryIO


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Input:
    """Configuration for :func:`~clin.resolve.resolve_args` and
    :func:`~clin.resolve.resolve_stream`.
    """

    stream: BinaryIO | None = None
    """Fallback stream.  ``None`` means the process standard input,
    looked up at call time."""

    literal: bool = False
    """If true, a single argument is never interpreted as a file path."""

    args_delim: bytes = b"\n"
    """Separator used to tokenize the fallback stream.  Empty splits on
    each code point."""

    read_delim: bytes = b" "
    """Separator inserted between arguments when they are joined into
    one stream."""

    def copy(self) -> Input:
        """Return an independent copy sharing only the ``stream`` handle."""
        return replace(self)


# ---------------------------------------------------------------------------
# Split step outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScanResult:
    """What a split function decided for the currently buffered bytes.

    ``advance == 0`` with ``token is None`` and ``final`` false means
    "need more data".
    """

    advance: int
    """Number of buffered bytes consumed by this step."""

    token: bytes | None = None
    """Token to emit, or ``None`` when nothing is emitted yet."""

    final: bool = False
    """True when no further tokens follow this one."""

    keep: bool = True
    """False when a final token is computed but must be discarded."""


NEED_MORE = ScanResult(advance=0)
"""Shared result requesting more input before a decision can be made."""
