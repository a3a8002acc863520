"""Pure split functions for tokenizing a buffered byte stream.

Every function here follows the same contract: given the bytes buffered
so far and whether more bytes can still arrive, return a
:class:`~clin.core.models.ScanResult` describing how many bytes to
consume and which token (if any) to emit.  No I/O happens here; the
read loop lives in :mod:`clin.infra.stream_scanner`.
"""

from __future__ import annotations

from collections.abc import Callable

from clin.core.models import NEED_MORE, ScanResult

SplitFunc = Callable[[bytes | bytearray, bool], ScanResult]
"""Signature shared by all split functions."""

_REPLACEMENT: bytes = "\ufffd".encode("utf-8")
_NEWLINE: bytes = b"\n"
_CR: int = 0x0D


# ---------------------------------------------------------------------------
# Code-point splitting
# ---------------------------------------------------------------------------

def _utf8_length(lead: int) -> int:
    """Return the sequence length announced by a UTF-8 lead byte, or 0."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def scan_runes(data: bytes | bytearray, at_eof: bool) -> ScanResult:
    """Emit one Unicode code point per step.

    Invalid bytes, and sequences cut short by the end of the stream, are
    consumed one byte at a time and emitted as U+FFFD.
    """
    if not data:
        return ScanResult(advance=0, final=True) if at_eof else NEED_MORE

    width = _utf8_length(data[0])
    if width == 1:
        return ScanResult(advance=1, token=bytes(data[:1]))
    if width == 0:
        return ScanResult(advance=1, token=_REPLACEMENT)
    if len(data) < width:
        if not at_eof:
            return NEED_MORE
        return ScanResult(advance=1, token=_REPLACEMENT)

    candidate = bytes(data[:width])
    try:
        candidate.decode("utf-8")
    except UnicodeDecodeError:
        return ScanResult(advance=1, token=_REPLACEMENT)
    return ScanResult(advance=width, token=candidate)


# ---------------------------------------------------------------------------
# Delimiter splitting
# ---------------------------------------------------------------------------

def scan_delimited(
    data: bytes | bytearray,
    at_eof: bool,
    delim: bytes,
) -> ScanResult:
    """Split *data* on the first occurrence of *delim*.

    Rules, applied in order:

    1. An empty *delim* delegates to :func:`scan_runes`.
    2. On a match the token is everything before the delimiter.  When
       *delim* is exactly ``b"\\n"``, a ``\\r`` directly before it is
       dropped too; no other whitespace is touched.
    3. Without a match, more data is requested unless *at_eof*.
    4. At end of stream the remaining bytes form the final token.  An
       empty final token (the stream ended on a delimiter) is returned
       with ``keep=False``.
    """
    if not delim:
        return scan_runes(data, at_eof)

    i = data.find(delim)
    if i >= 0:
        j = i
        if delim == _NEWLINE and i > 0 and data[i - 1] == _CR:
            j -= 1
        return ScanResult(advance=i + len(delim), token=bytes(data[:j]))

    if not at_eof:
        return NEED_MORE

    return ScanResult(
        advance=len(data),
        token=bytes(data),
        final=True,
        keep=len(data) > 0,
    )


def make_splitter(delim: bytes) -> SplitFunc:
    """Bind *delim* into a two-argument split function."""
    delim = bytes(delim)

    def split(data: bytes | bytearray, at_eof: bool) -> ScanResult:
        return scan_delimited(data, at_eof, delim)

    return split
