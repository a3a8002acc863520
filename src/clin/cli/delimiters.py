"""Decode delimiter values typed on the command line into bytes.

Shells make control characters awkward to pass, so ``-d`` and ``-j``
accept a small set of backslash escapes::

    \\n  newline      \\r  carriage return   \\t  tab
    \\0  NUL byte     \\\\  backslash         \\xHH  any byte

Everything else is taken verbatim as UTF-8.  An empty value is valid and
selects per-character splitting for ``clin args``.
"""

from __future__ import annotations

import re

from clin.exceptions import InvalidDelimiterError

_ESCAPE = re.compile(r"\\(x[0-9A-Fa-f]{2}|.|$)", re.DOTALL)

_SIMPLE_ESCAPES: dict[str, bytes] = {
    "n": b"\n",
    "r": b"\r",
    "t": b"\t",
    "0": b"\0",
    "\\": b"\\",
}


def _literal(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def parse_delimiter(value: str) -> bytes:
    """Return the bytes denoted by *value*.

    Raises
    ------
    InvalidDelimiterError
        If *value* contains an unsupported or truncated escape.
    """
    parts: list[bytes] = []
    pos = 0
    for match in _ESCAPE.finditer(value):
        parts.append(_literal(value[pos : match.start()]))
        seq = match.group(1)
        if len(seq) == 3 and seq[0] == "x":
            parts.append(bytes([int(seq[1:], 16)]))
        elif seq in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[seq])
        else:
            raise InvalidDelimiterError(
                f"Unsupported escape sequence in delimiter: \\{seq}",
                hint=r"Supported escapes: \n \r \t \0 \\ \xHH",
            )
        pos = match.end()
    parts.append(_literal(value[pos:]))
    return b"".join(parts)
