"""Infrastructure layer: stream reading and filesystem access.

Rules
-----
* No imports from ``cli``.
* No user-facing output; diagnostics go through :mod:`logging`.
* Failures degrade to a fallback, never an exception.
"""

from clin.infra.file_opener import LocalFileOpener
from clin.infra.stream_scanner import DEFAULT_CHUNK_SIZE, StreamScanner

__all__: list[str] = [
    "DEFAULT_CHUNK_SIZE",
    "LocalFileOpener",
    "StreamScanner",
]
