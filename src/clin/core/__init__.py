"""Core / service layer: configuration, split functions, and orchestration.

Rules
-----
* No ``print()`` calls.
* No direct filesystem access; files are opened through a
  :class:`~clin.core.protocols.FileOpener`.
* No imports from ``cli`` or ``infra``.
"""

from clin.core.input_service import InputService
from clin.core.models import NEED_MORE, Input, ScanResult
from clin.core.protocols import FileOpener, TokenScanner
from clin.core.tokenizer import SplitFunc, make_splitter, scan_delimited, scan_runes

__all__: list[str] = [
    "NEED_MORE",
    "FileOpener",
    "Input",
    "InputService",
    "ScanResult",
    "SplitFunc",
    "TokenScanner",
    "make_splitter",
    "scan_delimited",
    "scan_runes",
]
