"""Infrastructure: open a command-line argument as a file path.

Opening is best effort.  Any ``OSError`` (missing file, directory,
permission denied, name too long, embedded NUL) is logged at DEBUG and
reported as ``None`` so that the caller can treat the argument as
literal text instead.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

logger = logging.getLogger(__name__)


class LocalFileOpener:
    """Concrete :class:`~clin.core.protocols.FileOpener` for the local filesystem.

    The returned handle is owned by the caller, who must close it.
    """

    def open(self, path: str) -> BinaryIO | None:
        try:
            handle = open(path, "rb")  # noqa: SIM115
        except (OSError, ValueError) as exc:
            logger.debug("Not opening %r as a file: %s", path, exc)
            return None
        logger.debug("Reading input from file %r", path)
        return handle
