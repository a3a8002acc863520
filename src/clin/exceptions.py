"""Custom exception hierarchy for clin.

The resolution core never raises: file-open and stream-read failures
degrade to a fallback instead.  The exceptions below belong to the
surfaces around the core (argument decoding, optional UI packages) and
are rendered by the CLI error boundary.

Hierarchy
---------
ClinError
├── InvalidDelimiterError
└── EnvironmentError
"""

from __future__ import annotations


class ClinError(Exception):
    """Base exception for all clin errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Delimiters ------------------------------------------------------------

class InvalidDelimiterError(ClinError):
    """Raised when a delimiter given on the command line cannot be decoded."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ClinError):
    """Raised when an optional runtime dependency is not available."""
