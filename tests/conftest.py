"""Shared pytest fixtures and configuration for the clin test suite.

Guidelines
----------
* No test reads the real standard input; ``sys.stdin`` is replaced via
  ``monkeypatch`` whenever the default fallback stream is exercised.
* Files are created under ``tmp_path`` only.
* Core tests use in-memory streams.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable

import pytest

from clin.core.models import Input


@pytest.fixture
def make_input() -> Callable[..., Input]:
    """Build an :class:`Input` whose fallback stream holds *data*."""

    def _make(data: bytes = b"", **overrides: object) -> Input:
        return Input(stream=io.BytesIO(data), **overrides)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def fake_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[bytes], io.TextIOWrapper]:
    """Replace ``sys.stdin`` with a text wrapper over the given bytes."""

    def _install(data: bytes) -> io.TextIOWrapper:
        stdin = io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", stdin)
        return stdin

    return _install
