"""Tests for best-effort file opening (infra/file_opener.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from clin.infra.file_opener import LocalFileOpener


class TestLocalFileOpener:
    def test_opens_existing_file_in_binary_mode(self, tmp_path: Path) -> None:
        path = tmp_path / "input.txt"
        path.write_bytes(b"line one\r\nline two\n")

        handle = LocalFileOpener().open(str(path))
        assert handle is not None
        with handle:
            assert handle.read() == b"line one\r\nline two\n"

    def test_missing_file_returns_none(self, tmp_path: Path) -> None:
        assert LocalFileOpener().open(str(tmp_path / "absent.txt")) is None

    def test_directory_returns_none(self, tmp_path: Path) -> None:
        assert LocalFileOpener().open(str(tmp_path)) is None

    def test_empty_path_returns_none(self) -> None:
        assert LocalFileOpener().open("") is None

    def test_embedded_nul_returns_none(self) -> None:
        assert LocalFileOpener().open("bad\0name") is None

    def test_failure_logged_at_debug(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture,
    ) -> None:
        missing = str(tmp_path / "absent.txt")
        with caplog.at_level("DEBUG", logger="clin.infra.file_opener"):
            LocalFileOpener().open(missing)
        assert "absent.txt" in caplog.text
