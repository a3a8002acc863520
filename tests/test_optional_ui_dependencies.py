"""Regression tests for the optional rich dependency.

Plain token output, ``--help`` and ``--version`` must keep working when
rich is missing; only ``--table`` requires it, and it must fail with a
clean :class:`EnvironmentError`.
"""

from __future__ import annotations

import sys

import pytest

from clin.cli import exit_codes
from clin.cli.app import main
from clin.cli.console import console, escape_markup, get_rich_console
from clin.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_plain_args_work_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsysbinary: pytest.CaptureFixture[bytes],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["args", "a", "b"]) == exit_codes.SUCCESS
    assert capsysbinary.readouterr().out == b"a\nb\n"


def test_table_errors_cleanly_when_rich_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed") as exc_info:
        main(["args", "--table", "a"])
    assert exc_info.value.hint is not None


def test_get_rich_console_raises_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="pip install rich"):
        get_rich_console()


def test_console_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("plain message")
    captured = capsys.readouterr()
    assert "plain message" in captured.err
    assert captured.out == ""


def test_escape_markup_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape_markup("[/bold] oops") == "[/bold] oops"
