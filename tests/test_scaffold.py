"""Smoke tests: verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* The public API is exported from the package root.
"""

from __future__ import annotations

import pytest

import clin
from clin import __version__
from clin.cli import exit_codes
from clin.cli.app import main
from clin.exceptions import ClinError, EnvironmentError, InvalidDelimiterError


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicApi:
    @pytest.mark.parametrize("name", clin.__all__)
    def test_exported_names_resolve(self, name: str) -> None:
        assert hasattr(clin, name)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize("exc_class", [InvalidDelimiterError, EnvironmentError])
    def test_all_exceptions_inherit_from_base(self, exc_class: type[ClinError]) -> None:
        assert issubclass(exc_class, ClinError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(ClinError, Exception)

    def test_hint_is_stored(self) -> None:
        err = ClinError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert ClinError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == exit_codes.SUCCESS
        assert "usage: clin" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_args_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from clin.cli import app as app_module

        seen: list[list[str]] = []
        monkeypatch.setattr(
            app_module, "_handle_args", lambda ns: seen.append(ns.values) or exit_codes.SUCCESS,
        )
        assert main(["args", "a", "b"]) == exit_codes.SUCCESS
        assert seen == [["a", "b"]]

    def test_cat_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from clin.cli import app as app_module

        seen: list[list[str]] = []
        monkeypatch.setattr(
            app_module, "_handle_cat", lambda ns: seen.append(ns.values) or exit_codes.SUCCESS,
        )
        assert main(["cat", "file.txt"]) == exit_codes.SUCCESS
        assert seen == [["file.txt"]]

    def test_unknown_command_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"])
        assert exc_info.value.code == 2
