"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* Unknown subcommands fall back to help output.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from askwrap import __version__
from askwrap.cli import exit_codes
from askwrap.cli.app import build_host, cli, main
from askwrap.exceptions import (
    AskwrapError,
    EnvironmentError,
    FieldDefinitionError,
    IncorrectArgumentsError,
    InvocationError,
    MissingCommandError,
    PromptAbortedError,
    SpecFileError,
)


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
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            FieldDefinitionError,
            PromptAbortedError,
            InvocationError,
            SpecFileError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[AskwrapError]
    ) -> None:
        assert issubclass(exc_class, AskwrapError)

    def test_invocation_errors(self) -> None:
        assert issubclass(MissingCommandError, InvocationError)
        assert issubclass(IncorrectArgumentsError, InvocationError)

    def test_invocation_messages(self) -> None:
        assert str(MissingCommandError()) == "missing command method"
        assert str(IncorrectArgumentsError()) == "incorrect arguments"

    def test_hint_is_stored(self) -> None:
        err = AskwrapError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = AskwrapError("boom")
        assert err.hint is None


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
    def test_no_args_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage:" in capsys.readouterr().out

    def test_unknown_command_prints_help(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["bogus"])
        assert code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "usage:" in out
        assert "doctor" in out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_missing_argument_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["ask"])
        assert exc_info.value.code == 2

    def test_registered_commands(self) -> None:
        assert [c.name for c in build_host().commands] == ["doctor", "ask"]

    def test_raw_args_layout(self) -> None:
        host = build_host()
        host.bind(["doctor"])
        assert list(host.raw_args)[1:] == ["askwrap", "doctor"]


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_known_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "askwrap.cli.app.main",
            side_effect=AskwrapError("boom", hint="try this"),
        ):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error: boom" in err
        assert "Hint: try this" in err

    def test_keyboard_interrupt(self) -> None:
        with patch("askwrap.cli.app.main", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("askwrap.cli.app.main", side_effect=RuntimeError("bug")):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: bug" in capsys.readouterr().err

    def test_main_return_code_is_exit_code(self) -> None:
        with patch("askwrap.cli.app.main", return_value=exit_codes.SUCCESS):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.SUCCESS
