"""Tests for subcommand validation (core/validator.py)."""

from __future__ import annotations

from dataclasses import dataclass, field
from unittest.mock import MagicMock

import pytest

from askwrap.core.validator import invoked_name, validate


@dataclass
class _Command:
    name: str


@dataclass
class _App:
    commands: list[_Command] = field(
        default_factory=lambda: [_Command("1"), _Command("2")],
    )
    raw_args: list[str] = field(default_factory=lambda: ["python", "prog", ""])
    help: MagicMock = field(default_factory=MagicMock)


@pytest.fixture()
def app() -> _App:
    return _App()


class TestValidate:
    def test_does_nothing_if_valid_command(self, app: _App) -> None:
        app.raw_args[2] = "1"
        assert validate(app) is True
        app.help.assert_not_called()

    def test_helps_if_invalid_command(self, app: _App) -> None:
        app.raw_args[2] = "3"
        assert validate(app) is False
        app.help.assert_called_once_with()

    def test_exact_match_only(self, app: _App) -> None:
        app.commands = [_Command("deploy")]
        app.raw_args[2] = "Deploy"
        assert validate(app) is False
        app.help.assert_called_once()

    def test_missing_subcommand_helps(self, app: _App) -> None:
        app.raw_args = ["python", "prog"]
        assert validate(app) is False
        app.help.assert_called_once()

    def test_no_registered_commands(self, app: _App) -> None:
        app.commands = []
        app.raw_args[2] = "1"
        assert validate(app) is False
        app.help.assert_called_once()


class TestInvokedName:
    def test_reads_index_two(self, app: _App) -> None:
        app.raw_args = ["python", "prog", "doctor", "extra"]
        assert invoked_name(app) == "doctor"

    def test_short_args(self, app: _App) -> None:
        app.raw_args = []
        assert invoked_name(app) is None
