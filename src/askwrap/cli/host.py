"""argparse-backed hosting program for wrapped commands.

:class:`ArgparseHost` satisfies :class:`~askwrap.core.protocols.HostApp`
so the subcommand validator can run against it before argparse sees the
arguments.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from askwrap.cli.invoker import Handler, execute


@dataclass(frozen=True, slots=True)
class Subcommand:
    """A registered subcommand and its wrapped handler."""

    name: str
    handler: Handler
    arg: str | None = None
    """Destination of the single positional argument, if the command takes one."""


class ArgparseHost:
    """Registers callback-style commands as argparse subcommands.

    Parameters
    ----------
    parser:
        Top-level parser; subcommands are added beneath it.
    """

    def __init__(self, parser: argparse.ArgumentParser) -> None:
        self._parser = parser
        self._subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        self._commands: list[Subcommand] = []
        self._argv: list[str] = []

    # ------------------------------------------------------------------
    # HostApp protocol
    # ------------------------------------------------------------------

    @property
    def commands(self) -> Sequence[Subcommand]:
        return tuple(self._commands)

    @property
    def raw_args(self) -> Sequence[str]:
        return [sys.executable, self._parser.prog, *self._argv]

    def help(self) -> None:
        self._parser.print_help()

    # ------------------------------------------------------------------
    # Registration and dispatch
    # ------------------------------------------------------------------

    def command(
        self,
        name: str,
        fn: Callable[..., Any],
        *,
        help: str | None = None,
        header: str | None = None,
        arg: str | None = None,
        arg_help: str | None = None,
    ) -> argparse.ArgumentParser:
        """Register *fn* as subcommand *name* and return its parser.

        When *arg* is given the subcommand takes one positional argument
        which is passed to *fn* before its completion callback.
        """
        sub = self._subparsers.add_parser(name, help=help, description=help)
        if arg is not None:
            sub.add_argument(arg, help=arg_help)
        self._commands.append(Subcommand(name=name, handler=execute(fn, header), arg=arg))
        return sub

    def bind(self, argv: Sequence[str]) -> None:
        """Record the invocation arguments (without the program name)."""
        self._argv = list(argv)

    def parse(self) -> argparse.Namespace:
        return self._parser.parse_args(self._argv)

    def dispatch(self, args: argparse.Namespace) -> None:
        """Run the handler for the parsed subcommand."""
        subcommand = next(c for c in self._commands if c.name == args.command)
        if subcommand.arg is None:
            subcommand.handler()
        else:
            subcommand.handler(getattr(args, subcommand.arg))
