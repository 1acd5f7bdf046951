"""Command invocation — wraps callback-style commands into CLI handlers.

A command is a callable whose last positional parameter is a completion
callback ``done(error=None, value=None)``.  It may take one domain
argument before it::

    def show(name, done): ...
    def status(done): ...

:func:`execute` returns a handler that checks the caller's argument
count against the command, runs it, and hands the outcome to
:func:`~askwrap.cli.output.print_and_exit`.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, NoReturn

import structlog

from askwrap.cli.output import print_and_exit
from askwrap.exceptions import (
    AskwrapError,
    IncorrectArgumentsError,
    MissingCommandError,
)

logger = structlog.get_logger(__name__)

Handler = Callable[..., None]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def declared_arity(command: Callable[..., Any]) -> int | None:
    """Count the leading required positional parameters of *command*.

    Returns ``None`` when the signature cannot be inspected.
    """
    try:
        parameters = inspect.signature(command).parameters.values()
    except (TypeError, ValueError):
        return None

    count = 0
    for param in parameters:
        if param.kind not in _POSITIONAL or param.default is not param.empty:
            break
        count += 1
    return count


def execute(command: Callable[..., Any] | None, header: str | None = None) -> Handler:
    """Wrap *command* into a handler taking zero or one explicit argument.

    The handler exits the process: ``1`` with "missing command method"
    if *command* is not callable, ``1`` with "incorrect arguments" if
    the explicit argument count differs from what *command* declares
    before its callback, otherwise with the outcome the command reports
    through its callback.
    """

    def handler(*args: Any) -> None:
        if not callable(command):
            logger.debug("command is not callable", header=header)
            print_and_exit(MissingCommandError())

        arity = declared_arity(command)
        if len(args) > 1 or arity is None or arity - 1 != len(args):
            logger.debug(
                "argument count mismatch",
                command=getattr(command, "__name__", repr(command)),
                declared=arity,
                received=len(args),
            )
            print_and_exit(IncorrectArgumentsError())

        def done(error: BaseException | None = None, value: Any = None) -> NoReturn:
            print_and_exit(error, value, header)

        try:
            command(*args, done)
        except AskwrapError as exc:
            print_and_exit(exc)

    return handler
