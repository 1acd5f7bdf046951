"""Terminal output and process exit for command outcomes.

:func:`print_and_exit` is the single place a command outcome becomes
process output and an exit code.  Results and error lines alike go to
stdout verbatim; stderr is left to logging and the error boundary.
"""

from __future__ import annotations

import sys
from typing import Any, NoReturn

from askwrap.core.formatter import render_outcome
from askwrap.core.models import ExitIntent


def emit(intent: ExitIntent) -> int:
    """Write *intent*'s text and return its exit code without exiting."""
    if intent.stdout:
        sys.stdout.write(intent.stdout)
        sys.stdout.flush()
    return intent.code


def print_and_exit(
    error: BaseException | None,
    value: Any = None,
    header: str | None = None,
) -> NoReturn:
    """Print a command outcome and terminate the process.

    Exits ``1`` with the error message when *error* is set, else prints
    *value* (preceded by *header*, if any) and exits ``0``.
    """
    sys.exit(emit(render_outcome(error, value, header)))
