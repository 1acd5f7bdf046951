"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and hosting
programs must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations — preserving the dependency
inversion principle.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from askwrap.core.models import Question


class PromptAdapter(Protocol):
    """Contract for interactive-question backends.

    Any object that implements :meth:`prompt` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def prompt(self, questions: Sequence[Question]) -> Mapping[str, Any]:
        """Ask every question in *questions* and return the answers.

        The returned mapping is keyed by :attr:`Question.name`.  A
        question without a default must receive a non-empty answer.

        Raises
        ------
        PromptAbortedError
            When the user cancels without answering.
        EnvironmentError
            When the underlying prompt library is unavailable.
        """
        ...  # pragma: no cover


class RegisteredCommand(Protocol):
    """A subcommand known to the hosting program."""

    @property
    def name(self) -> str:
        ...  # pragma: no cover


class HostApp(Protocol):
    """Contract for the hosting program's command registry.

    ``raw_args`` follows the ``[interpreter, program, subcommand, ...]``
    layout, so the invoked subcommand name sits at index 2.
    """

    @property
    def commands(self) -> Sequence[RegisteredCommand]:
        ...  # pragma: no cover

    @property
    def raw_args(self) -> Sequence[str]:
        ...  # pragma: no cover

    def help(self) -> None:
        """Display usage information."""
        ...  # pragma: no cover
