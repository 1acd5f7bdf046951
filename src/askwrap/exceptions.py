"""Custom exception hierarchy for askwrap.

All exceptions that cross layer boundaries must inherit from
:class:`AskwrapError`.  Third-party exceptions (e.g. a missing
questionary install) must be caught at the infrastructure layer and
re-raised as a typed subclass defined here.

Hierarchy
---------
AskwrapError
├── FieldDefinitionError
├── PromptAbortedError
├── InvocationError
│   ├── MissingCommandError
│   └── IncorrectArgumentsError
├── SpecFileError
└── EnvironmentError
"""

from __future__ import annotations


class AskwrapError(Exception):
    """Base exception for all askwrap errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Field descriptors -----------------------------------------------------

class FieldDefinitionError(AskwrapError):
    """Raised when a field descriptor is malformed (e.g. a list without choices)."""


# --- Prompting -------------------------------------------------------------

class PromptAbortedError(AskwrapError):
    """Raised when the prompt engine returns without an answer set."""


# --- Command invocation ----------------------------------------------------

class InvocationError(AskwrapError):
    """Raised before a command runs, when it cannot be invoked as requested."""


class MissingCommandError(InvocationError):
    """Raised when the wrapped command is not callable."""

    def __init__(self, message: str = "missing command method", *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)


class IncorrectArgumentsError(InvocationError):
    """Raised when the caller's argument count does not match the command."""

    def __init__(self, message: str = "incorrect arguments", *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)


# --- Input files -----------------------------------------------------------

class SpecFileError(AskwrapError):
    """Raised when a field file cannot be read or parsed."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(AskwrapError):
    """Raised when a required runtime dependency is not available."""
