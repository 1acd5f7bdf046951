"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

from askwrap.core.formatter import ERROR_CODE, SUCCESS_CODE

SUCCESS: int = SUCCESS_CODE
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = ERROR_CODE
"""A command or invocation error was reported. Its message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
