"""Result formatting — turns a command outcome into terminal text.

Pure transforms only: the functions here build strings and an
:class:`~askwrap.core.models.ExitIntent`; writing and exiting is the
CLI layer's job.

Rendering rules
---------------
* A string is written as-is plus one newline.
* A mapping is written one ``key: value`` line per key, in order.  A
  nested mapping renders as ``key:`` followed by ``  nested: value``
  lines.  Only one level of nesting is expanded.  The block ends with
  one blank line.
* A key literally named ``password`` has its value shown as
  ``'******'``, at the top level and one level down.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from askwrap.core.models import ExitIntent
from askwrap.exceptions import AskwrapError

SUCCESS_CODE: int = 0
ERROR_CODE: int = 1

PASSWORD_KEY = "password"
MASK = "'******'"


def redact(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *mapping* with ``password`` values masked."""
    redacted: dict[str, Any] = {}
    for key, value in mapping.items():
        if key == PASSWORD_KEY:
            redacted[key] = MASK
        elif isinstance(value, Mapping):
            redacted[key] = {
                k: MASK if k == PASSWORD_KEY else v for k, v in value.items()
            }
        else:
            redacted[key] = value
    return redacted


def _format_mapping(mapping: Mapping[str, Any]) -> str:
    lines: list[str] = []
    for key, value in redact(mapping).items():
        if isinstance(value, Mapping):
            lines.append(f"{key}:\n")
            lines.extend(f"  {k}: {v}\n" for k, v in value.items())
        else:
            lines.append(f"{key}: {value}\n")
    lines.append("\n")
    return "".join(lines)


def format_value(value: Any) -> str:
    """Render a successful result value as terminal text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return f"{value}\n"
    if isinstance(value, Mapping):
        return _format_mapping(value)
    return f"{value}\n"


def format_header(header: str) -> str:
    """Render *header* underlined with ``=`` of the same length."""
    return f"{header}\n{'=' * len(header)}\n"


def _one_line(text: str) -> str:
    return " ".join(text.split())


def error_message(error: BaseException) -> str:
    """Single-line message for *error*, falling back to its type name.

    An :class:`AskwrapError` hint is appended in parentheses.
    """
    message = _one_line(str(error)) or type(error).__name__
    if isinstance(error, AskwrapError) and error.hint:
        message = f"{message} (hint: {_one_line(error.hint)})"
    return message


def render_outcome(
    error: BaseException | None,
    value: Any = None,
    header: str | None = None,
) -> ExitIntent:
    """Decide the text and exit code for a command outcome.

    An error always wins: *value* and *header* are ignored and the exit
    code is ``1``.
    """
    if error is not None:
        return ExitIntent(code=ERROR_CODE, stdout=f"{error_message(error)}\n")

    text = format_value(value)
    if header:
        text = format_header(header) + text
    return ExitIntent(code=SUCCESS_CODE, stdout=text)
