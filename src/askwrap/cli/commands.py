"""Built-in ``askwrap`` subcommands.

Each command follows the callback contract expected by
:func:`~askwrap.cli.invoker.execute`: an optional domain argument, then
a ``done(error, value)`` callback that reports the outcome.
"""

from __future__ import annotations

import json
import platform
from collections.abc import Callable, Mapping
from importlib import metadata
from pathlib import Path
from typing import Any

import structlog

from askwrap.core.models import FieldDescriptor
from askwrap.core.reconciler import AnswerReconciler
from askwrap.exceptions import SpecFileError
from askwrap.infra.questionary_adapter import QuestionaryPromptAdapter
from askwrap.version import __version__

logger = structlog.get_logger(__name__)

Done = Callable[..., Any]

RUNTIME_DEPENDENCIES: tuple[str, ...] = ("questionary", "rich", "structlog")

REQUIRE_MODE = "require"
UPDATE_MODE = "update"
MODES: tuple[str, ...] = (REQUIRE_MODE, UPDATE_MODE)


# ---------------------------------------------------------------------------
# doctor
# ---------------------------------------------------------------------------

def _dependency_row(dist: str) -> dict[str, str]:
    try:
        return {"version": metadata.version(dist), "status": "OK"}
    except metadata.PackageNotFoundError:
        return {"version": "NOT INSTALLED", "status": "FAIL"}


def _python_row() -> dict[str, str]:
    major, minor = platform.python_version_tuple()[:2]
    ok = (int(major), int(minor)) >= (3, 10)
    return {
        "version": platform.python_version(),
        "status": "OK" if ok else "FAIL (>=3.10 required)",
    }


def environment_report() -> dict[str, dict[str, str]]:
    """Collect version and status rows for askwrap's runtime."""
    report = {
        "askwrap": {"version": __version__, "status": "OK"},
        "python": _python_row(),
    }
    for dist in RUNTIME_DEPENDENCIES:
        report[dist] = _dependency_row(dist)
    return report


def doctor(done: Done) -> None:
    """Report the versions of Python and askwrap's runtime dependencies."""
    done(None, environment_report())


# ---------------------------------------------------------------------------
# ask
# ---------------------------------------------------------------------------

def make_reconciler() -> AnswerReconciler:
    return AnswerReconciler(QuestionaryPromptAdapter())


def load_fields_file(path: Path) -> tuple[list[FieldDescriptor], dict[str, Any], str]:
    """Parse a fields file into descriptors, known answers and a mode.

    The file holds either a JSON list of field objects, or an object
    with ``fields``, optional ``answers`` and optional ``mode``
    (``"require"`` or ``"update"``).

    Raises
    ------
    SpecFileError
        If the file cannot be read, is not in one of those shapes, or
        names an unknown mode.
    FieldDefinitionError
        If a field object is malformed.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SpecFileError(f"Cannot read fields file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise SpecFileError(
            f"Fields file is not valid JSON: {path}",
            hint=f"line {exc.lineno}, column {exc.colno}: {exc.msg}",
        ) from exc

    if isinstance(data, list):
        data = {"fields": data}
    if not isinstance(data, Mapping) or not isinstance(data.get("fields"), list):
        raise SpecFileError(
            f"Fields file must contain a list of fields: {path}",
            hint='Use [{"name": ..., "message": ...}] or {"fields": [...]}.',
        )

    answers = data.get("answers") or {}
    if not isinstance(answers, Mapping):
        raise SpecFileError(f"'answers' must be an object: {path}")

    mode = data.get("mode", REQUIRE_MODE)
    if mode not in MODES:
        raise SpecFileError(
            f"Unknown mode {mode!r} in fields file: {path}",
            hint='Use "require" or "update".',
        )

    fields = [FieldDescriptor.from_mapping(item) for item in data["fields"]]
    return fields, dict(answers), mode


def ask(fields_file: str, done: Done) -> None:
    """Prompt for the fields described in *fields_file* and print the answers."""
    fields, answers, mode = load_fields_file(Path(fields_file))
    logger.debug("loaded fields file", path=fields_file, fields=len(fields), mode=mode)

    reconciler = make_reconciler()
    if mode == UPDATE_MODE:
        reconciler.update_answers(fields, answers, lambda merged: done(None, merged))
    else:
        reconciler.require_answers(fields, answers, lambda merged: done(None, merged))
