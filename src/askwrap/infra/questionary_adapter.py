"""Prompt adapter backed by questionary.

Translates :class:`~askwrap.core.models.Question` objects into
questionary's dict-based question format and runs them as one batch.
questionary is imported lazily so that ``--help`` and ``--version``
keep working when it is not installed.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from askwrap.core.models import FieldType, Question
from askwrap.exceptions import EnvironmentError, PromptAbortedError

_QUESTIONARY_TYPES: dict[FieldType, str] = {
    FieldType.NORMAL: "text",
    FieldType.PASSWORD: "password",
    FieldType.LIST: "select",
    FieldType.CONFIRM: "confirm",
}


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompting."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _require_value(value: str) -> bool | str:
    return bool(value.strip()) or "A value is required."


def to_questionary(question: Question) -> dict[str, Any]:
    """Build the questionary dict for a single question."""
    spec: dict[str, Any] = {
        "type": _QUESTIONARY_TYPES[question.type],
        "name": question.name,
        "message": question.message,
    }

    if question.type is FieldType.CONFIRM:
        spec["default"] = bool(question.default) if question.has_default else True
        return spec

    if question.type is FieldType.LIST:
        spec["choices"] = list(question.choices)
        if question.has_default and question.default in question.choices:
            spec["default"] = question.default
        return spec

    if question.has_default:
        spec["default"] = str(question.default)
    else:
        spec["validate"] = _require_value
    return spec


class QuestionaryPromptAdapter:
    """Concrete :class:`~askwrap.core.protocols.PromptAdapter` over questionary."""

    def prompt(self, questions: Sequence[Question]) -> Mapping[str, Any]:
        """Ask *questions* in order and return answers keyed by name.

        Raises
        ------
        KeyboardInterrupt
            If the user presses Ctrl+C.
        PromptAbortedError
            If questionary returns without every answer.
        EnvironmentError
            If questionary is not installed.
        """
        if not questions:
            return {}

        questionary = _import_questionary()
        answers: dict[str, Any] = questionary.unsafe_prompt(
            [to_questionary(q) for q in questions],
        )

        missing = [q.name for q in questions if q.name not in answers]
        if missing:
            raise PromptAbortedError(
                f"No answer given for: {', '.join(missing)}",
                hint="Answer every question, or press Ctrl+C to quit.",
            )
        return answers
