"""Answer reconciliation — decides what to ask and merges the answers.

This is the central service consumed by commands that need input from
the user.  It depends on a :class:`~askwrap.core.protocols.PromptAdapter`
injected at construction time (dependency inversion), keeping the core
free of any prompt-library imports.

Guarantees
----------
* Each reconciliation pass calls the adapter at most once, with every
  question batched together.
* No field is asked twice within one pass; repeated names keep the
  first descriptor.
* Answer values are never logged; only field names.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping, Sequence
from typing import Any, TypeVar

import structlog

from askwrap.core.models import FieldDescriptor, FieldType, Question
from askwrap.core.protocols import PromptAdapter

logger = structlog.get_logger(__name__)

T = TypeVar("T")

Answers = MutableMapping[str, Any]

_SINGLE_ANSWER = "answer"


def _complete(result: T, on_complete: Callable[[T], object] | None) -> T:
    if on_complete is not None:
        on_complete(result)
    return result


def _initial_default(field: FieldDescriptor) -> Any:
    if field.default is not None:
        return field.default
    if field.type is FieldType.LIST:
        return field.choices[0]
    return None


def _unique(fields: Sequence[FieldDescriptor]) -> list[FieldDescriptor]:
    """Drop repeated field names, keeping the first occurrence."""
    seen: set[str] = set()
    unique = []
    for field in fields:
        if field.name not in seen:
            seen.add(field.name)
            unique.append(field)
    return unique


def _question(field: FieldDescriptor, default: Any) -> Question:
    return Question(
        name=field.name,
        message=field.message,
        type=field.type,
        default=default,
        choices=field.choices,
    )


class AnswerReconciler:
    """Collects answers for field descriptors through a prompt adapter.

    Every public method returns its result and, when *on_complete* is
    given, also passes that result to it.

    Parameters
    ----------
    adapter:
        Any object satisfying the :class:`PromptAdapter` protocol.
    """

    def __init__(self, adapter: PromptAdapter) -> None:
        self._adapter: PromptAdapter = adapter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def require_answers(
        self,
        fields: Sequence[FieldDescriptor],
        known_answers: Answers,
        on_complete: Callable[[Answers], object] | None = None,
    ) -> Answers:
        """Prompt only for fields that have no known value yet.

        Unanswered fields default to their own ``default``, else to the
        first choice of a list field, else to nothing.  Answers are
        merged into *known_answers* in place.
        """
        questions = [
            _question(field, _initial_default(field))
            for field in _unique(fields)
            if known_answers.get(field.name) is None
        ]
        return _complete(self._ask(questions, known_answers), on_complete)

    def update_answers(
        self,
        fields: Sequence[FieldDescriptor],
        known_answers: Answers,
        on_complete: Callable[[Answers], object] | None = None,
    ) -> Answers:
        """Re-prompt every field, defaulting to the currently known value.

        Password fields are always asked without a default so a stored
        secret is never shown or silently reused.
        """
        questions = []
        for field in _unique(fields):
            if field.is_password:
                default = None
            else:
                default = known_answers.get(field.name)
                if default is None:
                    default = field.default
            questions.append(_question(field, default))
        return _complete(self._ask(questions, known_answers), on_complete)

    def confirm(
        self,
        message: str,
        default: bool = True,
        on_complete: Callable[[bool], object] | None = None,
    ) -> bool:
        """Ask a yes/no question."""
        question = Question(
            name=_SINGLE_ANSWER,
            message=message,
            type=FieldType.CONFIRM,
            default=default,
        )
        answers = self._adapter.prompt([question])
        return _complete(bool(answers[_SINGLE_ANSWER]), on_complete)

    def choose_one(
        self,
        message: str,
        choices: Sequence[str],
        on_complete: Callable[[str], object] | None = None,
    ) -> str:
        """Ask the user to pick one of *choices*; the first is the default."""
        field = FieldDescriptor(
            name=_SINGLE_ANSWER,
            message=message,
            type=FieldType.LIST,
            choices=tuple(choices),
        )
        question = _question(field, default=field.choices[0])
        answers = self._adapter.prompt([question])
        return _complete(answers[_SINGLE_ANSWER], on_complete)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ask(self, questions: Sequence[Question], known_answers: Answers) -> Answers:
        if not questions:
            return known_answers

        logger.debug(
            "prompting for answers",
            fields=[q.name for q in questions],
        )
        answers = self._adapter.prompt(questions)
        known_answers.update(answers)
        return known_answers
