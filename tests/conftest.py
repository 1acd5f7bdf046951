"""Shared pytest fixtures and configuration for the askwrap test suite.

Guidelines
----------
* No real terminal prompts — the prompt engine is always stubbed.
* Process exits are asserted through ``SystemExit``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Generator, Mapping, Sequence
from typing import Any

import pytest

from askwrap.config.logging import configure_logging
from askwrap.core.models import FieldDescriptor, FieldType, Question
from askwrap.core.reconciler import AnswerReconciler

SENTINEL = "XXX"


class EchoDefaultsAdapter:
    """Answers every question with its default, the first choice, or ``SENTINEL``.

    Each call's questions are recorded in :attr:`calls`.
    """

    def __init__(self) -> None:
        self.calls: list[list[Question]] = []

    def prompt(self, questions: Sequence[Question]) -> Mapping[str, Any]:
        self.calls.append(list(questions))
        answers: dict[str, Any] = {}
        for question in questions:
            if question.has_default:
                answers[question.name] = question.default
            elif question.type is FieldType.LIST:
                answers[question.name] = question.choices[0]
            else:
                answers[question.name] = SENTINEL
        return answers


@pytest.fixture(autouse=True)
def _quiet_logging() -> Generator[None]:
    """Route structlog to stderr at WARNING so stdout holds only results."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    configure_logging(verbose=False, log_json=False)
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture()
def adapter() -> EchoDefaultsAdapter:
    return EchoDefaultsAdapter()


@pytest.fixture()
def reconciler(adapter: EchoDefaultsAdapter) -> AnswerReconciler:
    return AnswerReconciler(adapter)


@pytest.fixture()
def fields() -> list[FieldDescriptor]:
    return [
        FieldDescriptor(
            name="baseuri",
            message="Base URI?",
            default="https://api.enterprise.apigee.com",
        ),
        FieldDescriptor(name="organization", message="Organization?"),
        FieldDescriptor(name="password", message="Password?", type=FieldType.PASSWORD),
    ]
