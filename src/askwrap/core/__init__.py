"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or terminal I/O.
* No imports from ``cli`` or ``infra``.
"""

from askwrap.core.formatter import format_value, redact, render_outcome
from askwrap.core.models import ExitIntent, FieldDescriptor, FieldType, Question
from askwrap.core.protocols import HostApp, PromptAdapter, RegisteredCommand
from askwrap.core.reconciler import AnswerReconciler
from askwrap.core.validator import validate

__all__: list[str] = [
    "AnswerReconciler",
    "ExitIntent",
    "FieldDescriptor",
    "FieldType",
    "HostApp",
    "PromptAdapter",
    "Question",
    "RegisteredCommand",
    "format_value",
    "redact",
    "render_outcome",
    "validate",
]
