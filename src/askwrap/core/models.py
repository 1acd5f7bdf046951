"""Domain models for askwrap.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and construction-time validation.  They
carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from askwrap.exceptions import FieldDefinitionError


class FieldType(str, enum.Enum):
    """How a question is presented to the user."""

    NORMAL = "normal"
    PASSWORD = "password"
    LIST = "list"
    CONFIRM = "confirm"


# ---------------------------------------------------------------------------
# Field descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """One answer to collect from the user."""

    name: str
    """Unique key the answer is stored under."""

    message: str
    """Prompt text shown to the user."""

    type: FieldType = FieldType.NORMAL

    default: Any = None
    """Suggested answer, or ``None`` when the field has no default."""

    choices: tuple[str, ...] = ()
    """Ordered options; required when :attr:`type` is ``LIST``."""

    def __post_init__(self) -> None:
        if not self.name:
            raise FieldDefinitionError("Field descriptor requires a name.")
        if self.type is FieldType.LIST and not self.choices:
            raise FieldDefinitionError(
                f"List field {self.name!r} requires at least one choice.",
            )

    @property
    def is_password(self) -> bool:
        return self.type is FieldType.PASSWORD

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FieldDescriptor:
        """Build a descriptor from a plain mapping such as a parsed JSON object.

        Raises
        ------
        FieldDefinitionError
            If ``name`` is missing, ``type`` is unknown, or a list field
            has no choices.
        """
        try:
            name = str(data["name"])
        except KeyError as exc:
            raise FieldDefinitionError("Field descriptor requires a name.") from exc

        raw_type = data.get("type", FieldType.NORMAL.value)
        try:
            field_type = FieldType(raw_type)
        except ValueError as exc:
            raise FieldDefinitionError(
                f"Unknown field type {raw_type!r} for field {name!r}.",
                hint="Use one of: normal, password, list.",
            ) from exc

        return cls(
            name=name,
            message=str(data.get("message", name)),
            type=field_type,
            default=data.get("default"),
            choices=tuple(str(c) for c in data.get("choices") or ()),
        )


# ---------------------------------------------------------------------------
# Adapter-facing question
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Question:
    """A field projected for the prompt engine, with its effective default.

    Built fresh for every prompting pass.
    """

    name: str
    message: str
    type: FieldType = FieldType.NORMAL
    default: Any = None
    choices: tuple[str, ...] = ()

    @property
    def has_default(self) -> bool:
        return self.default is not None


# ---------------------------------------------------------------------------
# Process outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExitIntent:
    """What the process should print and which code it should exit with.

    Produced by the pure formatter; the CLI layer turns it into real
    writes and a real ``sys.exit``.
    """

    code: int
    stdout: str = ""
