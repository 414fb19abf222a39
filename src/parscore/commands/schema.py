"""
Command descriptor and parameter schema models.

Schemas may be given as `ParamSpec` instances or as plain dicts of the same
shape, e.g. ``{"type": "any", "required": True, "multiple": True}``.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from parscore.core.types import CommandHandler


class ParamType(str, Enum):
    """Accepted type of an argument slot."""

    ANY = "any"
    CONDITION = "condition"  # Must already be a bool


class ResultKind(str, Enum):
    """What a command produces, which decides its failure fallback."""

    CONDITION = "condition"
    ACTION = "action"


class ParamSpec(BaseModel):
    """One slot of a command's parameter schema.

    A ``multiple`` slot consumes the variable-length tail of the argument list.
    """

    model_config = ConfigDict(frozen=True)

    type: ParamType = ParamType.ANY
    required: bool = True
    multiple: bool = False


class CommandDescriptor(BaseModel):
    """A registered command: its handler, parameter schema and result kind."""

    model_config = ConfigDict(frozen=True)

    name: str
    handler: CommandHandler
    params: tuple[ParamSpec, ...] = ()
    kind: ResultKind = ResultKind.CONDITION

    @field_validator("name")
    @classmethod
    def name_must_be_plain(cls, value: str) -> str:
        # Expressions strip names and split on these characters, so such a
        # command could never be called
        if not value or value != value.strip():
            raise ValueError(
                "command name must be non-empty without surrounding whitespace"
            )
        if any(char in value for char in "[],"):
            raise ValueError("command name must not contain '[', ']' or ','")
        return value

    @property
    def fallback(self) -> Any:
        """Value returned in place of a result when evaluation fails."""
        return fallback_for(self.kind)


def fallback_for(kind: ResultKind) -> Any:
    """False for condition commands, None for action commands."""
    return False if kind == ResultKind.CONDITION else None


def normalize_schema(
    schema: Iterable[ParamSpec | dict[str, Any]],
) -> tuple[ParamSpec, ...]:
    """Validate a schema given as specs or dicts into a tuple of `ParamSpec`."""
    return tuple(
        entry if isinstance(entry, ParamSpec) else ParamSpec.model_validate(entry)
        for entry in schema
    )
