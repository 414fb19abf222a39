"""
Argument validation against command parameter schemas.

Validation runs on already-evaluated arguments, immediately before a
command's handler is dispatched.
"""

from collections.abc import Sequence
from typing import Any

from parscore.commands.schema import ParamSpec, ParamType
from parscore.exceptions import InvalidParametersError

# Commands that take exactly one argument whatever their schema says
SINGLE_ARGUMENT_COMMANDS = frozenset({"NOT"})


def validate_params(
    args: Sequence[Any], schema: Sequence[ParamSpec], command_name: str
) -> None:
    """
    Validate evaluated arguments against a command's parameter schema.

    Rules are applied in order: the number of required fixed slots must not
    exceed the argument count; ``NOT`` takes exactly one argument; each
    required fixed slot must be filled; ``condition`` slots only accept
    booleans. A ``multiple`` slot consumes the remaining arguments and may be
    empty even when marked required. Extra arguments are accepted.

    Params:
        args: Evaluated arguments in call order
        schema: The command's parameter schema
        command_name: Command name, used for special cases and messages

    Raises:
        InvalidParametersError: When any rule fails
    """
    required_count = sum(1 for spec in schema if spec.required and not spec.multiple)
    if len(args) < required_count:
        raise InvalidParametersError(
            command_name,
            f"expected at least {required_count} parameter(s), got {len(args)}",
            list(args),
        )

    if command_name in SINGLE_ARGUMENT_COMMANDS and len(args) != 1:
        raise InvalidParametersError(
            command_name,
            f"requires exactly one parameter, got {len(args)}",
            list(args),
        )

    for index, spec in enumerate(schema):
        if spec.multiple:
            slot_args = args[index:]
        elif index < len(args):
            slot_args = [args[index]]
        elif spec.required:
            raise InvalidParametersError(
                command_name,
                f"missing required parameter at index {index}",
                list(args),
            )
        else:
            slot_args = []

        if spec.type == ParamType.CONDITION:
            for offset, value in enumerate(slot_args):
                if not isinstance(value, bool):
                    raise InvalidParametersError(
                        command_name,
                        f"parameter at index {index + offset} must be a condition "
                        f"(bool), got {type(value).__name__}: {value!r}",
                        list(args),
                    )

        if spec.multiple:
            break


def is_valid_params(
    args: Sequence[Any], schema: Sequence[ParamSpec], command_name: str
) -> bool:
    """Boolean form of `validate_params`."""
    try:
        validate_params(args, schema, command_name)
    except InvalidParametersError:
        return False
    return True
