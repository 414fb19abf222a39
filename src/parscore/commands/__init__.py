"""
ParsCore command registry and built-in commands.

This package contains the command descriptors, the registry that maps names
to them, parameter validation and the built-in logical and comparison
commands.
"""

from parscore.commands.builtins import BUILTIN_COMMANDS, register_builtins, to_boolean
from parscore.commands.registry import CommandRegistry
from parscore.commands.schema import (
    CommandDescriptor,
    ParamSpec,
    ParamType,
    ResultKind,
    fallback_for,
)
from parscore.commands.validation import is_valid_params, validate_params

__all__ = [
    "BUILTIN_COMMANDS",
    "CommandDescriptor",
    "CommandRegistry",
    "ParamSpec",
    "ParamType",
    "ResultKind",
    "fallback_for",
    "is_valid_params",
    "register_builtins",
    "to_boolean",
    "validate_params",
]
