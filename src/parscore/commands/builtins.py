"""
Built-in commands: the logical operators and the basic comparisons.

Handlers receive the evaluated argument list and the caller's context.
Arguments are evaluated before dispatch, so the logical operators only
decide the result; they do not skip evaluation of later arguments.
"""

from typing import TYPE_CHECKING, Any

from parscore.commands.schema import ParamSpec, ParamType, ResultKind

if TYPE_CHECKING:
    from parscore.commands.registry import CommandRegistry


def to_boolean(value: Any) -> bool:
    """Truthiness used by the logical operators."""
    return bool(value)


def handle_and(params: list[Any], context: Any = None) -> bool:
    """True when every argument is truthy, including for no arguments."""
    return all(to_boolean(param) for param in params)


def handle_or(params: list[Any], context: Any = None) -> bool:
    """True when at least one argument is truthy."""
    return any(to_boolean(param) for param in params)


def handle_not(params: list[Any], context: Any = None) -> bool:
    """Negation of the single argument's truthiness."""
    return not to_boolean(params[0])


def handle_equals(params: list[Any], context: Any = None) -> bool:
    """Strict equality: same type and same value, so ``1`` never equals ``"1"``."""
    left, right = params[0], params[1]
    return type(left) is type(right) and left == right


def handle_greater_than(params: list[Any], context: Any = None) -> bool:
    # Unorderable pairs such as str/int raise TypeError, reported as a handler error
    return params[0] > params[1]


def handle_less_than(params: list[Any], context: Any = None) -> bool:
    return params[0] < params[1]


VARIADIC = (ParamSpec(type=ParamType.ANY, required=True, multiple=True),)
UNARY = (ParamSpec(type=ParamType.ANY, required=True),)
BINARY = (
    ParamSpec(type=ParamType.ANY, required=True),
    ParamSpec(type=ParamType.ANY, required=True),
)

BUILTIN_COMMANDS = {
    "AND": (handle_and, VARIADIC),
    "OR": (handle_or, VARIADIC),
    "NOT": (handle_not, UNARY),
    "equals": (handle_equals, BINARY),
    "greater_than": (handle_greater_than, BINARY),
    "less_than": (handle_less_than, BINARY),
}


def register_builtins(registry: "CommandRegistry") -> None:
    """Install (or reinstall) every built-in command on a registry."""
    for name, (handler, schema) in BUILTIN_COMMANDS.items():
        registry.register(name, handler, schema, kind=ResultKind.CONDITION)
