"""
Command registry mapping names to command descriptors.

Registration is expected to happen while the host sets up; lookups during
evaluation are plain dictionary reads and take no lock.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from parscore.commands.builtins import register_builtins
from parscore.commands.schema import (
    CommandDescriptor,
    ParamSpec,
    ResultKind,
    normalize_schema,
)
from parscore.core.types import CommandHandler

logger = logging.getLogger(__name__)

Schema = Iterable[ParamSpec | dict[str, Any]]


class CommandRegistry:
    """Registry of commands available to expressions.

    Names are case-sensitive. Registering an existing name replaces the
    previous command, which is how built-ins are overridden.
    """

    def __init__(self, builtins: bool = True):
        self._commands: dict[str, CommandDescriptor] = {}
        if builtins:
            register_builtins(self)

    def register(
        self,
        name: str,
        handler: CommandHandler,
        schema: Schema = (),
        kind: ResultKind | str = ResultKind.CONDITION,
    ) -> CommandDescriptor:
        """
        Insert or replace a command.

        Params:
            name: Command name as written in expressions
            handler: Callable taking ``(arguments, context)``
            schema: Parameter slots as `ParamSpec` or equivalent dicts
            kind: ``condition`` (fails to False) or ``action`` (fails to None)

        Returns:
            The stored descriptor

        Raises:
            pydantic.ValidationError: If the name, handler or schema is malformed
        """
        descriptor = CommandDescriptor(
            name=name,
            handler=handler,
            params=normalize_schema(schema),
            kind=ResultKind(kind),
        )
        if name in self._commands:
            logger.debug("Replacing command %r", name)
        self._commands[name] = descriptor
        return descriptor

    def command(
        self,
        name: str,
        schema: Schema = (),
        kind: ResultKind | str = ResultKind.CONDITION,
    ) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator form of `register`; returns the handler unchanged."""

        def decorator(handler: CommandHandler) -> CommandHandler:
            self.register(name, handler, schema, kind)
            return handler

        return decorator

    def lookup(self, name: str) -> CommandDescriptor | None:
        """Return the descriptor registered under ``name``, or None."""
        return self._commands.get(name)

    def unregister(self, name: str) -> CommandDescriptor | None:
        """Remove a command, returning its descriptor if it was registered."""
        return self._commands.pop(name, None)

    def names(self) -> list[str]:
        """Registered command names in registration order."""
        return list(self._commands)

    def copy(self) -> "CommandRegistry":
        """An independent registry holding the same commands."""
        clone = CommandRegistry(builtins=False)
        clone._commands = dict(self._commands)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
