"""
Exception classes for ParsCore rule expressions.

This module defines specific exception types for the error conditions that
can occur while building a syntax tree from an expression and while
evaluating it against the command registry.
"""

from enum import Enum
from typing import Any


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Command name and reason only
    DEVELOPER = "developer"  # Adds evaluated arguments and raw expression


class ErrorKind(Enum):
    """Category of a failure recorded during parsing or evaluation."""

    UNKNOWN_COMMAND = "unknown_command"
    INVALID_PARAMETERS = "invalid_parameters"
    HANDLER_ERROR = "handler_error"
    MALFORMED_EXPRESSION = "malformed_expression"
    DEPTH_EXCEEDED = "depth_exceeded"


class ParsCoreError(Exception):
    """Base exception for all ParsCore errors."""

    kind: ErrorKind | None = None


class ExpressionSyntaxError(ParsCoreError):
    """Base exception for failures while turning text into a syntax tree."""

    def __init__(self, expression: str, reason: str):
        """
        Initialize the exception.

        Params:
            expression: The expression text that could not be built
            reason: Why the expression was rejected
        """
        self.expression = expression
        self.reason = reason
        super().__init__(f"Cannot parse expression '{expression}': {reason}")


class MalformedExpressionError(ExpressionSyntaxError):
    """Raised for unbalanced brackets or an empty command name."""

    kind = ErrorKind.MALFORMED_EXPRESSION


class DepthExceededError(ExpressionSyntaxError):
    """Raised when an expression nests deeper than the configured limit."""

    kind = ErrorKind.DEPTH_EXCEEDED

    def __init__(self, expression: str, max_depth: int):
        """
        Initialize the exception.

        Params:
            expression: The sub-expression at which the limit was hit
            max_depth: The configured maximum nesting depth
        """
        self.max_depth = max_depth
        super().__init__(expression, f"nesting exceeds maximum depth of {max_depth}")


class CommandEvaluationError(ParsCoreError):
    """Base exception for failures while dispatching a command."""

    def __init__(
        self, command: str, message: str, arguments: list[Any] | None = None
    ):
        """
        Initialize the exception.

        Params:
            command: Name of the command being evaluated
            message: Specific error message
            arguments: Evaluated arguments at the time of failure
        """
        self.command = command
        self.arguments = list(arguments or [])
        super().__init__(message)


class UnknownCommandError(CommandEvaluationError):
    """Raised when an expression references a name missing from the registry."""

    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self, command: str, arguments: list[Any] | None = None):
        super().__init__(command, f"Command '{command}' is not defined", arguments)


class InvalidParametersError(CommandEvaluationError):
    """Raised when evaluated arguments do not satisfy a command's schema."""

    kind = ErrorKind.INVALID_PARAMETERS

    def __init__(
        self, command: str, reason: str, arguments: list[Any] | None = None
    ):
        """
        Initialize the exception.

        Params:
            command: Name of the command whose schema was violated
            reason: Which validation rule failed
            arguments: Evaluated arguments that were rejected
        """
        self.reason = reason
        super().__init__(
            command, f"Invalid parameters for '{command}': {reason}", arguments
        )


class CommandHandlerError(CommandEvaluationError):
    """Raised when a command handler itself fails."""

    kind = ErrorKind.HANDLER_ERROR

    def __init__(
        self,
        command: str,
        original: Exception,
        arguments: list[Any] | None = None,
    ):
        """
        Initialize the exception.

        Params:
            command: Name of the command whose handler failed
            original: The exception raised by the handler
            arguments: Arguments the handler was invoked with
        """
        self.original = original
        super().__init__(
            command,
            f"Error executing command '{command}': "
            f"{type(original).__name__}: {original}",
            arguments,
        )
