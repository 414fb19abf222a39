"""
ParsCore exception classes.

This package provides all exception types used throughout ParsCore for
consistent error handling and reporting.
"""

from parscore.exceptions.core import (
    CommandEvaluationError,
    CommandHandlerError,
    DepthExceededError,
    ErrorKind,
    ErrorLevel,
    ExpressionSyntaxError,
    InvalidParametersError,
    MalformedExpressionError,
    ParsCoreError,
    UnknownCommandError,
)

__all__ = [
    "ParsCoreError",
    "ErrorKind",
    "ErrorLevel",
    "ExpressionSyntaxError",
    "MalformedExpressionError",
    "DepthExceededError",
    "CommandEvaluationError",
    "UnknownCommandError",
    "InvalidParametersError",
    "CommandHandlerError",
]
