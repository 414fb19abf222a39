"""
Tests for the exception hierarchy and error formatting.

This module tests exception kinds and messages, and how recorded
evaluation errors format at user and developer detail levels.
"""

from parscore.exceptions import (
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
from parscore.execution.result import EvaluationError, EvaluationResult


class TestHierarchy:
    """Tests for exception class relationships."""

    def test_syntax_errors(self):
        assert issubclass(MalformedExpressionError, ExpressionSyntaxError)
        assert issubclass(DepthExceededError, ExpressionSyntaxError)
        assert issubclass(ExpressionSyntaxError, ParsCoreError)

    def test_evaluation_errors(self):
        for cls in (UnknownCommandError, InvalidParametersError, CommandHandlerError):
            assert issubclass(cls, CommandEvaluationError)
            assert issubclass(cls, ParsCoreError)

    def test_kinds(self):
        assert MalformedExpressionError.kind == ErrorKind.MALFORMED_EXPRESSION
        assert DepthExceededError.kind == ErrorKind.DEPTH_EXCEEDED
        assert UnknownCommandError.kind == ErrorKind.UNKNOWN_COMMAND
        assert InvalidParametersError.kind == ErrorKind.INVALID_PARAMETERS
        assert CommandHandlerError.kind == ErrorKind.HANDLER_ERROR


class TestMessages:
    """Tests for exception message content."""

    def test_malformed(self):
        error = MalformedExpressionError("AND[", "1 unclosed '[' at end of expression")
        assert error.expression == "AND["
        assert str(error) == "Cannot parse expression 'AND[': 1 unclosed '[' at end of expression"

    def test_depth(self):
        error = DepthExceededError("NOT[true]", 2)
        assert error.max_depth == 2
        assert "maximum depth of 2" in str(error)

    def test_unknown_command(self):
        error = UnknownCommandError("is_vip", ["x"])
        assert error.command == "is_vip"
        assert error.arguments == ["x"]
        assert str(error) == "Command 'is_vip' is not defined"

    def test_invalid_parameters(self):
        error = InvalidParametersError("equals", "expected at least 2 parameter(s), got 1", [1])
        assert error.reason.startswith("expected")
        assert str(error).startswith("Invalid parameters for 'equals'")

    def test_handler_error_wraps_original(self):
        original = ZeroDivisionError("division by zero")
        error = CommandHandlerError("ratio", original, [1, 0])
        assert error.original is original
        assert str(error) == (
            "Error executing command 'ratio': ZeroDivisionError: division by zero"
        )


class TestEvaluationError:
    """Tests for recorded errors and their formatting."""

    def test_from_evaluation_exception(self):
        recorded = EvaluationError.from_exception(UnknownCommandError("x", ["1"]))
        assert recorded.kind == ErrorKind.UNKNOWN_COMMAND
        assert recorded.command == "x"
        assert recorded.arguments == ["1"]
        assert recorded.expression is None

    def test_from_syntax_exception(self):
        recorded = EvaluationError.from_exception(MalformedExpressionError("[x]", "empty command name"))
        assert recorded.kind == ErrorKind.MALFORMED_EXPRESSION
        assert recorded.command is None
        assert recorded.expression == "[x]"

    def test_user_format(self):
        recorded = EvaluationError.from_exception(InvalidParametersError("NOT", "requires exactly one parameter, got 2", [True, False]))
        assert recorded.format() == (
            "[invalid_parameters] Invalid parameters for 'NOT': requires exactly one parameter, got 2"
        )

    def test_developer_format(self):
        recorded = EvaluationError.from_exception(MalformedExpressionError("AND[", "unclosed"))
        formatted = recorded.format(ErrorLevel.DEVELOPER)
        assert "  expression: AND[" in formatted

        recorded = EvaluationError.from_exception(UnknownCommandError("x", ["1", "2"]))
        assert "  arguments: ['1', '2']" in recorded.format(ErrorLevel.DEVELOPER)
        assert "arguments" not in recorded.format(ErrorLevel.USER)


class TestEvaluationResult:
    def test_ok(self):
        assert EvaluationResult(value=True).ok

    def test_error_kinds(self):
        result = EvaluationResult(
            value=False,
            errors=[EvaluationError(kind=ErrorKind.HANDLER_ERROR, message="boom")],
        )
        assert not result.ok
        assert result.error_kinds == [ErrorKind.HANDLER_ERROR]
