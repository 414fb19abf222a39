"""
Evaluation results carrying both the value and any recorded failures.

Failures inside an expression never raise to the host. Each one becomes an
`EvaluationError` on the result while evaluation continues with the failed
command's fallback value.
"""

from dataclasses import dataclass, field
from typing import Any

from parscore.exceptions import ErrorKind, ErrorLevel, ParsCoreError


@dataclass
class EvaluationError:
    """
    One failure recorded during parsing or evaluation.

    Params:
        kind: Failure category
        message: Human-readable description
        command: Command being evaluated, if any
        arguments: Evaluated arguments at the time of failure
        expression: Expression text, for failures raised while building
    """

    kind: ErrorKind
    message: str
    command: str | None = None
    arguments: list[Any] = field(default_factory=list)
    expression: str | None = None

    @classmethod
    def from_exception(cls, error: ParsCoreError) -> "EvaluationError":
        """Record a ParsCore exception as an evaluation error."""
        return cls(
            kind=error.kind,
            message=str(error),
            command=getattr(error, "command", None),
            arguments=list(getattr(error, "arguments", [])),
            expression=getattr(error, "expression", None),
        )

    def format(self, error_level: ErrorLevel = ErrorLevel.USER) -> str:
        """
        Format the error based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted error text with appropriate detail level
        """
        lines = [f"[{self.kind.value}] {self.message}"]
        if error_level == ErrorLevel.DEVELOPER:
            if self.arguments:
                lines.append(f"  arguments: {self.arguments!r}")
            if self.expression:
                lines.append(f"  expression: {self.expression}")
        return "\n".join(lines)


@dataclass
class EvaluationResult:
    """Value of an evaluated expression plus every failure met on the way."""

    value: Any
    errors: list[EvaluationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def error_kinds(self) -> list[ErrorKind]:
        return [error.kind for error in self.errors]
