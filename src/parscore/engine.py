"""Rule engine facade tying the tree builder, registry and evaluator together.

Responsibilities:
    - Turn expression text into a syntax tree and evaluate it.
    - Convert every build or evaluation failure into a fallback value so rule
        evaluation never raises to the host.
    - Expose the registry's registration hooks.

Module-level `parse`, `evaluate`, `register_command` and `command` act on a
process-wide default engine. Independent engines with their own registries
can be created for tests or per-tenant rule sets.
"""

import logging
from collections.abc import Callable
from typing import Any

from parscore.commands.registry import CommandRegistry, Schema
from parscore.commands.schema import CommandDescriptor, ResultKind, fallback_for
from parscore.config import EngineConfig
from parscore.core.tree_node import SyntaxNode
from parscore.core.types import CommandHandler
from parscore.exceptions import DepthExceededError, ExpressionSyntaxError
from parscore.execution.evaluator import DEFAULT_KIND, Evaluator
from parscore.execution.result import EvaluationError, EvaluationResult
from parscore.parsing.builder import TreeBuilder

logger = logging.getLogger(__name__)


class RuleEngine:
    """Parses and evaluates rule expressions against a command registry.

    Notes:
      - The registry is shared by reference; registering on it affects every
        engine holding it.
      - No locking is done. Register commands before evaluating concurrently.
    """

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        config: EngineConfig | None = None,
    ):
        self.registry = registry if registry is not None else CommandRegistry()
        self.config = config or EngineConfig()
        self._builder = TreeBuilder(self.config)
        self._evaluator = Evaluator(self.registry)

    def parse(self, expression: str | None, context: Any = None) -> Any:
        """Evaluate an expression and return its value.

        Params:
            expression: Rule text; None or blank text is an always-true rule.
            context: Opaque value passed to every command handler.

        Returns:
            The expression's value, with any failed command replaced by its
            fallback (False for conditions, None for actions).
        """
        return self.evaluate(expression, context).value

    def evaluate(self, expression: str | None, context: Any = None) -> EvaluationResult:
        """Evaluate an expression, keeping the details of every failure.

        Params:
            expression: Rule text; None or blank text is an always-true rule.
            context: Opaque value passed to every command handler.

        Returns:
            `EvaluationResult` with the value and recorded errors.
        """
        if expression is None or not expression.strip():
            return EvaluationResult(value=True)

        try:
            tree = self._builder.build(expression)
        except ExpressionSyntaxError as error:
            return self._syntax_failure(error)
        try:
            return self._evaluator.evaluate(tree, context)
        except RecursionError:
            return self._syntax_failure(
                DepthExceededError(expression, self.config.max_depth)
            )

    def _syntax_failure(self, error: ExpressionSyntaxError) -> EvaluationResult:
        logger.warning("%s", error)
        return EvaluationResult(
            value=fallback_for(DEFAULT_KIND),
            errors=[EvaluationError.from_exception(error)],
        )

    def build(self, expression: str) -> SyntaxNode:
        """Build the syntax tree without evaluating it.

        Raises:
            MalformedExpressionError: If the expression cannot be parsed.
            DepthExceededError: If nesting exceeds the configured limit.
        """
        return self._builder.build(expression)

    def register_command(
        self,
        name: str,
        handler: CommandHandler,
        schema: Schema = (),
        kind: ResultKind | str = ResultKind.CONDITION,
    ) -> CommandDescriptor:
        """Register or replace a command on this engine's registry."""
        return self.registry.register(name, handler, schema, kind)

    def command(
        self,
        name: str,
        schema: Schema = (),
        kind: ResultKind | str = ResultKind.CONDITION,
    ) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator registering the decorated function as a command."""
        return self.registry.command(name, schema, kind)


_default_engine = RuleEngine()


def get_default_engine() -> RuleEngine:
    """Return the process-wide engine used by the module-level helpers."""
    return _default_engine


def set_default_engine(engine: RuleEngine) -> RuleEngine:
    """Replace the process-wide engine, returning the previous one."""
    global _default_engine
    previous, _default_engine = _default_engine, engine
    return previous


def parse(expression: str | None, context: Any = None) -> Any:
    """Evaluate an expression on the default engine."""
    return _default_engine.parse(expression, context)


def evaluate(expression: str | None, context: Any = None) -> EvaluationResult:
    """Evaluate an expression on the default engine with error details."""
    return _default_engine.evaluate(expression, context)


def register_command(
    name: str,
    handler: CommandHandler,
    schema: Schema = (),
    kind: ResultKind | str = ResultKind.CONDITION,
) -> CommandDescriptor:
    """Register a command on the default engine."""
    return _default_engine.register_command(name, handler, schema, kind)


def command(
    name: str,
    schema: Schema = (),
    kind: ResultKind | str = ResultKind.CONDITION,
) -> Callable[[CommandHandler], CommandHandler]:
    """Decorator registering a command on the default engine."""
    return _default_engine.command(name, schema, kind)
