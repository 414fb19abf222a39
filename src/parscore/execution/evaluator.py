"""
Tree evaluator dispatching commands through the registry.

Children are evaluated depth-first, left to right, before their parent's
handler runs. A failing command yields its fallback value (False for
conditions, None for actions) and evaluation of the enclosing expression
carries on with that value.
"""

import logging
from typing import Any

from parscore.commands.registry import CommandRegistry
from parscore.commands.schema import ResultKind, fallback_for
from parscore.commands.validation import validate_params
from parscore.core.tree_node import LiteralNode, MalformedNode, SyntaxNode
from parscore.exceptions import (
    CommandEvaluationError,
    CommandHandlerError,
    InvalidParametersError,
    MalformedExpressionError,
    ParsCoreError,
    UnknownCommandError,
)
from parscore.execution.result import EvaluationError, EvaluationResult

logger = logging.getLogger(__name__)

# Kind assumed for names with no registered descriptor
DEFAULT_KIND = ResultKind.CONDITION


class Evaluator:
    """Evaluates syntax trees against a command registry."""

    def __init__(self, registry: CommandRegistry):
        self.registry = registry

    def evaluate(self, node: SyntaxNode, context: Any = None) -> EvaluationResult:
        """
        Evaluate a syntax tree.

        Params:
            node: Root of the tree to evaluate
            context: Opaque value passed unchanged to every handler

        Returns:
            The result value and all failures recorded in the tree
        """
        errors: list[EvaluationError] = []
        value = self._evaluate(node, context, errors)
        return EvaluationResult(value=value, errors=errors)

    def _evaluate(
        self, node: SyntaxNode, context: Any, errors: list[EvaluationError]
    ) -> Any:
        if isinstance(node, LiteralNode):
            return node.value
        if isinstance(node, MalformedNode):
            self._record(MalformedExpressionError(node.raw, node.reason), errors)
            return fallback_for(DEFAULT_KIND)

        descriptor = self.registry.lookup(node.name)
        if descriptor is None:
            arguments = [str(child) for child in node.children]
            self._record(UnknownCommandError(node.name, arguments), errors)
            return fallback_for(DEFAULT_KIND)

        arguments = [self._evaluate(child, context, errors) for child in node.children]
        logger.debug("Evaluating command %r with %r", node.name, arguments)

        try:
            validate_params(arguments, descriptor.params, node.name)
        except InvalidParametersError as error:
            self._record(error, errors)
            return descriptor.fallback

        try:
            result = descriptor.handler(arguments, context)
        except Exception as error:
            self._record(CommandHandlerError(node.name, error, arguments), errors)
            return descriptor.fallback

        logger.debug("Command %r returned %r", node.name, result)
        return result

    def _record(self, error: ParsCoreError, errors: list[EvaluationError]) -> None:
        if isinstance(error, CommandEvaluationError):
            logger.warning("%s (arguments: %r)", error, error.arguments)
        else:
            logger.warning("%s", error)
        errors.append(EvaluationError.from_exception(error))


def evaluate_tree(
    node: SyntaxNode, registry: CommandRegistry, context: Any = None
) -> EvaluationResult:
    """Evaluate a tree with a one-off `Evaluator`."""
    return Evaluator(registry).evaluate(node, context)

