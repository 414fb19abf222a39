"""
Recursive tree builder for ParsCore expressions.

This module turns expression text into a `SyntaxNode` tree. A single
top-level token ``name[p1,p2,...]`` yields a command whose parameters are
split with nested-bracket awareness; a top-level comma list
``name,arg1,arg2`` yields a command whose non-literal arguments are built
recursively as nested expressions.
"""

import logging

from parscore.config import EngineConfig
from parscore.core.tree_node import (
    CommandNode,
    LiteralNode,
    MalformedNode,
    SyntaxNode,
)
from parscore.exceptions import DepthExceededError, MalformedExpressionError
from parscore.parsing.lexer import (
    CLOSE_BRACKET,
    OPEN_BRACKET,
    check_balance,
    split_params,
    tokenize,
)
from parscore.parsing.literals import coerce_literal, is_scalar_literal

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds syntax trees from expression text."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()

    def build(self, expression: str) -> SyntaxNode:
        """
        Build the syntax tree for a complete expression.

        Params:
            expression: Expression text such as ``AND[equals[1,1],true]``

        Returns:
            The root node of the tree

        Raises:
            MalformedExpressionError: On unbalanced brackets (when
                ``strict_brackets`` is set), an empty top-level command name,
                or input with no tokens. Malformed arguments become
                ``MalformedNode`` children instead.
            DepthExceededError: When nesting exceeds ``max_depth`` or the
                interpreter's recursion limit
        """
        if self.config.strict_brackets:
            check_balance(expression)
        try:
            tree = self._build(expression, depth=1)
        except RecursionError as error:
            raise DepthExceededError(expression, self.config.max_depth) from error
        logger.debug("Syntax tree for %r: %s", expression, tree)
        return tree

    def build_tokens(self, tokens: list[str]) -> SyntaxNode:
        """Build a tree from tokens already produced by `tokenize`."""
        return self._build_tokens(tokens, expression=",".join(tokens), depth=1)

    def _build(self, expression: str, depth: int) -> SyntaxNode:
        if depth > self.config.max_depth:
            raise DepthExceededError(expression, self.config.max_depth)
        tokens = tokenize(expression)
        logger.debug("Tokens for %r: %s", expression, tokens)
        return self._build_tokens(tokens, expression, depth)

    def _build_tokens(
        self, tokens: list[str], expression: str, depth: int
    ) -> SyntaxNode:
        if not tokens:
            raise MalformedExpressionError(expression, "no command found")
        if len(tokens) == 1:
            return self._build_single(tokens[0], depth)

        name, *arguments = tokens
        if OPEN_BRACKET in name:
            raise MalformedExpressionError(
                expression,
                f"'{name}' must be a bare command name when followed by "
                "top-level arguments",
            )
        children = []
        for token in arguments:
            if is_scalar_literal(token):
                children.append(self._literal(token))
            else:
                children.append(self._build_argument(token, depth + 1))
        return CommandNode(name=name, children=tuple(children))

    def _build_single(self, token: str, depth: int) -> CommandNode:
        head, bracket, blob = token.partition(OPEN_BRACKET)
        name = head.strip()
        if not name:
            raise MalformedExpressionError(token, "empty command name")
        if not bracket:
            return CommandNode(name=name)

        if blob.endswith(CLOSE_BRACKET):
            blob = blob[: -len(CLOSE_BRACKET)]
        raw_params = tuple(split_params(blob))
        children = []
        for param in raw_params:
            if OPEN_BRACKET in param:
                children.append(self._build_argument(param, depth + 1))
            else:
                children.append(self._literal(param))
        return CommandNode(name=name, raw_params=raw_params, children=tuple(children))

    def _build_argument(self, expression: str, depth: int) -> SyntaxNode:
        # Depth errors still abort the whole build
        try:
            return self._build(expression, depth)
        except MalformedExpressionError as error:
            logger.debug("Malformed argument %r: %s", expression, error.reason)
            return MalformedNode(raw=expression, reason=error.reason)

    def _literal(self, token: str) -> LiteralNode:
        return LiteralNode(
            raw=token,
            value=coerce_literal(
                token, truncate_decimals=self.config.truncate_decimals
            ),
        )


def build_tree(expression: str, config: EngineConfig | None = None) -> SyntaxNode:
    """Build a syntax tree with a one-off `TreeBuilder`."""
    return TreeBuilder(config).build(expression)
