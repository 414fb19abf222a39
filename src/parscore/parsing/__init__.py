"""
ParsCore parsing components.

This package provides the bracket-aware lexer, literal coercion and the
recursive syntax tree builder.
"""

from parscore.parsing.builder import TreeBuilder, build_tree
from parscore.parsing.lexer import check_balance, split_params, tokenize
from parscore.parsing.literals import (
    coerce_literal,
    is_boolean_literal,
    is_numeric_literal,
    is_scalar_literal,
)

__all__ = [
    "TreeBuilder",
    "build_tree",
    "tokenize",
    "split_params",
    "check_balance",
    "coerce_literal",
    "is_boolean_literal",
    "is_numeric_literal",
    "is_scalar_literal",
]
