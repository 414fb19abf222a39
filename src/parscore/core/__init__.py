"""
Core ParsCore components.

This package provides the fundamental building blocks for ParsCore: the
syntax tree node classes and shared type definitions.
"""

from parscore.core.tree_node import CommandNode, LiteralNode, MalformedNode, SyntaxNode
from parscore.core.types import (
    CommandHandler,
    Context,
    LiteralValue,
    SchemaEntry,
)

__all__ = [
    "CommandNode",
    "LiteralNode",
    "MalformedNode",
    "SyntaxNode",
    "CommandHandler",
    "Context",
    "LiteralValue",
    "SchemaEntry",
]
