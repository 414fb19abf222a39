"""
Syntax tree nodes for ParsCore expressions.

A parsed expression is a tree of ``LiteralNode`` for bare values and
``CommandNode`` for ``name[arg,...]`` invocations. An argument that cannot be
built becomes a ``MalformedNode`` so only its own slot fails. Nodes are
frozen and built fresh for every parse call.
"""

from attrs import frozen

from parscore.core.types import LiteralValue


@frozen
class LiteralNode:
    """A bare value token such as ``true``, ``42`` or ``active``."""

    raw: str
    value: LiteralValue

    def __str__(self) -> str:
        return self.raw


@frozen
class CommandNode:
    """
    A command invocation with its ordered arguments.

    Params:
        name: Command identifier looked up in the registry
        raw_params: Parameter strings as split from ``name[...]``, kept for
            introspection; empty for multi-token input or a bare name
        children: Argument nodes, each a ``LiteralNode``, a nested
            ``CommandNode`` or a ``MalformedNode``
    """

    name: str
    raw_params: tuple[str, ...] = ()
    children: tuple["SyntaxNode", ...] = ()

    def __str__(self) -> str:
        if not self.children:
            return self.name
        return f"{self.name}[{','.join(str(child) for child in self.children)}]"

    def depth(self) -> int:
        """Number of command levels from this node down to its deepest leaf."""
        nested = [
            child.depth() for child in self.children if isinstance(child, CommandNode)
        ]
        return 1 + max(nested, default=0)


@frozen
class MalformedNode:
    """An argument slot whose text could not be built into a node.

    Evaluates to the condition fallback without failing its siblings.
    """

    raw: str
    reason: str

    def __str__(self) -> str:
        return self.raw


SyntaxNode = LiteralNode | CommandNode | MalformedNode
