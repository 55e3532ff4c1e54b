"""Syntax tree nodes produced by generators.

A deliberately small JavaScript tree model: generators only construct nodes
and attach children, the printer is the only consumer that interprets them.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from jsfuzzgen.enums import Type

__all__ = [
    "STRUCTURAL_TOKENS",
    "Node",
    "Token",
    "budget_units",
    "value_type",
]


class Token(StrEnum):
    """Node kinds.

    StrEnum provides automatic string conversion: str(Token.NAME) == "name"
    """

    # Leaves
    NAME = "name"
    """Identifier reference; value is the name."""

    STRING = "string"
    """String literal; value is the unescaped content."""

    NUMBER = "number"
    """Numeric literal; value is an int or float."""

    TRUE = "true"
    FALSE = "false"

    # Composites
    OBJECTLIT = "objectlit"
    """Object literal; children are STRING_KEY nodes."""

    STRING_KEY = "string_key"
    """Object property; value is the key, single child is the value."""

    ARRAYLIT = "arraylit"
    """Array literal; children are elements."""

    FUNCTION = "function"
    """Function expression; children are PARAM_LIST and BLOCK."""

    # Structural (cost no budget)
    PARAM_LIST = "param_list"
    BLOCK = "block"
    RETURN = "return"


# Nodes that exist only to shape the tree and cost no budget.
STRUCTURAL_TOKENS: frozenset[Token] = frozenset(
    {Token.PARAM_LIST, Token.BLOCK, Token.RETURN}
)

_VALUE_TYPES: dict[Token, Type] = {
    Token.STRING: Type.STRING,
    Token.NUMBER: Type.NUMBER,
    Token.TRUE: Type.BOOLEAN,
    Token.FALSE: Type.BOOLEAN,
    Token.OBJECTLIT: Type.OBJECT,
    Token.ARRAYLIT: Type.ARRAY,
    Token.FUNCTION: Type.FUNCTION,
}


@dataclass(slots=True)
class Node:
    """Mutable tree node.

    Generators build a node, then attach children. Once attached, a node is
    owned by its parent.

    Attributes:
        token: Node kind
        value: Payload for NAME, STRING, NUMBER and STRING_KEY nodes
        children: Ordered child nodes

    Example:
        >>> key = Node(Token.STRING_KEY, "a")
        >>> key.add_child_to_front(Node(Token.NUMBER, 1))
        >>> literal = Node(Token.OBJECTLIT)
        >>> literal.add_child_to_back(key)
    """

    token: Token
    value: str | int | float | None = None
    children: list[Node] = field(default_factory=list)

    def add_child_to_back(self, child: Node) -> None:
        """Append a child."""
        self.children.append(child)

    def add_child_to_front(self, child: Node) -> None:
        """Prepend a child."""
        self.children.insert(0, child)

    @property
    def first_child(self) -> Node | None:
        """First child, or None for childless nodes."""
        return self.children[0] if self.children else None

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants in pre-order.

        Iterative, so arbitrarily deep trees do not hit the recursion limit.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def value_type(node: Node) -> Type | None:
    """Value category of an expression node.

    Identifiers are untyped references and classify as None.
    """
    return _VALUE_TYPES.get(node.token)


def budget_units(node: Node) -> int:
    """Number of budget-bearing nodes in the tree rooted at ``node``."""
    return sum(1 for n in node.walk() if n.token not in STRUCTURAL_TOKENS)
