"""Concrete generators.

Leaves (identifier, string, number, boolean) consume one budget unit and
never recurse. Composites (object, array, function) reserve budget for their
own nodes and hand the rest to ExpressionGenerator slots.

Python 3.13+.
"""

from __future__ import annotations

from typing import ClassVar

from jsfuzzgen.constants import FUNCTION_MIN_BUDGET, IDENTIFIER_PREFIX
from jsfuzzgen.enums import ALL_TYPES, ScopeKind, SymbolFilter, Type
from jsfuzzgen.syntax.ast import Node, Token
from jsfuzzgen.syntax.printer import format_number

from .base import Generator, run_generator
from .scope import Symbol

__all__ = [
    "ArrayLiteralGenerator",
    "BooleanGenerator",
    "FunctionGenerator",
    "IdentifierGenerator",
    "NumberGenerator",
    "ObjectLiteralGenerator",
    "StringGenerator",
]


def _expressions(generator: Generator) -> Generator:
    """ExpressionGenerator sharing ``generator``'s context."""
    from .expression import ExpressionGenerator  # noqa: PLC0415 - circular

    return ExpressionGenerator(generator.context)


# ============================================================================
# LEAVES
# ============================================================================


class IdentifierGenerator(Generator):
    """Identifier binding: fresh ``x_<n>`` or a shadowed outer name.

    Identifiers are untyped references, so the requested types are ignored.
    Whichever name is chosen is registered in the current scope, modelling
    a new binding that shadows any outer one.
    """

    config_name: ClassVar[str] = "identifier"

    def generate(self, budget: int, required_types: frozenset[Type]) -> Node:
        scopes = self.context.scopes
        name: str | None = None
        shadow = self.config_float("shadow", 0.0)
        if self.context.random.chance(shadow) and scopes.has_non_locals():
            symbol = scopes.get_random_symbol(
                SymbolFilter.EXCLUDE_EXTERNS | SymbolFilter.EXCLUDE_LOCALS
            )
            if symbol is not None:
                name = symbol.name
        if name is None:
            name = f"{IDENTIFIER_PREFIX}{self.context.names.get_next_number()}"
        scopes.add_symbol(Symbol(name))
        return Node(Token.NAME, name)


class StringGenerator(Generator):
    """String literal; budget beyond the minimum is ignored."""

    config_name: ClassVar[str] = "string"
    supported_types: ClassVar[frozenset[Type]] = frozenset({Type.STRING})

    def generate(self, budget: int, required_types: frozenset[Type]) -> Node:
        return Node(Token.STRING, self.context.names.get_string())


class NumberGenerator(Generator):
    """Non-negative numeric literal."""

    config_name: ClassVar[str] = "number"
    supported_types: ClassVar[frozenset[Type]] = frozenset({Type.NUMBER})

    def generate(self, budget: int, required_types: frozenset[Type]) -> Node:
        return Node(Token.NUMBER, self.context.names.get_random_number())


class BooleanGenerator(Generator):
    config_name: ClassVar[str] = "boolean"
    supported_types: ClassVar[frozenset[Type]] = frozenset({Type.BOOLEAN})

    def generate(self, budget: int, required_types: frozenset[Type]) -> Node:
        return Node(Token.TRUE if self.context.random.next_int(2) == 0 else Token.FALSE)


# ============================================================================
# COMPOSITES
# ============================================================================


class ObjectLiteralGenerator(Generator):
    """Object literal with up to ``(budget - 1) // 2`` properties.

    Budget layout: 1 unit for the literal, 1 per key, the rest shared by the
    property values. Keys are property names or stringified numbers with
    equal probability.
    """

    config_name: ClassVar[str] = "object"
    supported_types: ClassVar[frozenset[Type]] = frozenset({Type.OBJECT})
    is_leaf: ClassVar[bool] = False

    def generate(self, budget: int, required_types: frozenset[Type]) -> Node:
        literal = Node(Token.OBJECTLIT)
        remaining = max(budget - 1, 0)
        # a property needs at least a key and a value
        length = self.generate_length(remaining // 2)
        if length == 0:
            return literal

        remaining -= length  # keys
        values = self.distribute(remaining, _expressions(self), length, ALL_TYPES)
        names = self.context.names
        for value in values:
            if self.context.random.next_int(2) == 0:
                key_name = names.get_property_name()
            else:
                key_name = format_number(names.get_random_number())
            key = Node(Token.STRING_KEY, key_name)
            key.add_child_to_front(value)
            literal.add_child_to_back(key)
        return literal


class ArrayLiteralGenerator(Generator):
    """Array literal; 1 unit for the literal, the rest shared by elements."""

    config_name: ClassVar[str] = "array"
    supported_types: ClassVar[frozenset[Type]] = frozenset({Type.ARRAY})
    is_leaf: ClassVar[bool] = False

    def generate(self, budget: int, required_types: frozenset[Type]) -> Node:
        literal = Node(Token.ARRAYLIT)
        remaining = max(budget - 1, 0)
        length = self.generate_length(remaining)
        if length == 0:
            return literal
        for element in self.distribute(remaining, _expressions(self), length, ALL_TYPES):
            literal.add_child_to_back(element)
        return literal


class FunctionGenerator(Generator):
    """Function expression ``function (params) { return body; }``.

    Opens a FUNCTION scope for its parameters, which makes the enclosing
    scope's symbols non-local and therefore candidates for shadowing.
    Budget layout: 1 unit for the function, 1 per parameter, at least 1 for
    the body expression.
    """

    config_name: ClassVar[str] = "function"
    supported_types: ClassVar[frozenset[Type]] = frozenset({Type.FUNCTION})
    min_budget: ClassVar[int] = FUNCTION_MIN_BUDGET
    is_leaf: ClassVar[bool] = False

    def generate(self, budget: int, required_types: frozenset[Type]) -> Node:
        remaining = budget - 1
        param_count = self.generate_length(remaining - 1, knob="maxParams")
        params = Node(Token.PARAM_LIST)
        identifiers = IdentifierGenerator(self.context)

        with self.context.scopes.scope(ScopeKind.FUNCTION):
            for _ in range(param_count):
                params.add_child_to_back(run_generator(identifiers, 1, ALL_TYPES))
            body = run_generator(_expressions(self), remaining - param_count, ALL_TYPES)

        statement = Node(Token.RETURN)
        statement.add_child_to_back(body)
        block = Node(Token.BLOCK)
        block.add_child_to_back(statement)
        return Node(Token.FUNCTION, children=[params, block])
