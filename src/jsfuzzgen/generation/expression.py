"""Generator registry and expression dispatch.

GENERATOR_REGISTRY is the closed set of generator variants. Adding a variant
means adding a GeneratorKind member and one registry entry; dispatch picks
it up from here.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

from jsfuzzgen.diagnostics import UnsatisfiableError
from jsfuzzgen.diagnostics.templates import ErrorTemplate
from jsfuzzgen.enums import GeneratorKind, Type

from .base import Generator, run_generator
from .generators import (
    ArrayLiteralGenerator,
    BooleanGenerator,
    FunctionGenerator,
    IdentifierGenerator,
    NumberGenerator,
    ObjectLiteralGenerator,
    StringGenerator,
)

if TYPE_CHECKING:
    from jsfuzzgen.syntax.ast import Node

    from .context import FuzzingContext

__all__ = ["GENERATOR_REGISTRY", "ExpressionGenerator"]

logger = logging.getLogger(__name__)

GENERATOR_REGISTRY: Mapping[GeneratorKind, type[Generator]] = MappingProxyType(
    {
        GeneratorKind.IDENTIFIER: IdentifierGenerator,
        GeneratorKind.STRING: StringGenerator,
        GeneratorKind.NUMBER: NumberGenerator,
        GeneratorKind.BOOLEAN: BooleanGenerator,
        GeneratorKind.OBJECT: ObjectLiteralGenerator,
        GeneratorKind.ARRAY: ArrayLiteralGenerator,
        GeneratorKind.FUNCTION: FunctionGenerator,
    }
)


class ExpressionGenerator(Generator):
    """Dispatcher: fills an expression slot with one registered generator.

    Eligible generators:
        1. support a type in the required set (or the set holds Type.ANY)
        2. accept the budget (is_enough)
        3. have a positive ``weight`` knob
        4. are leaves, once the nesting guard is at expression.maxDepth

    One eligible generator is drawn by weight from the shared RandomSource.
    Composites run inside the context's depth guard; leaves do not nest.

    Not registered itself: composites reach it through their own child slots.
    """

    config_name: ClassVar[str] = "expression"
    is_leaf: ClassVar[bool] = False

    __slots__ = ("_candidates",)

    def __init__(self, context: FuzzingContext) -> None:
        super().__init__(context)
        self._candidates = tuple(cls(context) for cls in GENERATOR_REGISTRY.values())

    @property
    def weight(self) -> float:
        """Always 0: the dispatcher never selects itself."""
        return 0.0

    def eligible(self, budget: int, required_types: frozenset[Type]) -> list[Generator]:
        """Registered generators allowed to fill the slot, in registry order."""
        at_limit = self.context.depth_guard.is_exceeded()
        return [
            candidate
            for candidate in self._candidates
            if candidate.accepts(required_types)
            and candidate.is_enough(budget)
            and candidate.weight > 0
            and (candidate.is_leaf or not at_limit)
        ]

    def generate(self, budget: int, required_types: frozenset[Type]) -> Node:
        """Dispatch the slot.

        Raises:
            UnsatisfiableError: If no registered generator is eligible
        """
        candidates = self.eligible(budget, required_types)
        if not candidates:
            raise UnsatisfiableError(ErrorTemplate.unsatisfiable(budget, required_types))

        chosen = self.context.random.weighted_choice(
            candidates, [candidate.weight for candidate in candidates]
        )
        logger.debug(
            "Dispatch budget=%d depth=%d -> %s",
            budget,
            self.context.depth_guard.depth,
            chosen.config_name,
        )
        if chosen.is_leaf:
            return run_generator(chosen, budget, required_types)
        with self.context.depth_guard:
            return run_generator(chosen, budget, required_types)
