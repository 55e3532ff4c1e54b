"""Generator contract shared by every concrete generator.

A generator produces one node for a ``(budget, required_types)`` slot:

    generate(budget, required_types) -> Node
        Consumes at most ``budget`` units across itself and its children.
    is_enough(budget) -> bool
        Minimum-budget test; monotonic in budget.
    config_name
        Section name of the generator's knobs in Configuration.
    supported_types
        Value categories the generator can produce (default: all).

Callers invoke generators through run_generator(), which enforces the
minimum budget, or through ExpressionGenerator, which selects one.

Python 3.13+.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, ClassVar

from jsfuzzgen.constants import MIN_BUDGET
from jsfuzzgen.diagnostics import BudgetExhaustedError
from jsfuzzgen.diagnostics.templates import ErrorTemplate
from jsfuzzgen.enums import ALL_TYPES, Type

from .partition import partition_budget

if TYPE_CHECKING:
    from jsfuzzgen.syntax.ast import Node

    from .context import FuzzingContext

__all__ = ["Generator", "normalize_types", "run_generator", "types_match"]


def normalize_types(required_types: Iterable[Type | str] | Type | str | None) -> frozenset[Type]:
    """Normalize a caller's type request.

    None means "any type". Strings are converted to Type members, so
    ``{"object"}``, ``{Type.OBJECT}`` and a bare ``"object"`` are equivalent.

    Raises:
        ValueError: If a string is not a Type value
    """
    if required_types is None:
        return ALL_TYPES
    if isinstance(required_types, str):
        # Type is a StrEnum: members are strings too
        return frozenset({Type(required_types)})
    return frozenset(Type(t) for t in required_types)


def types_match(supported: frozenset[Type], required: frozenset[Type]) -> bool:
    """True if a generator supporting ``supported`` may fill a ``required`` slot."""
    return Type.ANY in required or not supported.isdisjoint(required)


class Generator(ABC):
    """Base class of all generators.

    One instance per context; instances hold no state besides the context.

    Class Attributes:
        config_name: Configuration section name
        supported_types: Value categories this generator produces
        min_budget: Smallest budget accepted by the default is_enough()
        is_leaf: True if generate() never recurses into dispatch
    """

    config_name: ClassVar[str]
    supported_types: ClassVar[frozenset[Type]] = ALL_TYPES
    min_budget: ClassVar[int] = MIN_BUDGET
    is_leaf: ClassVar[bool] = True

    __slots__ = ("context",)

    def __init__(self, context: FuzzingContext) -> None:
        self.context = context

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @abstractmethod
    def generate(self, budget: int, required_types: frozenset[Type]) -> Node:
        """Produce one node within ``budget``."""

    def is_enough(self, budget: int) -> bool:
        """True if ``budget`` can pay for at least the smallest output."""
        return budget >= self.min_budget

    def accepts(self, required_types: frozenset[Type]) -> bool:
        """True if this generator may fill a slot requiring ``required_types``."""
        return types_match(self.supported_types, required_types)

    # ------------------------------------------------------------------
    # Configuration helpers
    # ------------------------------------------------------------------

    def config_float(self, knob: str, fallback: float = 0.0) -> float:
        return self.context.config.get_float(
            self.config_name, knob, fallback, warned=self.context.warned
        )

    def config_int(self, knob: str, fallback: int = 0) -> int:
        return self.context.config.get_int(
            self.config_name, knob, fallback, warned=self.context.warned
        )

    def config_bool(self, knob: str, fallback: bool = False) -> bool:
        return self.context.config.get_bool(
            self.config_name, knob, fallback, warned=self.context.warned
        )

    @property
    def weight(self) -> float:
        """Selection weight for dispatch (knob ``weight``, default 1.0)."""
        return self.config_float("weight", 1.0)

    # ------------------------------------------------------------------
    # Composite helpers
    # ------------------------------------------------------------------

    def generate_length(self, cap: int, knob: str = "maxLength") -> int:
        """Randomized child count, uniform in [0, min(cap, knob)].

        Args:
            cap: Most children the budget can pay for (clamped at 0)
            knob: Configuration knob holding the generator's own limit
        """
        cap = max(cap, 0)
        limit = min(cap, self.config_int(knob, cap))
        return self.context.random.randint(0, limit)

    def distribute(
        self,
        budget: int,
        generator: Generator,
        count: int,
        required_types: frozenset[Type],
    ) -> list[Node]:
        """Generate ``count`` children from ``generator``, sharing ``budget``.

        Shares come from partition_budget() with the child's minimum as the
        per-slot floor; each child is then generated in order.
        """
        shares = partition_budget(
            self.context.random, budget, count, min_share=generator.min_budget
        )
        return [run_generator(generator, share, required_types) for share in shares]


def run_generator(generator: Generator, budget: int, required_types: frozenset[Type]) -> Node:
    """Invoke a generator after checking its minimum budget.

    Raises:
        BudgetExhaustedError: If ``generator.is_enough(budget)`` is false
    """
    if not generator.is_enough(budget):
        raise BudgetExhaustedError(
            ErrorTemplate.budget_exhausted(generator.config_name, budget, generator.min_budget)
        )
    return generator.generate(budget, required_types)
