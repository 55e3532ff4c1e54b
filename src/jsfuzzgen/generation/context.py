"""Per-run generation context.

Every generator receives the same FuzzingContext by reference. It owns all
mutable state of one generation run; nothing is shared between runs.

Instance Lifecycle:
    Create one context per top-level request with FuzzingContext.create(),
    discard it after the tree is produced or the run fails.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from jsfuzzgen.constants import FRAMES_PER_EXPRESSION_LEVEL, MAX_DEPTH
from jsfuzzgen.core.depth_guard import DepthGuard
from jsfuzzgen.core.random_source import RandomSource

from .config import Configuration
from .names import SymbolNameGenerator
from .scope import ScopeManager

__all__ = ["FuzzingContext"]


@dataclass(slots=True)
class FuzzingContext:
    """Explicit state of one generation run.

    Attributes:
        random: Single random source for every decision of the run
        config: Read-only generator configuration
        names: Name and literal synthesis (counter advances monotonically)
        scopes: Lexical scope stack
        depth_guard: Expression nesting guard (limit: expression.maxDepth,
            clamped so the nested calls fit the recursion limit)
        warned: Undefined knobs already reported by this run
    """

    random: RandomSource
    config: Configuration
    names: SymbolNameGenerator
    scopes: ScopeManager
    depth_guard: DepthGuard
    warned: set[tuple[str, str]] = field(default_factory=set)

    @classmethod
    def create(
        cls,
        seed: int | None,
        config: Configuration | None = None,
        *,
        externs: Iterable[str] = (),
    ) -> FuzzingContext:
        """Build a fresh context.

        Args:
            seed: Random seed; the same seed reproduces the same run
            config: Generator configuration (default: documented defaults)
            externs: Global names predeclared in the global scope

        Returns:
            A context with an empty global scope plus externs
        """
        config = config if config is not None else Configuration()
        random = RandomSource(seed)
        scopes = ScopeManager(random)
        scopes.declare_externs(externs)
        return cls(
            random=random,
            config=config,
            names=SymbolNameGenerator(random, config),
            scopes=scopes,
            depth_guard=DepthGuard(
                max_depth=config.get_int("expression", "maxDepth", MAX_DEPTH),
                frames_per_level=FRAMES_PER_EXPRESSION_LEVEL,
            ),
        )
