"""Deterministic random source shared by one generation run.

Every random decision of a run draws from a single RandomSource, never from
per-generator generators or the module-level ``random`` functions, so a
fixed seed reproduces the exact same tree.

Python 3.13+.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

__all__ = ["RandomSource"]

T = TypeVar("T")


class RandomSource(random.Random):
    """Seedable PRNG with the weighted-choice helpers generators use.

    Subclasses random.Random (Mersenne Twister), so the full stdlib API
    (random(), randint(), choice(), ...) remains available and reproducible
    across runs for the same seed.
    """

    def next_int(self, bound: int) -> int:
        """Uniform integer in [0, bound). ``bound`` must be positive."""
        if bound <= 0:
            msg = f"bound must be positive, got {bound}"
            raise ValueError(msg)
        return self.randrange(bound)

    def chance(self, probability: float) -> bool:
        """True with the given probability; always draws one value."""
        return self.random() < probability

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one item with probability proportional to its weight.

        Draws exactly one value regardless of the number of items.

        Raises:
            ValueError: If items is empty, lengths differ, or no weight is positive
        """
        if not items:
            msg = "cannot choose from an empty sequence"
            raise ValueError(msg)
        if len(items) != len(weights):
            msg = f"{len(items)} items but {len(weights)} weights"
            raise ValueError(msg)
        total = sum(weights)
        if total <= 0:
            msg = "at least one weight must be positive"
            raise ValueError(msg)

        target = self.random() * total
        cumulative = 0.0
        for item, weight in zip(items, weights, strict=True):
            cumulative += weight
            if target < cumulative:
                return item
        # Float rounding can leave target == total; fall back to the last
        # positively weighted item.
        for item, weight in zip(reversed(items), reversed(weights), strict=True):
            if weight > 0:
                return item
        raise AssertionError("unreachable")  # pragma: no cover
