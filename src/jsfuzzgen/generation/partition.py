"""Budget partitioning among sibling generation slots.

When a composite generator needs N children it splits its remaining budget
into N shares before recursing.

Policy:
    Each slot first receives ``min(min_share, budget // slots)`` so that
    children can satisfy their minimum whenever the budget allows it. The
    rest is split by "stars and bars": ``slots - 1`` cut points drawn
    uniformly from ``[0, rest]`` and sorted; the gaps between consecutive
    cuts are the extra shares. Shares are therefore randomly skewed rather
    than even, and large budgets cost O(slots log slots), not O(budget).

Contracts:
    - shares sum to max(budget, 0), never more than the input budget
    - no share is negative
    - deterministic for a fixed RandomSource state

Python 3.13+.
"""

from __future__ import annotations

from jsfuzzgen.constants import MIN_BUDGET
from jsfuzzgen.core.random_source import RandomSource

__all__ = ["partition_budget"]


def partition_budget(
    random: RandomSource,
    budget: int,
    slots: int,
    *,
    min_share: int = MIN_BUDGET,
) -> list[int]:
    """Split ``budget`` into ``slots`` non-negative integer shares.

    Args:
        random: The run's shared random source
        budget: Total budget to split (negative is treated as 0)
        slots: Number of children
        min_share: Per-slot floor, honored as far as the budget allows

    Returns:
        List of ``slots`` shares

    Raises:
        ValueError: If slots or min_share is negative

    Example:
        >>> partition_budget(RandomSource(1), 10, 3)  # doctest: +SKIP
        [4, 1, 5]
    """
    if slots < 0:
        msg = f"slots must be >= 0, got {slots}"
        raise ValueError(msg)
    if min_share < 0:
        msg = f"min_share must be >= 0, got {min_share}"
        raise ValueError(msg)
    if slots == 0:
        return []

    budget = max(budget, 0)
    floor = min(min_share, budget // slots)
    rest = budget - floor * slots

    cuts = sorted(random.randint(0, rest) for _ in range(slots - 1))
    bounds = [0, *cuts, rest]
    return [floor + bounds[i + 1] - bounds[i] for i in range(slots)]
