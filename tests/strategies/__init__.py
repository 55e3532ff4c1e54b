"""Hypothesis strategies for jsfuzzgen property-based testing.

Usage:
    from tests.strategies import seeds, budgets, required_type_sets
    from tests.strategies.generation import configurations
    from tests.strategies.syntax import expression_trees
"""

from .generation import (
    budgets,
    configurations,
    large_budgets,
    required_type_sets,
    seeds,
    single_types,
)
from .syntax import expression_trees, leaf_nodes

__all__ = [
    "budgets",
    "configurations",
    "expression_trees",
    "large_budgets",
    "leaf_nodes",
    "required_type_sets",
    "seeds",
    "single_types",
]
