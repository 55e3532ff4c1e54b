"""Top-level entry points: one expression tree per request.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from jsfuzzgen.diagnostics import FuzzError
from jsfuzzgen.enums import Type
from jsfuzzgen.syntax.ast import Node, budget_units

from .base import normalize_types, run_generator
from .config import Configuration
from .context import FuzzingContext
from .expression import ExpressionGenerator

__all__ = ["generate_node", "generate_program"]

logger = logging.getLogger(__name__)


def generate_node(
    context: FuzzingContext,
    budget: int,
    required_types: Iterable[Type | str] | Type | str | None = None,
) -> Node:
    """Dispatch one expression slot on an existing context.

    Args:
        context: Run state; its scopes and name counter are advanced
        budget: Upper bound on the tree's budget units
        required_types: Accepted value types, or one type name (None means any)

    Returns:
        The generated tree

    Raises:
        UnsatisfiableError: If no generator can fill the slot
        BudgetExhaustedError: If the budget is below every minimum
        ValueError: If required_types holds an unknown type name
    """
    types = normalize_types(required_types)
    return run_generator(ExpressionGenerator(context), budget, types)


def generate_program(
    seed: int | None,
    total_budget: int,
    root_required_types: Iterable[Type | str] | Type | str | None = None,
    configuration: Configuration | None = None,
    *,
    externs: Iterable[str] = (),
) -> Node:
    """Generate one random expression tree.

    Same seed, budget, types and configuration always yield the same tree.
    On failure no partial tree is returned.

    Args:
        seed: Random seed (None seeds from the OS)
        total_budget: Upper bound on the tree's budget units
        root_required_types: Accepted root value types, or one type name
            (None means any)
        configuration: Generator knobs (default: documented defaults)
        externs: Environment globals visible to the program

    Returns:
        The generated tree

    Raises:
        UnsatisfiableError: If no generator can fill the root slot
        BudgetExhaustedError: If ``total_budget`` is below every minimum

    Example:
        >>> from jsfuzzgen.syntax import Token
        >>> tree = generate_program(7, 10, {"object"})
        >>> tree.token in (Token.OBJECTLIT, Token.NAME)  # identifiers fit any slot
        True
    """
    context = FuzzingContext.create(seed, configuration, externs=externs)
    logger.debug("Generating program seed=%r budget=%d", seed, total_budget)
    try:
        tree = generate_node(context, total_budget, root_required_types)
    except FuzzError as e:
        logger.debug("Generation failed for seed=%r: %s", seed, e)
        raise
    logger.debug(
        "Generated %d budget units, %d identifiers minted",
        budget_units(tree),
        context.names.counter,
    )
    return tree
