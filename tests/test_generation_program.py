"""End-to-end properties of generate_program() and generate_node().

Python 3.13+.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from jsfuzzgen import generate_node, generate_program, print_code
from jsfuzzgen.constants import DEFAULT_EXTERNS, FRAMES_PER_EXPRESSION_LEVEL
from jsfuzzgen.core.depth_guard import safe_depth
from jsfuzzgen.diagnostics import BudgetExhaustedError, FuzzError, UnsatisfiableError
from jsfuzzgen.enums import Type
from jsfuzzgen.generation import Configuration, FuzzingContext, ScopeManager, Symbol
from jsfuzzgen.syntax import Token, budget_units
from tests.strategies import budgets, configurations, required_type_sets, seeds


def _spy(method: str):
    """Call-counting wrapper around a ScopeManager method (instances have __slots__)."""
    original = getattr(ScopeManager, method)
    return patch.object(ScopeManager, method, autospec=True, side_effect=original)


class TestDeterminism:
    """Same inputs, same tree."""

    @given(seeds, budgets(), configurations())
    def test_same_seed_same_tree(self, seed: int, budget: int, config: Configuration) -> None:
        first = generate_program(seed, budget, None, config)
        second = generate_program(seed, budget, None, config)

        assert first == second
        assert print_code(first) == print_code(second)

    def test_different_seeds_differ(self) -> None:
        sources = {print_code(generate_program(seed, 30)) for seed in range(20)}

        assert len(sources) > 1

    def test_string_type_names_accepted(self) -> None:
        assert generate_program(5, 10, {"object"}) == generate_program(5, 10, {Type.OBJECT})

    def test_bare_type_name_is_one_type(self) -> None:
        assert generate_program(5, 10, "object") == generate_program(5, 10, {Type.OBJECT})

    def test_seed_42_object_example(self) -> None:
        """Seed 42, budget 6, object root: an empty object literal."""
        tree = generate_program(42, 6, {Type.OBJECT})

        assert tree.token is Token.OBJECTLIT
        assert print_code(tree, statement=True) == "({});\n"


class TestBudgetProperty:
    """budget_units(tree) <= budget for every generated tree."""

    @given(seeds, budgets(max_value=120), required_type_sets(), configurations())
    def test_budget_respected(
        self,
        seed: int,
        budget: int,
        required: frozenset[Type],
        config: Configuration,
    ) -> None:
        tree = generate_program(seed, budget, required, config)
        units = budget_units(tree)
        assert units <= budget
        event(f"program_fill={'full' if units == budget else 'partial'}")

    def test_zero_budget_exhausted(self) -> None:
        with pytest.raises(BudgetExhaustedError):
            generate_program(1, 0)

    @given(seeds, budgets(), configurations())
    def test_tree_prints_and_validates(self, seed: int, budget: int, config: Configuration) -> None:
        tree = generate_program(seed, budget, None, config)

        source = print_code(tree, statement=True, validate=True)
        assert source.startswith("(")
        assert source.endswith(");\n")


class TestObjectEntries:
    """Object literal entry count never exceeds floor((budget - 1) / 2)."""

    @given(seeds, budgets(min_value=1, max_value=100))
    def test_root_object_entries(self, seed: int, budget: int) -> None:
        config = Configuration.from_mapping({"identifier": {"weight": 0}})
        tree = generate_program(seed, budget, {Type.OBJECT}, config)

        assert tree.token is Token.OBJECTLIT
        assert len(tree.children) <= (budget - 1) // 2


class TestIdentifiers:
    """Fresh-name uniqueness and shadowing through the full pipeline."""

    @given(seeds, budgets(max_value=100))
    def test_fresh_names_unique_without_shadowing(self, seed: int, budget: int) -> None:
        config = Configuration.from_mapping({"identifier": {"shadow": 0.0}})
        tree = generate_program(seed, budget, None, config)
        names = [node.value for node in tree.walk() if node.token is Token.NAME]

        assert len(names) == len(set(names))

    def test_shadowing_reaches_function_parameters(self) -> None:
        config = Configuration.from_mapping(
            {
                "identifier": {"shadow": 1.0, "weight": 0},
            }
        )
        context = FuzzingContext.create(4, config)
        context.scopes.add_symbol(Symbol("outer"))

        tree = generate_node(context, 40, {Type.FUNCTION})

        names = {node.value for node in tree.walk() if node.token is Token.NAME}
        assert names <= {"outer"}
        assert context.names.counter == 0

    def test_externs_never_reused(self) -> None:
        config = Configuration.from_mapping({"identifier": {"shadow": 1.0}})
        for seed in range(20):
            tree = generate_program(seed, 40, None, config, externs=DEFAULT_EXTERNS)
            names = {node.value for node in tree.walk() if node.token is Token.NAME}
            assert names.isdisjoint(DEFAULT_EXTERNS)


class TestScopeBalance:
    """Every push has a matching pop, on success and on failure."""

    @given(seeds, budgets(max_value=80))
    def test_balanced_on_success(self, seed: int, budget: int) -> None:
        context = FuzzingContext.create(seed)
        with (
            _spy("push_scope") as push,
            _spy("pop_scope") as pop,
        ):
            generate_node(context, budget)

        assert push.call_count == pop.call_count
        assert context.scopes.depth == 1
        assert context.depth_guard.depth == 0

    @settings(max_examples=30)
    @given(seeds)
    def test_balanced_on_failure(self, seed: int) -> None:
        """Disable every leaf so that the innermost function body fails."""
        config = Configuration.from_mapping(
            {
                "identifier": {"weight": 0},
                "string": {"weight": 0},
                "number": {"weight": 0},
                "boolean": {"weight": 0},
                "object": {"weight": 0},
                "array": {"weight": 0},
            }
        )
        context = FuzzingContext.create(seed, config)
        with (
            _spy("push_scope") as push,
            _spy("pop_scope") as pop,
            pytest.raises(UnsatisfiableError),
        ):
            generate_node(context, 30)

        assert push.call_count >= 1
        assert push.call_count == pop.call_count
        assert context.scopes.depth == 1
        assert context.depth_guard.depth == 0


def _functions_only(max_depth: int) -> Configuration:
    """Nest functions until the depth limit, then close with a string."""
    return Configuration.from_mapping(
        {
            "expression": {"maxDepth": max_depth},
            "function": {"weight": 1.0, "maxParams": 0},
            "string": {"weight": 1e-9},
            "identifier": {"weight": 0},
            "number": {"weight": 0},
            "boolean": {"weight": 0},
            "object": {"weight": 0},
            "array": {"weight": 0},
        }
    )


class TestDepthLimits:
    """Accepted maxDepth values never overflow the stack or the printer."""

    def test_large_max_depth_clamped_to_recursion_limit(self) -> None:
        expected = min(900, safe_depth(frames_per_level=FRAMES_PER_EXPRESSION_LEVEL))

        tree = generate_program(1, 5000, None, _functions_only(900))

        functions = sum(1 for node in tree.walk() if node.token is Token.FUNCTION)
        assert functions == expected
        print_code(tree, validate=True)

    def test_context_guard_uses_clamped_depth(self) -> None:
        context = FuzzingContext.create(1, _functions_only(900))

        assert context.depth_guard.max_depth == min(
            900, safe_depth(frames_per_level=FRAMES_PER_EXPRESSION_LEVEL)
        )

    def test_deep_functions_print_with_validation(self) -> None:
        tree = generate_program(1, 1000, None, _functions_only(80))

        source = print_code(tree, validate=True)
        assert source.count("function (") == 80


class TestLogging:
    def test_debug_records(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="jsfuzzgen"):
            generate_program(3, 10)

        assert "Generating program seed=3 budget=10" in caplog.text
        assert "Dispatch budget=10" in caplog.text

    def test_failure_logged_and_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        config = Configuration.from_mapping({"identifier": {"weight": 0}})

        with caplog.at_level(logging.DEBUG, logger="jsfuzzgen"), pytest.raises(FuzzError):
            generate_program(3, 1, {Type.FUNCTION}, config)

        assert "Generation failed" in caplog.text


@pytest.mark.fuzz
class TestLargeBudgets:
    """Intensive runs: large budgets stay within depth and budget limits."""

    @settings(max_examples=300, deadline=None)
    @given(seeds, st.integers(min_value=100, max_value=3000))
    def test_large_budget(self, seed: int, budget: int) -> None:
        tree = generate_program(seed, budget)

        assert budget_units(tree) <= budget
        print_code(tree, validate=True)
