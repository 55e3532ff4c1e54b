"""Tests for generation/expression.py: registry and dispatch filtering.

Python 3.13+.
"""

from __future__ import annotations

from collections import Counter

import pytest
from hypothesis import event, given

from jsfuzzgen.diagnostics import (
    BudgetExhaustedError,
    DiagnosticCode,
    UnsatisfiableError,
)
from jsfuzzgen.enums import ALL_TYPES, GeneratorKind, Type
from jsfuzzgen.generation import (
    GENERATOR_REGISTRY,
    Configuration,
    ExpressionGenerator,
    FuzzingContext,
    Generator,
    normalize_types,
    run_generator,
    types_match,
)
from jsfuzzgen.syntax import Token, value_type
from tests.strategies import budgets, required_type_sets, seeds

_ONLY_LEAVES_DISABLED = {
    "identifier": {"weight": 0},
    "string": {"weight": 0},
    "number": {"weight": 0},
    "boolean": {"weight": 0},
}


def _context(seed: int = 1, **sections: dict[str, object]) -> FuzzingContext:
    return FuzzingContext.create(seed, Configuration.from_mapping(sections))


def _kinds(generators: list[Generator]) -> set[str]:
    return {generator.config_name for generator in generators}


class TestRegistry:
    """GENERATOR_REGISTRY is the closed set of variants."""

    def test_one_entry_per_kind(self) -> None:
        assert set(GENERATOR_REGISTRY) == set(GeneratorKind)

    def test_config_names_match_kinds(self) -> None:
        for kind, generator_class in GENERATOR_REGISTRY.items():
            assert generator_class.config_name == kind.value

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            GENERATOR_REGISTRY[GeneratorKind.STRING] = ExpressionGenerator  # type: ignore[index]

    def test_dispatcher_not_registered(self) -> None:
        assert ExpressionGenerator not in GENERATOR_REGISTRY.values()


class TestTypeMatching:
    """normalize_types() and types_match()."""

    def test_none_means_all(self) -> None:
        assert normalize_types(None) == ALL_TYPES

    def test_strings_converted(self) -> None:
        assert normalize_types(["object", Type.ARRAY]) == {Type.OBJECT, Type.ARRAY}

    def test_unknown_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="regexp"):
            normalize_types(["regexp"])

    def test_any_accepts_everything(self) -> None:
        assert types_match(frozenset({Type.STRING}), frozenset({Type.ANY}))

    def test_disjoint_rejected(self) -> None:
        assert not types_match(frozenset({Type.STRING}), frozenset({Type.NUMBER}))


class TestEligibility:
    """ExpressionGenerator.eligible() filters."""

    def test_type_filter(self) -> None:
        eligible = ExpressionGenerator(_context()).eligible(10, frozenset({Type.STRING}))

        assert _kinds(eligible) == {"identifier", "string"}

    def test_budget_filter(self) -> None:
        eligible = ExpressionGenerator(_context()).eligible(1, ALL_TYPES)

        assert "function" not in _kinds(eligible)
        assert "function" in _kinds(ExpressionGenerator(_context()).eligible(2, ALL_TYPES))

    def test_zero_weight_excluded(self) -> None:
        eligible = ExpressionGenerator(_context(string={"weight": 0})).eligible(5, ALL_TYPES)

        assert "string" not in _kinds(eligible)

    def test_only_leaves_at_depth_limit(self) -> None:
        context = _context(expression={"maxDepth": 1})
        dispatcher = ExpressionGenerator(context)

        with context.depth_guard:
            eligible = dispatcher.eligible(20, ALL_TYPES)

        assert _kinds(eligible) == {"identifier", "string", "number", "boolean"}

    def test_budget_zero_has_no_candidates(self) -> None:
        assert ExpressionGenerator(_context()).eligible(0, ALL_TYPES) == []


class TestDispatch:
    """ExpressionGenerator.generate()."""

    def test_unsatisfiable_diagnostic(self) -> None:
        context = _context(**_ONLY_LEAVES_DISABLED)

        with pytest.raises(UnsatisfiableError) as exc_info:
            run_generator(ExpressionGenerator(context), 1, frozenset({Type.FUNCTION}))

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.UNSATISFIABLE
        assert diagnostic.budget == 1
        assert diagnostic.required_types == ("function",)

    def test_budget_zero_exhausted(self, context: FuzzingContext) -> None:
        with pytest.raises(BudgetExhaustedError):
            run_generator(ExpressionGenerator(context), 0, ALL_TYPES)

    @given(seeds, budgets(), required_type_sets())
    def test_result_matches_required_types(
        self, seed: int, budget: int, required: frozenset[Type]
    ) -> None:
        """Property: the root is an identifier or a value of a required type."""
        node = run_generator(ExpressionGenerator(_context(seed)), budget, required)

        if node.token is Token.NAME:
            event("dispatch_root=identifier")
        else:
            event(f"dispatch_root={value_type(node)}")
            assert Type.ANY in required or value_type(node) in required

    def test_weights_bias_selection(self) -> None:
        context = _context(
            7,
            identifier={"weight": 0},
            number={"weight": 3.0},
            boolean={"weight": 1.0},
        )
        dispatcher = ExpressionGenerator(context)
        required = frozenset({Type.NUMBER, Type.BOOLEAN})
        counts = Counter(dispatcher.generate(1, required).token for _ in range(2000))

        assert counts[Token.NUMBER] > counts[Token.TRUE] + counts[Token.FALSE]

    def test_depth_guard_restored(self) -> None:
        context = _context(3)
        run_generator(ExpressionGenerator(context), 200, ALL_TYPES)

        assert context.depth_guard.depth == 0

    def test_nesting_bounded_by_max_depth(self) -> None:
        """Only object nesting is enabled, so each level is one more object."""
        context = _context(
            11,
            expression={"maxDepth": 3},
            string={"weight": 0},
            number={"weight": 0},
            boolean={"weight": 0},
            array={"weight": 0},
            function={"weight": 0},
            identifier={"weight": 0.001},
            object={"maxLength": 5},
        )

        for _ in range(30):
            node = run_generator(ExpressionGenerator(context), 400, ALL_TYPES)
            assert _object_depth(node) <= 3


def _object_depth(node) -> int:
    if node.token is not Token.OBJECTLIT:
        return 0
    return 1 + max((_object_depth(key.children[0]) for key in node.children), default=0)
