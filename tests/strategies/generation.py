"""Hypothesis strategies for generation inputs.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - gen_budget: budget size class (tiny|small|medium)
    - gen_types: required type set shape (any|single|multi)
    - gen_config: configuration shape (default|tuned)
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from jsfuzzgen.enums import Type
from jsfuzzgen.generation import Configuration

# Types every generator family can produce; ANY is handled separately.
CONCRETE_TYPES: tuple[Type, ...] = tuple(t for t in Type if t is not Type.ANY)

seeds = st.integers(min_value=0, max_value=2**32 - 1)

single_types = st.sampled_from(CONCRETE_TYPES)

large_budgets = st.integers(min_value=100, max_value=2000)


@st.composite
def budgets(draw: st.DrawFn, min_value: int = 1, max_value: int = 60) -> int:
    """Budgets biased towards the small values where edge cases live.

    Events emitted:
    - gen_budget={tiny|small|medium}
    """
    value = draw(
        st.one_of(
            st.integers(min_value=min_value, max_value=min(max(min_value, 3), max_value)),
            st.integers(min_value=min_value, max_value=max_value),
        )
    )
    if value <= 3:
        event("gen_budget=tiny")
    elif value <= 20:
        event("gen_budget=small")
    else:
        event("gen_budget=medium")
    return value


@st.composite
def required_type_sets(draw: st.DrawFn) -> frozenset[Type]:
    """Non-empty required type sets, sometimes containing Type.ANY.

    Events emitted:
    - gen_types={any|single|multi}
    """
    if draw(st.booleans()) and draw(st.booleans()):
        event("gen_types=any")
        return frozenset({Type.ANY})
    types = draw(st.frozensets(single_types, min_size=1))
    event(f"gen_types={'single' if len(types) == 1 else 'multi'}")
    return types


@st.composite
def configurations(draw: st.DrawFn) -> Configuration:
    """Valid configurations with randomized knobs.

    Every generator keeps a positive weight except function, so that any
    budget >= 1 stays satisfiable for an ANY slot.

    Events emitted:
    - gen_config={default|tuned}
    """
    if draw(st.booleans()):
        event("gen_config=default")
        return Configuration()
    event("gen_config=tuned")
    weight = st.floats(min_value=0.1, max_value=5.0, allow_nan=False)
    small = st.integers(min_value=0, max_value=6)
    return Configuration.from_mapping(
        {
            "expression": {"maxDepth": draw(st.integers(min_value=1, max_value=30))},
            "identifier": {
                "weight": draw(weight),
                "shadow": draw(st.floats(min_value=0.0, max_value=1.0)),
            },
            "string": {"weight": draw(weight), "maxLength": draw(small)},
            "number": {"weight": draw(weight)},
            "boolean": {"weight": draw(weight)},
            "object": {"weight": draw(weight), "maxLength": draw(small)},
            "array": {"weight": draw(weight), "maxLength": draw(small)},
            "function": {
                "weight": draw(st.floats(min_value=0.0, max_value=5.0)),
                "maxParams": draw(small),
            },
        }
    )
