"""Budget-driven generation of random expression trees.

Public entry points are generate_program() and generate_node(); the
generators, registry and context are exposed for drivers and tests that need
finer control.

Python 3.13+.
"""

from .base import Generator, normalize_types, run_generator, types_match
from .config import DEFAULT_CONFIGURATION, Configuration, Knob
from .context import FuzzingContext
from .expression import GENERATOR_REGISTRY, ExpressionGenerator
from .generators import (
    ArrayLiteralGenerator,
    BooleanGenerator,
    FunctionGenerator,
    IdentifierGenerator,
    NumberGenerator,
    ObjectLiteralGenerator,
    StringGenerator,
)
from .names import SymbolNameGenerator
from .partition import partition_budget
from .program import generate_node, generate_program
from .scope import Scope, ScopeManager, Symbol

__all__ = [
    "DEFAULT_CONFIGURATION",
    "GENERATOR_REGISTRY",
    "ArrayLiteralGenerator",
    "BooleanGenerator",
    "Configuration",
    "ExpressionGenerator",
    "FunctionGenerator",
    "FuzzingContext",
    "Generator",
    "IdentifierGenerator",
    "Knob",
    "NumberGenerator",
    "ObjectLiteralGenerator",
    "Scope",
    "ScopeManager",
    "StringGenerator",
    "Symbol",
    "SymbolNameGenerator",
    "generate_node",
    "generate_program",
    "normalize_types",
    "partition_budget",
    "run_generator",
    "types_match",
]
