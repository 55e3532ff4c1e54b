"""jsfuzzgen - budget-driven random JavaScript expression generator.

Produces syntactically valid, randomly shaped JavaScript expression trees
for compiler fuzzing. Every tree is reproducible from its seed, and its size
is bounded by a budget of tree nodes.

Public API:
    generate_program - Generate one expression tree from a seed and budget
    generate_node - Dispatch one slot on an existing FuzzingContext
    print_code - Render a tree as JavaScript source
    Configuration - Per-generator knobs (weights, lengths, shadowing)
    Type - Value categories a slot may require

Exceptions:
    FuzzError - Base exception class
    GenerationError - Run could not produce a tree
    UnsatisfiableError - No generator fits the slot
    BudgetExhaustedError - Generator invoked below its minimum budget
    ConfigurationError - Invalid configuration value or file

Submodules:
    jsfuzzgen.generation - Generators, dispatch, scopes and configuration
    jsfuzzgen.syntax - Tree model and printer
    jsfuzzgen.diagnostics - Error types and structured diagnostics
    jsfuzzgen.cli - Command-line driver
"""

from .diagnostics import (
    BudgetExhaustedError,
    ConfigurationError,
    FuzzError,
    GenerationError,
    UnsatisfiableError,
)
from .enums import Type
from .generation import Configuration, FuzzingContext, generate_node, generate_program
from .syntax import Node, print_code

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jsfuzzgen")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BudgetExhaustedError",
    "Configuration",
    "ConfigurationError",
    "FuzzError",
    "FuzzingContext",
    "GenerationError",
    "Node",
    "Type",
    "UnsatisfiableError",
    "__version__",
    "generate_node",
    "generate_program",
    "print_code",
]
