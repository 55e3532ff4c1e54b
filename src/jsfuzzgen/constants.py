"""Shared constants for jsfuzzgen.

Centralized defaults used across the generation and syntax packages.
Placing constants here avoids circular imports and provides a single
source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for generation and printing
- Budget: Minimum sizes of generated nodes
- Name synthesis: Alphabets and limits for identifiers, strings and numbers

Python 3.13+. Zero external dependencies.
"""

import string

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "MAX_PRINT_DEPTH",
    "FRAMES_PER_EXPRESSION_LEVEL",
    "FRAMES_PER_PRINT_LEVEL",
    # Budget
    "MIN_BUDGET",
    "FUNCTION_MIN_BUDGET",
    # Name synthesis
    "IDENTIFIER_PREFIX",
    "PROPERTY_NAME_FIRST_CHARS",
    "PROPERTY_NAME_REST_CHARS",
    "MAX_PROPERTY_NAME_TAIL",
    "STRING_CHARS",
    "DEFAULT_STRING_MAX_LENGTH",
    "SMALL_INT_MAX",
    "LARGE_INT_MAX",
    "FLOAT_MAX",
    "FLOAT_DECIMALS",
    # Externs
    "DEFAULT_EXTERNS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum expression nesting during generation.
# Budget alone bounds tree size but not tree depth: a budget of 1000 can
# nest object literals ~500 levels deep. At this depth dispatch only picks
# leaf generators. Clamped against sys.getrecursionlimit() at runtime.
MAX_DEPTH: int = 50

# Maximum expression nesting accepted by the printer. Also the upper bound
# of the expression.maxDepth knob: a tree nests at most maxDepth + 1
# expressions, so every generated tree stays printable.
MAX_PRINT_DEPTH: int = 1000

# Python frames one nested expression costs during generation:
# dispatch, run_generator, composite generate, distribute, run_generator.
# One frame of margin on top.
FRAMES_PER_EXPRESSION_LEVEL: int = 6

# Python frames one nested expression costs while validating a tree
# (FUNCTION -> BLOCK -> RETURN -> expression). Printing alone needs two.
FRAMES_PER_PRINT_LEVEL: int = 3

# ============================================================================
# BUDGET
# ============================================================================

# Smallest budget any generator accepts: one node.
MIN_BUDGET: int = 1

# A function expression needs its own node plus at least one body node.
FUNCTION_MIN_BUDGET: int = 2

# ============================================================================
# NAME SYNTHESIS
# ============================================================================

# Fresh identifiers are minted as IDENTIFIER_PREFIX + counter.
IDENTIFIER_PREFIX: str = "x_"

# Unquoted property names: [A-Za-z_$][A-Za-z0-9_$]*
PROPERTY_NAME_FIRST_CHARS: str = string.ascii_letters + "_$"
PROPERTY_NAME_REST_CHARS: str = PROPERTY_NAME_FIRST_CHARS + string.digits
MAX_PROPERTY_NAME_TAIL: int = 7

# String literal content pool. Includes characters the printer must escape.
STRING_CHARS: str = (
    string.ascii_letters
    + string.digits
    + " .,!?-_:;()[]{}<>+*/=&|^%~#@"
    + "\n\t\"'`\\"
    + "\u00e9\u00fc\u00f1"  # Latin extended: accents
    + "\u4e16\u754c"  # Chinese: world
    + "\u2028"  # Line separator: only legal in strings when escaped
)
DEFAULT_STRING_MAX_LENGTH: int = 10

# Numeric literal ranges. Values are always non-negative so that the
# stringified form is usable as an object key.
SMALL_INT_MAX: int = 10
LARGE_INT_MAX: int = 2**31 - 1
FLOAT_MAX: int = 1000
FLOAT_DECIMALS: int = 3

# ============================================================================
# EXTERNS
# ============================================================================

# Predeclared globals a driver may register in the global scope.
DEFAULT_EXTERNS: tuple[str, ...] = (
    "Array",
    "Boolean",
    "JSON",
    "Math",
    "Number",
    "Object",
    "String",
    "undefined",
)
