"""Enumerations for jsfuzzgen type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import Flag, StrEnum, auto


class Type(StrEnum):
    """Value category a generation slot may require.

    StrEnum provides automatic string conversion: str(Type.STRING) == "string"
    """

    NUMBER = "number"
    """Numeric literal: 42, 0.5"""

    BOOLEAN = "boolean"
    """Boolean literal: true, false"""

    STRING = "string"
    """String literal: "abc\\n" """

    OBJECT = "object"
    """Object literal: {a: 1, "2": x_0}"""

    ARRAY = "array"
    """Array literal: [1, "a"]"""

    FUNCTION = "function"
    """Function expression: function (x_0) { return x_0; }"""

    ANY = "any"
    """Wildcard: a required set containing ANY accepts every generator."""


# Universal set, the default for Generator.supported_types.
ALL_TYPES: frozenset[Type] = frozenset(Type)


class ScopeKind(StrEnum):
    """Kind of lexical scope on the scope stack."""

    GLOBAL = "global"
    """Bottom of the stack; holds externs and top-level bindings."""

    FUNCTION = "function"
    """Opened by a function expression for its parameters."""


class SymbolOrigin(StrEnum):
    """Where a symbol was declared."""

    LOCAL = "local"
    """Declared by generated code."""

    EXTERN = "extern"
    """Predeclared by the environment (e.g. Math, JSON)."""


class SymbolFilter(Flag):
    """Exclusion mask for ScopeManager.get_random_symbol().

    Flags combine: SymbolFilter.EXCLUDE_EXTERNS | SymbolFilter.EXCLUDE_LOCALS
    """

    NONE = 0
    EXCLUDE_EXTERNS = auto()
    """Skip symbols with SymbolOrigin.EXTERN."""

    EXCLUDE_LOCALS = auto()
    """Skip symbols declared in the innermost scope."""


class GeneratorKind(StrEnum):
    """Closed set of registered generator variants.

    Values double as configuration section names.
    """

    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    FUNCTION = "function"


__all__ = [
    "ALL_TYPES",
    "GeneratorKind",
    "ScopeKind",
    "SymbolFilter",
    "SymbolOrigin",
    "Type",
]
