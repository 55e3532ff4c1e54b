"""Lexical scopes and symbols for identifier generation.

The ScopeManager models the bindings a generated program would have, so
identifier generation can mint fresh names or deliberately reuse (shadow)
names from enclosing scopes.

Scope discipline:
    Scopes nest strictly with the generator call stack. Use the scope()
    context manager so that the pop runs on every exit path:

        with context.scopes.scope(ScopeKind.FUNCTION):
            params = [...]
            body = ...

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from jsfuzzgen.core.random_source import RandomSource
from jsfuzzgen.diagnostics import ScopeError
from jsfuzzgen.diagnostics.templates import ErrorTemplate
from jsfuzzgen.enums import ScopeKind, SymbolFilter, SymbolOrigin

__all__ = ["Scope", "ScopeManager", "Symbol"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Symbol:
    """A named binding.

    Attributes:
        name: Identifier text
        origin: LOCAL for bindings made by generated code, EXTERN for
            environment globals
    """

    name: str
    origin: SymbolOrigin = SymbolOrigin.LOCAL


@dataclass(slots=True)
class Scope:
    """One lexical scope: a kind plus its symbols in declaration order."""

    kind: ScopeKind
    symbols: list[Symbol] = field(default_factory=list)


class ScopeManager:
    """Stack of lexical scopes, bottom is the global scope.

    Thread Safety:
        Not thread-safe. Owned by exactly one FuzzingContext.
    """

    __slots__ = ("_random", "_scopes")

    def __init__(self, random: RandomSource) -> None:
        """Initialize with a single, empty global scope.

        Args:
            random: The run's shared random source
        """
        self._random = random
        self._scopes: list[Scope] = [Scope(ScopeKind.GLOBAL)]

    @property
    def depth(self) -> int:
        """Number of scopes on the stack (1 when only the global scope is open)."""
        return len(self._scopes)

    @property
    def current(self) -> Scope:
        """Innermost scope."""
        return self._scopes[-1]

    @property
    def symbol_count(self) -> int:
        """Number of visible symbols, shadowed duplicates included."""
        return sum(len(scope.symbols) for scope in self._scopes)

    def push_scope(self, kind: ScopeKind = ScopeKind.FUNCTION) -> Scope:
        """Open a nested scope and return it."""
        scope = Scope(kind)
        self._scopes.append(scope)
        logger.debug("Pushed %s scope (depth %d)", kind, len(self._scopes))
        return scope

    def pop_scope(self) -> Scope:
        """Close the innermost scope and return it.

        Raises:
            ScopeError: If only the global scope is open
        """
        if len(self._scopes) == 1:
            raise ScopeError(ErrorTemplate.scope_underflow())
        scope = self._scopes.pop()
        logger.debug("Popped %s scope (depth %d)", scope.kind, len(self._scopes))
        return scope

    @contextmanager
    def scope(self, kind: ScopeKind = ScopeKind.FUNCTION) -> Iterator[Scope]:
        """Context manager bracketing a nested scope; pops on every exit path."""
        opened = self.push_scope(kind)
        try:
            yield opened
        finally:
            self.pop_scope()

    def add_symbol(self, symbol: Symbol) -> None:
        """Register a symbol in the innermost scope.

        Duplicate names are allowed: a repeated name shadows the outer binding.
        """
        self.current.symbols.append(symbol)

    def declare_externs(self, names: Iterable[str]) -> None:
        """Register environment globals in the global scope."""
        self._scopes[0].symbols.extend(Symbol(name, SymbolOrigin.EXTERN) for name in names)

    def visible_symbols(self) -> list[Symbol]:
        """All visible symbols, outermost scope first."""
        return [symbol for scope in self._scopes for symbol in scope.symbols]

    def has_non_locals(self) -> bool:
        """True if any scope other than the innermost holds a symbol."""
        return any(scope.symbols for scope in self._scopes[:-1])

    def get_random_symbol(self, exclude: SymbolFilter = SymbolFilter.NONE) -> Symbol | None:
        """Pick a visible symbol uniformly, skipping those the filter excludes.

        Args:
            exclude: EXCLUDE_EXTERNS drops extern symbols, EXCLUDE_LOCALS drops
                symbols of the innermost scope

        Returns:
            A symbol, or None when no symbol passes the filter (no entropy
            is consumed in that case)
        """
        scopes = self._scopes
        if SymbolFilter.EXCLUDE_LOCALS in exclude:
            scopes = scopes[:-1]
        candidates = [
            symbol
            for scope in scopes
            for symbol in scope.symbols
            if not (
                SymbolFilter.EXCLUDE_EXTERNS in exclude
                and symbol.origin is SymbolOrigin.EXTERN
            )
        ]
        if not candidates:
            return None
        return candidates[self._random.next_int(len(candidates))]
