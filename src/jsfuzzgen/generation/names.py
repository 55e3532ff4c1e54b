"""Synthesis of identifier names, string literals and numbers.

All values are drawn from the run's RandomSource, so a fixed seed yields the
same sequence of names.

Python 3.13+.
"""

from __future__ import annotations

from jsfuzzgen.constants import (
    DEFAULT_STRING_MAX_LENGTH,
    FLOAT_DECIMALS,
    FLOAT_MAX,
    LARGE_INT_MAX,
    MAX_PROPERTY_NAME_TAIL,
    PROPERTY_NAME_FIRST_CHARS,
    PROPERTY_NAME_REST_CHARS,
    SMALL_INT_MAX,
    STRING_CHARS,
)
from jsfuzzgen.core.random_source import RandomSource

from .config import Configuration

__all__ = ["SymbolNameGenerator"]


class SymbolNameGenerator:
    """Mints names and literal values for generators.

    Attributes:
        counter: Next value get_next_number() returns
    """

    __slots__ = ("_config", "_random", "counter")

    def __init__(self, random: RandomSource, config: Configuration) -> None:
        self._random = random
        self._config = config
        self.counter = 0

    def get_next_number(self) -> int:
        """Return the counter and advance it; never repeats within a run."""
        number = self.counter
        self.counter += 1
        return number

    def get_string(self) -> str:
        """Random string literal content; not necessarily an identifier.

        Length is uniform in [0, string.maxLength].
        """
        max_length = self._config.get_int("string", "maxLength", DEFAULT_STRING_MAX_LENGTH)
        length = self._random.randint(0, max_length)
        return "".join(self._random.choice(STRING_CHARS) for _ in range(length))

    def get_property_name(self) -> str:
        """Random name usable as an unquoted object property."""
        tail = self._random.randint(0, MAX_PROPERTY_NAME_TAIL)
        first = self._random.choice(PROPERTY_NAME_FIRST_CHARS)
        rest = "".join(self._random.choice(PROPERTY_NAME_REST_CHARS) for _ in range(tail))
        return first + rest

    def get_random_number(self) -> int | float:
        """Random non-negative number.

        50% small int in [0, 10], 30% int in [0, 2**31 - 1], 20% float with
        at most three decimals in [0, 1000].
        """
        roll = self._random.random()
        if roll < 0.5:
            return self._random.randint(0, SMALL_INT_MAX)
        if roll < 0.8:
            return self._random.randint(0, LARGE_INT_MAX)
        return round(self._random.uniform(0, FLOAT_MAX), FLOAT_DECIMALS)
