"""Generator configuration.

Maps a generator's configuration name to its tunable knobs. Generators read
knobs through Configuration so that every knob has one documented default in
DEFAULT_CONFIGURATION.

Document format (JSON)::

    {
        "identifier": {"shadow": 0.25},
        "object": {"maxLength": 3, "weight": 2.0},
        "function": {"weight": 0}
    }

Sections and knobs absent from the document keep their defaults. Unknown
sections and knobs are kept as-is.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TypeAlias

from jsfuzzgen.constants import DEFAULT_STRING_MAX_LENGTH, MAX_DEPTH, MAX_PRINT_DEPTH
from jsfuzzgen.diagnostics import ConfigurationError
from jsfuzzgen.diagnostics.templates import ErrorTemplate

__all__ = ["DEFAULT_CONFIGURATION", "Configuration", "Knob"]

logger = logging.getLogger(__name__)

Knob: TypeAlias = int | float | bool

DEFAULT_CONFIGURATION: Mapping[str, Mapping[str, Knob]] = MappingProxyType(
    {
        "expression": MappingProxyType({"maxDepth": MAX_DEPTH}),
        "identifier": MappingProxyType({"weight": 1.0, "shadow": 0.1}),
        "string": MappingProxyType({"weight": 1.0, "maxLength": DEFAULT_STRING_MAX_LENGTH}),
        "number": MappingProxyType({"weight": 1.0}),
        "boolean": MappingProxyType({"weight": 1.0}),
        "object": MappingProxyType({"weight": 1.0, "maxLength": 5}),
        "array": MappingProxyType({"weight": 1.0, "maxLength": 5}),
        "function": MappingProxyType({"weight": 0.5, "maxParams": 3}),
    }
)

_PROBABILITY_KNOBS = frozenset({"shadow"})
_NON_NEGATIVE_KNOBS = frozenset({"weight"})
_COUNT_KNOBS = frozenset({"maxLength", "maxParams", "maxDepth"})


def _validate_knob(generator: str, knob: str, value: object) -> Knob:
    """Check a knob value and return it typed.

    Raises:
        ConfigurationError: If the value is not usable for the knob
    """

    def invalid(reason: str) -> ConfigurationError:
        return ConfigurationError(
            ErrorTemplate.configuration_invalid(generator, knob, value, reason)
        )

    if not isinstance(value, int | float):
        raise invalid("must be a number or boolean")
    if isinstance(value, float) and math.isnan(value):
        raise invalid("must not be NaN")

    is_bool = isinstance(value, bool)
    if knob in _PROBABILITY_KNOBS and (is_bool or not 0.0 <= value <= 1.0):
        raise invalid("must be a probability in [0, 1]")
    if knob in _NON_NEGATIVE_KNOBS and (is_bool or value < 0 or math.isinf(value)):
        raise invalid("must be a finite non-negative number")
    if knob in _COUNT_KNOBS and (is_bool or not isinstance(value, int) or value < 0):
        raise invalid("must be a non-negative integer")
    if knob == "maxDepth" and generator == "expression" and value >= MAX_PRINT_DEPTH:
        raise invalid(f"must be below {MAX_PRINT_DEPTH}")
    return value


@dataclass(frozen=True, slots=True)
class Configuration:
    """Immutable generator configuration.

    ``Configuration()`` holds the documented defaults only. Build others with
    from_mapping(), from_json() or with_overrides().

    Attributes:
        sections: Configured knobs per generator name (defaults excluded)

    Example:
        >>> config = Configuration.from_mapping({"identifier": {"shadow": 1.0}})
        >>> config.get_float("identifier", "shadow")
        1.0
        >>> config.get_int("object", "maxLength")
        5
    """

    sections: Mapping[str, Mapping[str, Knob]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate every knob and freeze the sections."""
        frozen: dict[str, Mapping[str, Knob]] = {}
        for generator, knobs in self.sections.items():
            frozen[generator] = MappingProxyType(
                {knob: _validate_knob(generator, knob, v) for knob, v in knobs.items()}
            )
        object.__setattr__(self, "sections", MappingProxyType(frozen))

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Configuration:
        """Build a configuration from a generator -> {knob: value} mapping.

        Raises:
            ConfigurationError: If the shape or any value is invalid
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                ErrorTemplate.configuration_unreadable(
                    "mapping", f"expected an object, got {type(data).__name__}"
                )
            )
        sections: dict[str, Mapping[str, Knob]] = {}
        for generator, knobs in data.items():
            if not isinstance(generator, str) or not isinstance(knobs, Mapping):
                raise ConfigurationError(
                    ErrorTemplate.configuration_unreadable(
                        "mapping", f"section {generator!r} must map knob names to values"
                    )
                )
            sections[generator] = dict(knobs)
        return cls(sections)

    @classmethod
    def from_json(cls, path: str | Path) -> Configuration:
        """Load a configuration document from a JSON file.

        Raises:
            ConfigurationError: If the file cannot be read or decoded, or
                holds invalid values
        """
        source = Path(path)
        try:
            data = json.loads(source.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                ErrorTemplate.configuration_unreadable(str(source), str(e))
            ) from e
        logger.debug("Loaded configuration from %s", source)
        return cls.from_mapping(data)

    def with_overrides(self, generator: str, **knobs: Knob) -> Configuration:
        """Copy of this configuration with knobs of one section replaced."""
        sections = {name: dict(values) for name, values in self.sections.items()}
        sections.setdefault(generator, {}).update(knobs)
        return Configuration(sections)

    def lookup(self, generator: str, knob: str) -> Knob | None:
        """Configured value, else documented default, else None."""
        configured = self.sections.get(generator, {})
        if knob in configured:
            return configured[knob]
        return DEFAULT_CONFIGURATION.get(generator, {}).get(knob)

    def get(
        self,
        generator: str,
        knob: str,
        fallback: Knob,
        *,
        warned: set[tuple[str, str]] | None = None,
    ) -> Knob:
        """Knob value, or ``fallback`` with a warning if undefined.

        Args:
            generator: Configuration section name
            knob: Knob name within the section
            fallback: Value returned when the knob is undefined
            warned: Caller-owned set of knobs already reported; each knob
                warns once per set. None warns on every miss.
        """
        value = self.lookup(generator, knob)
        if value is None:
            if warned is None or (generator, knob) not in warned:
                if warned is not None:
                    warned.add((generator, knob))
                diagnostic = ErrorTemplate.configuration_missing(generator, knob, fallback)
                logger.warning("%s", diagnostic.format_error())
            return fallback
        return value

    def get_float(
        self,
        generator: str,
        knob: str,
        fallback: float = 0.0,
        *,
        warned: set[tuple[str, str]] | None = None,
    ) -> float:
        """Knob value as float."""
        return float(self.get(generator, knob, fallback, warned=warned))

    def get_int(
        self,
        generator: str,
        knob: str,
        fallback: int = 0,
        *,
        warned: set[tuple[str, str]] | None = None,
    ) -> int:
        """Knob value as int."""
        return int(self.get(generator, knob, fallback, warned=warned))

    def get_bool(
        self,
        generator: str,
        knob: str,
        fallback: bool = False,
        *,
        warned: set[tuple[str, str]] | None = None,
    ) -> bool:
        """Knob value as bool."""
        return bool(self.get(generator, knob, fallback, warned=warned))

    def section(self, generator: str) -> dict[str, Knob]:
        """Effective knobs of one generator (defaults overlaid by configuration)."""
        merged = dict(DEFAULT_CONFIGURATION.get(generator, {}))
        merged.update(self.sections.get(generator, {}))
        return merged

    def to_dict(self) -> dict[str, dict[str, Knob]]:
        """Effective configuration of every known section."""
        extra = [name for name in self.sections if name not in DEFAULT_CONFIGURATION]
        names = [*DEFAULT_CONFIGURATION, *extra]
        return {name: self.section(name) for name in names}
