"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Generation errors (dispatch, budget, nesting, scopes)
        2000-2999: Configuration errors and warnings
        3000-3999: Printing errors (malformed trees)
    """

    # Generation errors (1000-1999)
    UNSATISFIABLE = 1001
    BUDGET_EXHAUSTED = 1002
    MAX_DEPTH_EXCEEDED = 1003
    SCOPE_UNDERFLOW = 1004

    # Configuration (2000-2999)
    CONFIGURATION_INVALID = 2001
    CONFIGURATION_MISSING = 2002  # Warning: falls back to a safe default
    CONFIGURATION_UNREADABLE = 2003

    # Printing (3000-3999)
    TREE_MALFORMED = 3001
    PRINT_DEPTH_EXCEEDED = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        generator: Configuration name of the generator involved
        budget: Budget at the point of failure
        required_types: Type set requested by the failing slot
        knob: Configuration knob involved (configuration diagnostics)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    generator: str | None = None
    budget: int | None = None
    required_types: tuple[str, ...] | None = None
    knob: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNSATISFIABLE]: No generator can fill a {function} slot with budget 1
              = generator: expression
              = budget: 1
              = types: function
              = help: Increase the budget or widen the required type set

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
