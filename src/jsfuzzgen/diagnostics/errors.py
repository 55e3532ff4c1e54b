"""jsfuzzgen exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class FuzzError(Exception):
    """Base exception for all jsfuzzgen errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FuzzError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GenerationError(FuzzError):
    """A generation run could not produce a tree.

    Raised errors abort the current top-level request; no partial tree is
    returned.
    """


class UnsatisfiableError(GenerationError):
    """No registered generator matches the required types and budget.

    Identifiers fill any slot, so this needs their weight set to 0.

    Example:
        config = Configuration.from_mapping({"identifier": {"weight": 0}})
        generate_program(seed, 1, {Type.FUNCTION}, config)  # functions need budget 2
    """


class BudgetExhaustedError(GenerationError):
    """A generator was invoked below its declared minimum budget.

    Indicates a bug in the caller or partitioner, never a normal runtime
    condition: dispatch filters generators by is_enough() first.
    """


class ScopeError(FuzzError):
    """Scope stack misuse (popping the global scope)."""


class ConfigurationError(FuzzError, ValueError):
    """Configuration value or file is invalid."""


class TreeValidationError(FuzzError, ValueError):
    """Tree structure would print as invalid JavaScript."""


class PrintDepthError(FuzzError):
    """Tree is nested deeper than the printer accepts."""
