"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode


def _type_names(types: Iterable[object]) -> tuple[str, ...]:
    """Sorted string names of a type set (stable message text)."""
    return tuple(sorted(str(t) for t in types))


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unsatisfiable(budget: int, required_types: Iterable[object]) -> Diagnostic:
        """No generator can fill the requested slot.

        Args:
            budget: Budget offered to the slot
            required_types: Types the slot accepts

        Returns:
            Diagnostic for UNSATISFIABLE
        """
        names = _type_names(required_types)
        msg = f"No generator can fill a {{{', '.join(names)}}} slot with budget {budget}"
        return Diagnostic(
            code=DiagnosticCode.UNSATISFIABLE,
            message=msg,
            hint="Increase the budget, widen the required type set, or give a "
            "matching generator a positive weight",
            generator="expression",
            budget=budget,
            required_types=names,
        )

    @staticmethod
    def budget_exhausted(generator: str, budget: int, minimum: int) -> Diagnostic:
        """Generator invoked below its minimum budget.

        Args:
            generator: Configuration name of the generator
            budget: Budget it was invoked with
            minimum: Smallest budget it accepts

        Returns:
            Diagnostic for BUDGET_EXHAUSTED
        """
        msg = (
            f"Generator '{generator}' invoked with budget {budget}, "
            f"below its minimum of {minimum}"
        )
        return Diagnostic(
            code=DiagnosticCode.BUDGET_EXHAUSTED,
            message=msg,
            hint="Callers must check is_enough() or go through dispatch",
            generator=generator,
            budget=budget,
        )

    @staticmethod
    def expression_depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum expression nesting depth exceeded.

        Args:
            max_depth: The depth limit that was exceeded

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Lower the budget or raise expression.maxDepth",
        )

    @staticmethod
    def scope_underflow() -> Diagnostic:
        """Attempt to pop the global scope.

        Returns:
            Diagnostic for SCOPE_UNDERFLOW
        """
        return Diagnostic(
            code=DiagnosticCode.SCOPE_UNDERFLOW,
            message="Cannot pop the global scope",
            hint="Every pop_scope() must match an earlier push_scope()",
        )

    @staticmethod
    def configuration_invalid(
        generator: str, knob: str, value: object, reason: str
    ) -> Diagnostic:
        """Configuration knob holds an unusable value.

        Args:
            generator: Configuration section
            knob: Knob name
            value: Offending value
            reason: What the value must satisfy

        Returns:
            Diagnostic for CONFIGURATION_INVALID
        """
        msg = f"Invalid value {value!r} for '{generator}.{knob}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIGURATION_INVALID,
            message=msg,
            generator=generator,
            knob=knob,
        )

    @staticmethod
    def configuration_missing(generator: str, knob: str, fallback: object) -> Diagnostic:
        """Knob absent from both the configuration and the defaults.

        Args:
            generator: Configuration section
            knob: Knob name
            fallback: Value used instead

        Returns:
            Warning diagnostic for CONFIGURATION_MISSING
        """
        msg = f"No value configured for '{generator}.{knob}', using {fallback!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIGURATION_MISSING,
            message=msg,
            hint=f"Add '{knob}' to the '{generator}' section",
            generator=generator,
            knob=knob,
            severity="warning",
        )

    @staticmethod
    def configuration_unreadable(source: str, reason: str) -> Diagnostic:
        """Configuration document could not be read or decoded.

        Args:
            source: Path or description of the document
            reason: Underlying error text

        Returns:
            Diagnostic for CONFIGURATION_UNREADABLE
        """
        msg = f"Cannot load configuration from {source}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIGURATION_UNREADABLE,
            message=msg,
            hint="The document must be a JSON object of objects",
        )

    @staticmethod
    def tree_malformed(token: str, reason: str) -> Diagnostic:
        """Tree node violates its structural shape.

        Args:
            token: Token of the offending node
            reason: Shape requirement that failed

        Returns:
            Diagnostic for TREE_MALFORMED
        """
        msg = f"Malformed {token} node: {reason}"
        return Diagnostic(code=DiagnosticCode.TREE_MALFORMED, message=msg)

    @staticmethod
    def print_depth_exceeded(max_depth: int) -> Diagnostic:
        """Tree nested deeper than the printer accepts.

        Args:
            max_depth: Node depth limit

        Returns:
            Diagnostic for PRINT_DEPTH_EXCEEDED
        """
        msg = f"Tree exceeds maximum printable depth ({max_depth})"
        return Diagnostic(code=DiagnosticCode.PRINT_DEPTH_EXCEEDED, message=msg)
