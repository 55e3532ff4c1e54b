"""Diagnostic system for jsfuzzgen errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    BudgetExhaustedError,
    ConfigurationError,
    FuzzError,
    GenerationError,
    PrintDepthError,
    ScopeError,
    TreeValidationError,
    UnsatisfiableError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BudgetExhaustedError",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FuzzError",
    "GenerationError",
    "OutputFormat",
    "PrintDepthError",
    "ScopeError",
    "TreeValidationError",
    "UnsatisfiableError",
]
