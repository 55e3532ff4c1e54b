"""Syntax tree model and printing.

Separate from generation so that drivers and tooling can build, inspect and
print trees without pulling in the generators.

Python 3.13+.
"""

from .ast import STRUCTURAL_TOKENS, Node, Token, budget_units, value_type
from .printer import CodePrinter, format_number, print_code

__all__ = [
    "STRUCTURAL_TOKENS",
    "CodePrinter",
    "Node",
    "Token",
    "budget_units",
    "format_number",
    "print_code",
    "value_type",
]
