"""Print syntax trees as JavaScript source.

Converts generated trees to source text for the parser or compiler under
test. Useful for:
- Writing fuzz corpora
- Reproducing a failing run from its seed
- Property-based testing of generation invariants

Python 3.13+.
"""

from __future__ import annotations

import json
import math
import re
from contextlib import nullcontext

from jsfuzzgen.constants import FRAMES_PER_PRINT_LEVEL, MAX_PRINT_DEPTH
from jsfuzzgen.core.depth_guard import DepthGuard, DepthLimitExceededError, safe_depth
from jsfuzzgen.diagnostics import PrintDepthError, TreeValidationError
from jsfuzzgen.diagnostics.templates import ErrorTemplate

from .ast import Node, Token

__all__ = ["CodePrinter", "format_number", "print_code"]

_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

# Decimal literal accepted as a bare object key: 0, 12, 3.25
_NUMERIC_KEY = re.compile(r"(?:0|[1-9][0-9]*)(?:\.[0-9]+)?")

_EXPRESSION_TOKENS: frozenset[Token] = frozenset(
    {
        Token.NAME,
        Token.STRING,
        Token.NUMBER,
        Token.TRUE,
        Token.FALSE,
        Token.OBJECTLIT,
        Token.ARRAYLIT,
        Token.FUNCTION,
    }
)


def format_number(value: int | float) -> str:
    """Render a number as a JavaScript numeric literal.

    Integral floats drop the trailing ``.0`` so that the same value always
    prints the same way, whether drawn as int or float.

    Raises:
        ValueError: If value is negative, NaN or infinite (no literal form)
    """
    if isinstance(value, bool):
        msg = f"Booleans are not numbers: {value!r}"
        raise ValueError(msg)
    if isinstance(value, float):
        if not math.isfinite(value):
            msg = f"Non-finite number has no literal form: {value!r}"
            raise ValueError(msg)
        if value.is_integer():
            value = int(value)
    if value < 0:
        msg = f"Negative number has no literal form: {value!r}"
        raise ValueError(msg)
    return repr(value)


def _fail(node: Node, reason: str) -> TreeValidationError:
    return TreeValidationError(ErrorTemplate.tree_malformed(str(node.token), reason))


def _validate_node(node: Node) -> None:
    """Check one node's local shape (children are checked by the caller)."""
    match node.token:
        case Token.NAME:
            if not isinstance(node.value, str) or not _IDENTIFIER.fullmatch(node.value):
                raise _fail(node, f"{node.value!r} is not an identifier")
            if node.children:
                raise _fail(node, "identifiers have no children")
        case Token.STRING:
            if not isinstance(node.value, str):
                raise _fail(node, "value must be a string")
            if node.children:
                raise _fail(node, "string literals have no children")
        case Token.NUMBER:
            if not isinstance(node.value, int | float) or isinstance(node.value, bool):
                raise _fail(node, "value must be a number")
            try:
                format_number(node.value)
            except ValueError as e:
                raise _fail(node, str(e)) from e
        case Token.TRUE | Token.FALSE:
            if node.children:
                raise _fail(node, "boolean literals have no children")
        case Token.OBJECTLIT:
            if any(child.token is not Token.STRING_KEY for child in node.children):
                raise _fail(node, "children must be STRING_KEY nodes")
        case Token.STRING_KEY:
            if not isinstance(node.value, str):
                raise _fail(node, "key must be a string")
            if len(node.children) != 1 or node.children[0].token not in _EXPRESSION_TOKENS:
                raise _fail(node, "requires exactly one expression child")
        case Token.ARRAYLIT:
            if any(child.token not in _EXPRESSION_TOKENS for child in node.children):
                raise _fail(node, "elements must be expressions")
        case Token.FUNCTION:
            tokens = [child.token for child in node.children]
            if tokens != [Token.PARAM_LIST, Token.BLOCK]:
                raise _fail(node, "children must be PARAM_LIST then BLOCK")
        case Token.PARAM_LIST:
            if any(child.token is not Token.NAME for child in node.children):
                raise _fail(node, "parameters must be NAME nodes")
        case Token.BLOCK:
            if any(child.token is not Token.RETURN for child in node.children):
                raise _fail(node, "statements must be RETURN nodes")
        case Token.RETURN:
            if len(node.children) != 1 or node.children[0].token not in _EXPRESSION_TOKENS:
                raise _fail(node, "requires exactly one expression child")


class CodePrinter:
    """Converts a tree to JavaScript source.

    No mutable instance state: all printing state is local to the print()
    call, so one printer can be shared.

    Depth counts nested expressions, not nodes, the same way generation
    counts expression.maxDepth. The default limit is MAX_PRINT_DEPTH, lowered
    to what the recursion limit allows.

    Usage:
        >>> printer = CodePrinter()
        >>> printer.print(Node(Token.NAME, "x_0"))
        'x_0'
    """

    def __init__(self, max_depth: int | None = None) -> None:
        if max_depth is None:
            max_depth = min(MAX_PRINT_DEPTH, safe_depth(frames_per_level=FRAMES_PER_PRINT_LEVEL))
        self._max_depth = max_depth

    def print(self, node: Node, *, statement: bool = False, validate: bool = False) -> str:
        """Print a tree.

        Args:
            node: Root expression node
            statement: Emit ``(<expr>);`` plus newline, suitable as a whole
                program file. Parentheses keep object literals from parsing
                as blocks and functions from parsing as declarations.
            validate: Check every node's shape before printing

        Returns:
            JavaScript source

        Raises:
            TreeValidationError: If validate=True and the tree is malformed
            PrintDepthError: If the tree is nested deeper than max_depth
        """
        guard = DepthGuard(max_depth=self._max_depth, frames_per_level=FRAMES_PER_PRINT_LEVEL)
        try:
            if validate:
                self._validate(node, guard)
            output: list[str] = []
            self._print_expression(node, output, guard)
        except DepthLimitExceededError as e:
            raise PrintDepthError(ErrorTemplate.print_depth_exceeded(guard.max_depth)) from e

        source = "".join(output)
        if statement:
            return f"({source});\n"
        return source

    def _validate(self, node: Node, guard: DepthGuard) -> None:
        # Only expressions nest; keys, blocks and returns ride along.
        with guard if node.token in _EXPRESSION_TOKENS else nullcontext():
            _validate_node(node)
            for child in node.children:
                self._validate(child, guard)

    def _print_expression(self, node: Node, output: list[str], guard: DepthGuard) -> None:
        with guard:
            match node.token:
                case Token.NAME:
                    output.append(str(node.value))
                case Token.STRING:
                    # ASCII-only JSON string: also a valid JS string literal
                    output.append(json.dumps(node.value, ensure_ascii=True))
                case Token.NUMBER:
                    output.append(format_number(node.value))  # type: ignore[arg-type]
                case Token.TRUE:
                    output.append("true")
                case Token.FALSE:
                    output.append("false")
                case Token.OBJECTLIT:
                    self._print_object(node, output, guard)
                case Token.ARRAYLIT:
                    output.append("[")
                    for i, element in enumerate(node.children):
                        if i > 0:
                            output.append(", ")
                        self._print_expression(element, output, guard)
                    output.append("]")
                case Token.FUNCTION:
                    self._print_function(node, output, guard)
                case _:
                    raise _fail(node, "not an expression")

    def _print_object(self, node: Node, output: list[str], guard: DepthGuard) -> None:
        if not node.children:
            output.append("{}")
            return
        output.append("{")
        for i, key in enumerate(node.children):
            if i > 0:
                output.append(", ")
            output.append(_print_key(str(key.value)))
            output.append(": ")
            if key.first_child is None:
                raise _fail(key, "property has no value")
            self._print_expression(key.first_child, output, guard)
        output.append("}")

    def _print_function(self, node: Node, output: list[str], guard: DepthGuard) -> None:
        params, body = node.children
        output.append("function (")
        output.append(", ".join(str(param.value) for param in params.children))
        output.append(") {")
        for statement in body.children:
            output.append(" return ")
            # RETURN holds exactly one expression
            self._print_expression(statement.children[0], output, guard)
            output.append(";")
        output.append(" }")


def _print_key(key: str) -> str:
    """Print a property key bare when JavaScript allows it, quoted otherwise."""
    if _IDENTIFIER.fullmatch(key) or _NUMERIC_KEY.fullmatch(key):
        return key
    return json.dumps(key, ensure_ascii=True)


def print_code(node: Node, *, statement: bool = False, validate: bool = False) -> str:
    """Print a tree as JavaScript source.

    Convenience function for CodePrinter.print().

    Example:
        >>> from jsfuzzgen import generate_program, print_code
        >>> tree = generate_program(42, 6, {Type.OBJECT})
        >>> source = print_code(tree, statement=True)
    """
    return CodePrinter().print(node, statement=statement, validate=validate)
