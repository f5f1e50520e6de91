"""Canonical formatter: expression AST → text.

Two renderings are provided:

- ``format_expression`` prints infix source text with single spaces
  around binary operators.  Every operand that is not a literal or an
  identifier is wrapped in parentheses, so the output re-parses to the
  same tree regardless of the precedences the grammar assigns:

      ``1 + (2 * 3)``, ``a = (b = c)``, ``-(x + 1)``

- ``describe`` prints constructor notation, the form the REPL shows:

      ``BinaryOp(+, Literal(1), BinaryOp(*, Literal(2), Literal(3)))``

Usage
-----
::

    from prattle.formatter import ExpressionFormatter
    from prattle.parser import parse

    formatter = ExpressionFormatter()
    canonical = formatter.format(parse("1+2*3"))
"""
from __future__ import annotations

import math
from decimal import Decimal

from prattle.ast.nodes import ATOMIC_NODES, BinaryOp, Identifier, Literal, Node, UnaryOp


class ExpressionFormatter:
    """Renders expression trees as canonical infix text."""

    def format(self, node: Node) -> str:
        """Return canonical infix text for ``node``.

        The top-level expression is never parenthesized.

        Raises
        ------
        ValueError
            If a literal is not finite (it has no source spelling).
        """
        if isinstance(node, Literal):
            return self._format_number(node.value)
        if isinstance(node, Identifier):
            return node.name
        if isinstance(node, UnaryOp):
            return f"{node.operator}{self._operand(node.operand)}"
        if isinstance(node, BinaryOp):
            return (
                f"{self._operand(node.left)} {node.operator} "
                f"{self._operand(node.right)}"
            )
        raise TypeError(f"Cannot format {type(node).__name__}")

    def describe(self, node: Node) -> str:
        """Return constructor notation for ``node``."""
        return node.describe()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _operand(self, node: Node) -> str:
        text = self.format(node)
        if isinstance(node, ATOMIC_NODES):
            return text
        return f"({text})"

    @staticmethod
    def _format_number(value: int | float) -> str:
        """Spell a number the way the lexer reads it back.

        Integers print as digits.  Floats always keep a decimal point and
        never use exponent notation, which the lexer does not accept.
        """
        if isinstance(value, int):
            return str(value)
        if not math.isfinite(value):
            raise ValueError(f"Cannot format non-finite literal {value!r}")
        text = format(Decimal(repr(value)), "f")
        if "." not in text:
            text += ".0"
        return text


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------

_FORMATTER = ExpressionFormatter()


def format_expression(node: Node) -> str:
    """Return canonical infix text for ``node``."""
    return _FORMATTER.format(node)


def describe(node: Node) -> str:
    """Return constructor notation for ``node``."""
    return _FORMATTER.describe(node)
