"""prattle: an extensible Pratt (top-down operator-precedence) expression parser.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import prattle

    # Parse an expression into an AST
    tree = prattle.parse("a = b = 1 + 2 * 3")

    # Constructor notation
    prattle.describe(tree)
    # 'BinaryOp(=, Identifier(a), BinaryOp(=, Identifier(b), ...))'

    # Canonical infix text that re-parses to the same tree
    prattle.format(tree)
    # 'a = (b = (1 + (2 * 3)))'

    # Evaluate in a flat namespace
    env = prattle.Environment()
    prattle.evaluate(tree, env)
    # 7

    prattle.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from prattle.evaluator.evaluator import Environment

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from prattle.ast.nodes import Node
    from prattle.evaluator.evaluator import Number
    from prattle.grammar.tokens import Token
    from prattle.parser.parser import ParserConfig
    from prattle.parser.registry import ParseletRegistry


def tokenize(source: str) -> list["Token"]:
    """Split an expression string into tokens.

    Raises
    ------
    prattle.lexer.LexError
        If the source contains an unrecognized token.
    """
    from prattle.lexer.lexer import tokenize as _tokenize

    return _tokenize(source)


def parse(
    source: str,
    registry: "ParseletRegistry | None" = None,
    config: "ParserConfig | None" = None,
) -> "Node":
    """Parse an expression string into an AST.

    Parameters
    ----------
    source:
        Expression text.
    registry:
        Grammar to parse with; the default grammar when omitted.
    config:
        Parse options such as the nesting limit.

    Returns
    -------
    Node
        The root of the expression tree.

    Raises
    ------
    prattle.lexer.LexError
        If the source contains an unrecognized token.
    prattle.parser.ParseError
        If the tokens do not form exactly one expression.
    """
    from prattle.parser.parser import parse as _parse

    return _parse(source, registry=registry, config=config)


def format(node: "Node") -> str:  # noqa: A001
    """Render ``node`` as canonical infix text that re-parses to the same tree."""
    from prattle.formatter.formatter import format_expression

    return format_expression(node)


def describe(node: "Node") -> str:
    """Render ``node`` in constructor notation, e.g. ``BinaryOp(+, Literal(1), Literal(2))``."""
    from prattle.formatter.formatter import describe as _describe

    return _describe(node)


def evaluate(node: "Node", environment: Environment | None = None) -> "Number":
    """Evaluate ``node``, reading and assigning variables in ``environment``.

    Raises
    ------
    prattle.evaluator.EvaluationError
        On undefined names, invalid assignment targets, or division by zero.
    """
    from prattle.evaluator.evaluator import evaluate as _evaluate

    return _evaluate(node, environment)


__all__ = [
    "__version__",
    "tokenize",
    "parse",
    "format",
    "describe",
    "evaluate",
    "Environment",
]
