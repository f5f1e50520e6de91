"""Parselets: the handlers the parser engine dispatches to.

A *prefix* parselet is called with the token that starts an expression
and returns the node that token begins.  An *infix* parselet is called
with the already-parsed left operand and the operator token, and returns
the combined node.  Any callable with the right shape works as a
parselet; the classes here are the ones the built-in grammars register.

Binary parselets look their own binding precedence up in the parser's
registry instead of storing a copy, so the number registered alongside
the handler is the only one that matters.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol

from prattle.ast.nodes import BinaryOp, Identifier, Literal, Node, UnaryOp
from prattle.grammar.tokens import Token, TokenKind
from prattle.parser.errors import ParseError, ParseErrorKind

if TYPE_CHECKING:
    from prattle.parser.parser import Parser


class PrefixParselet(Protocol):
    """Callable that parses an expression beginning with ``token``."""

    def __call__(self, parser: "Parser", token: Token) -> Node: ...


class InfixParselet(Protocol):
    """Callable that extends ``left`` with the operator ``token``."""

    def __call__(self, parser: "Parser", left: Node, token: Token) -> Node: ...


# ---------------------------------------------------------------------------
# Prefix parselets
# ---------------------------------------------------------------------------


class LiteralParselet:
    """``NUMBER`` -> ``Literal``; whole numbers become ``int``."""

    def __call__(self, parser: "Parser", token: Token) -> Node:
        text = token.text
        try:
            value: int | float = float(text) if "." in text else int(text)
        except ValueError:
            # int() refuses strings longer than sys.get_int_max_str_digits()
            raise self._out_of_range(token, "has too many digits") from None
        if not math.isfinite(value):
            raise self._out_of_range(token, "overflows a float")
        return Literal(value=value)

    @staticmethod
    def _out_of_range(token: Token, reason: str) -> ParseError:
        return ParseError(
            kind=ParseErrorKind.LITERAL_OUT_OF_RANGE,
            message=f"Number literal of {len(token.text)} characters {reason}",
            offset=token.offset,
            found=token,
        )

    def __repr__(self) -> str:
        return "LiteralParselet()"


class IdentifierParselet:
    """``IDENTIFIER`` -> ``Identifier``."""

    def __call__(self, parser: "Parser", token: Token) -> Node:
        return Identifier(name=token.text)

    def __repr__(self) -> str:
        return "IdentifierParselet()"


class UnaryOperatorParselet:
    """A prefix operator such as unary ``-``.

    Parameters
    ----------
    precedence:
        Minimum precedence passed to the recursive call that parses the
        operand.  A high value keeps ``-a * b`` as ``(-a) * b``.
    """

    def __init__(self, precedence: int) -> None:
        self.precedence = precedence

    def __call__(self, parser: "Parser", token: Token) -> Node:
        operand = parser.parse_expression(self.precedence)
        return UnaryOp(operator=token.text, operand=operand)

    def __repr__(self) -> str:
        return f"UnaryOperatorParselet(precedence={self.precedence})"


class GroupParselet:
    """``( expression )``: parses a full sub-expression and requires ``)``."""

    def __init__(self, closing: TokenKind = TokenKind.RPAREN) -> None:
        self.closing = closing

    def __call__(self, parser: "Parser", token: Token) -> Node:
        inner = parser.parse_expression(0)
        nxt = parser.peek()
        if nxt is None or nxt.kind is not self.closing:
            offset = parser.end_offset if nxt is None else nxt.offset
            raise ParseError(
                kind=ParseErrorKind.UNBALANCED_PARENS,
                message=f"'{token.text}' at offset {token.offset} is never closed",
                offset=offset,
                found=nxt,
            )
        parser.advance()
        return inner

    def __repr__(self) -> str:
        return f"GroupParselet(closing={self.closing.name})"


# ---------------------------------------------------------------------------
# Infix parselets
# ---------------------------------------------------------------------------


class BinaryOperatorParselet:
    """An infix operator such as ``+`` or ``=``.

    Left-associative operators parse their right operand with their own
    precedence as the minimum, so an equal-precedence operator that
    follows ends the right operand and folds onto the left instead.
    Right-associative operators use ``precedence - 1`` so the inner call
    accepts another occurrence of the same operator.

    Parameters
    ----------
    right_associative:
        Group repeated occurrences from the right (``a = b = c`` is
        ``a = (b = c)``).
    """

    def __init__(self, right_associative: bool = False) -> None:
        self.right_associative = right_associative

    def __call__(self, parser: "Parser", left: Node, token: Token) -> Node:
        precedence = parser.registry.precedence_of(token.kind)
        if self.right_associative:
            precedence -= 1
        right = parser.parse_expression(precedence)
        return BinaryOp(operator=token.text, left=left, right=right)

    def __repr__(self) -> str:
        return f"BinaryOperatorParselet(right_associative={self.right_associative})"
