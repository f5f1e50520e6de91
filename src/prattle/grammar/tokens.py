"""Token definitions for prattle expressions.

Defines the closed token vocabulary produced by the lexer.  Every
operator, parenthesis and literal kind is a member of the ``TokenKind``
enum, and every scanned token is a ``Token`` dataclass carrying its
kind, raw text, and source offset.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Exhaustive enumeration of expression token kinds."""

    # -----------------------------------------------------------------
    # Literals and names
    # -----------------------------------------------------------------
    NUMBER = auto()
    IDENTIFIER = auto()

    # -----------------------------------------------------------------
    # Arithmetic operators
    # -----------------------------------------------------------------
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # -----------------------------------------------------------------
    # Grouping and assignment
    # -----------------------------------------------------------------
    LPAREN = auto()
    RPAREN = auto()
    ASSIGN = auto()


# Mapping from single-character symbol text to its TokenKind.
SYMBOLS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.ASSIGN,
}

# Token kinds that are arithmetic or assignment operators.
OPERATOR_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH, TokenKind.ASSIGN}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    Parameters
    ----------
    kind:
        The ``TokenKind`` variant for this token.
    text:
        The raw, non-empty text as it appeared in the source.
    offset:
        0-based character offset of the first character in the source.
    """

    kind: TokenKind
    text: str
    offset: int = 0

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, @{self.offset})"

    @property
    def end(self) -> int:
        """Return the offset just past the last character of this token."""
        return self.offset + len(self.text)

    @property
    def is_operator(self) -> bool:
        """Return True for arithmetic and assignment symbols."""
        return self.kind in OPERATOR_KINDS
