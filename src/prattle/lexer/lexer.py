"""prattle lexer: converts an expression line into a flat list of tokens.

The input is split on whitespace and on the single-character symbols
``+ - * / ( ) =``.  Each symbol becomes its own token; every maximal run
of other non-whitespace characters becomes one chunk, which is then
classified:

    - digits with at most one decimal point   -> ``NUMBER``
    - a leading alphabetic character          -> ``IDENTIFIER``
    - anything else                           -> ``LexError``

Signs are never part of a number literal; ``-`` is always a separate
token and the parser decides whether it is unary or binary.

Unlike the parser, the lexer keeps no end-of-input sentinel: an empty
line produces an empty list.
"""
from __future__ import annotations

import re
from enum import Enum, auto
from typing import Final

from prattle.grammar.tokens import SYMBOLS, Token, TokenKind

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_SYMBOL_CLASS: Final[str] = "".join(re.escape(s) for s in SYMBOLS)
_CHUNK: Final[re.Pattern[str]] = re.compile(
    rf"(?P<space>\s+)|(?P<symbol>[{_SYMBOL_CLASS}])|(?P<word>[^\s{_SYMBOL_CLASS}]+)"
)
_NUMBER: Final[re.Pattern[str]] = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


class LexErrorKind(Enum):
    """Why the lexer rejected its input."""

    UNRECOGNIZED_TOKEN = auto()
    EMPTY_TOKEN = auto()


class LexError(Exception):
    """Raised when the lexer encounters a chunk it cannot classify.

    Parameters
    ----------
    kind:
        The ``LexErrorKind`` describing the failure.
    text:
        The offending chunk of source text.
    offset:
        0-based character offset of the chunk in the source.
    """

    def __init__(self, kind: LexErrorKind, text: str, offset: int) -> None:
        if kind is LexErrorKind.EMPTY_TOKEN:
            detail = "empty token"
        else:
            detail = f"unrecognized token {text!r}"
        super().__init__(f"LexError at offset {offset}: {detail}")
        self.kind = kind
        self.text = text
        self.offset = offset


class Lexer:
    """Regex-driven expression lexer.

    Parameters
    ----------
    source:
        The expression text to tokenize.
    """

    __slots__ = ("_source",)

    def __init__(self, source: str) -> None:
        self._source: str = source

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Scan the entire source and return the ordered token list.

        Each call re-scans from the beginning; the lexer holds no state
        between calls.

        Returns
        -------
        list[Token]
            Tokens in source order.  Empty for blank input.

        Raises
        ------
        LexError
            On the first chunk that is neither a number, an identifier,
            nor a known symbol.
        """
        tokens: list[Token] = []
        for match in _CHUNK.finditer(self._source):
            if match.lastgroup == "space":
                continue
            tokens.append(self._classify(match.group(), match.start()))
        return tokens

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    @staticmethod
    def _classify(chunk: str, offset: int) -> Token:
        """Map one chunk of source text to a ``Token``."""
        if not chunk:
            raise LexError(LexErrorKind.EMPTY_TOKEN, chunk, offset)
        if chunk in SYMBOLS:
            return Token(kind=SYMBOLS[chunk], text=chunk, offset=offset)
        if _NUMBER.fullmatch(chunk):
            return Token(kind=TokenKind.NUMBER, text=chunk, offset=offset)
        if chunk[0].isalpha():
            return Token(kind=TokenKind.IDENTIFIER, text=chunk, offset=offset)
        raise LexError(LexErrorKind.UNRECOGNIZED_TOKEN, chunk, offset)


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string and return the token list.

    Parameters
    ----------
    source:
        Expression text, typically a single line.

    Returns
    -------
    list[Token]
        All tokens in source order.

    Raises
    ------
    LexError
        If a chunk of the source is not a number, identifier, or symbol.

    Example
    -------
    ::

        from prattle.lexer import tokenize
        tokens = tokenize("a = 1 + 2")
    """
    return Lexer(source).tokenize()
