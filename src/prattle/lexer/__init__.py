"""prattle lexer module.

Exports the ``Lexer`` class, the ``tokenize`` convenience function, and
lexing error types.
"""
from __future__ import annotations

from prattle.lexer.lexer import LexError, LexErrorKind, Lexer, tokenize

__all__ = ["Lexer", "tokenize", "LexError", "LexErrorKind"]
