"""prattle grammar module.

Exports token definitions, binding precedences, and reference grammar text.
"""
from __future__ import annotations

from prattle.grammar.grammar import (
    GRAMMAR_ARITHMETIC,
    GRAMMAR_EXPRESSION,
    RIGHT_ASSOCIATIVE_OPERATORS,
    Precedence,
)
from prattle.grammar.tokens import OPERATOR_KINDS, SYMBOLS, Token, TokenKind

__all__ = [
    # Token types
    "TokenKind",
    "Token",
    "SYMBOLS",
    "OPERATOR_KINDS",
    # Grammar constants
    "Precedence",
    "GRAMMAR_EXPRESSION",
    "GRAMMAR_ARITHMETIC",
    "RIGHT_ASSOCIATIVE_OPERATORS",
]
