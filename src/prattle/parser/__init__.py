"""prattle parser module.

Exports the ``Parser`` engine, the ``parse`` convenience function, the
parselet registry and built-in parselets, and parse error types.
"""
from __future__ import annotations

from prattle.parser.errors import ParseError, ParseErrorKind
from prattle.parser.parselets import (
    BinaryOperatorParselet,
    GroupParselet,
    IdentifierParselet,
    InfixParselet,
    LiteralParselet,
    PrefixParselet,
    UnaryOperatorParselet,
)
from prattle.parser.parser import Parser, ParserConfig, parse
from prattle.parser.registry import (
    InfixEntry,
    ParseletAlreadyRegisteredError,
    ParseletRegistry,
    RegistryFrozenError,
    arithmetic_registry,
    default_registry,
)

__all__ = [
    "Parser",
    "ParserConfig",
    "parse",
    "ParseError",
    "ParseErrorKind",
    "ParseletRegistry",
    "InfixEntry",
    "ParseletAlreadyRegisteredError",
    "RegistryFrozenError",
    "default_registry",
    "arithmetic_registry",
    "PrefixParselet",
    "InfixParselet",
    "LiteralParselet",
    "IdentifierParselet",
    "UnaryOperatorParselet",
    "GroupParselet",
    "BinaryOperatorParselet",
]
