"""Parse error types for the prattle parser.

The parser fails fast: the first problem aborts the parse and is raised
as a single ``ParseError``.  Every error names its ``ParseErrorKind`` so
callers and tests can branch on the failure without matching message
text, and carries the source offset for display.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from prattle.grammar.tokens import Token

# Longest token text quoted verbatim in an error message.
_MAX_FOUND_TEXT = 40


class ParseErrorKind(Enum):
    """Classification of parse failures.

    NO_PREFIX_HANDLER
        A token that cannot start an expression appeared where one was
        expected.
    UNEXPECTED_TOKEN
        ``consume`` found a token of the wrong kind.
    UNEXPECTED_END_OF_INPUT
        The input ran out while a token was still required.
    UNBALANCED_PARENS
        A ``(`` was never closed, or a ``)`` has no opening partner.
    TRAILING_TOKENS
        A complete expression was parsed but tokens remain.
    NESTING_TOO_DEEP
        The expression nests deeper than the configured limit.
    LITERAL_OUT_OF_RANGE
        A number literal has no finite value: a float that overflows,
        or an integer with more digits than the interpreter converts.
    """

    NO_PREFIX_HANDLER = auto()
    UNEXPECTED_TOKEN = auto()
    UNEXPECTED_END_OF_INPUT = auto()
    UNBALANCED_PARENS = auto()
    TRAILING_TOKENS = auto()
    NESTING_TOO_DEEP = auto()
    LITERAL_OUT_OF_RANGE = auto()


@dataclass(frozen=True)
class ParseError(Exception):
    """A single parse failure with location.

    Parameters
    ----------
    kind:
        The ``ParseErrorKind`` of this failure.
    message:
        Human-readable description of the error.
    offset:
        0-based character offset where the problem was detected.
    found:
        The offending token, or ``None`` at end of input.
    """

    kind: ParseErrorKind
    message: str
    offset: int
    found: Token | None = None

    def __str__(self) -> str:
        if self.found is not None:
            text = self.found.text
            if len(text) > _MAX_FOUND_TEXT:
                text = text[: _MAX_FOUND_TEXT - 3] + "..."
            return (
                f"ParseError at offset {self.offset}: {self.message} "
                f"(found {self.found.kind.name} {text!r})"
            )
        return f"ParseError at offset {self.offset}: {self.message}"

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (str(self),))
