"""prattle top-down operator-precedence parser.

Converts a flat list of ``Token`` objects into an expression AST by
precedence climbing (Pratt parsing).  The engine knows nothing about
particular operators: every decision is a lookup in a
``ParseletRegistry``.

Algorithm
---------
``parse_expression(min_precedence)``:

1. Take the next token and call its prefix parselet to get ``left``.
2. Peek at the following token.  While its infix precedence is greater
   than ``min_precedence``, consume it and let its infix parselet
   combine ``left`` with whatever it parses to the right.
3. Return ``left``.

Tokens without an infix role, and the end of input, report precedence
0, which ends the loop at any level.

Error handling
--------------
The parser fails fast.  The first problem raises ``ParseError``; there
is no recovery and no partial tree.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from prattle.ast.nodes import Node
from prattle.grammar.tokens import Token, TokenKind
from prattle.lexer.lexer import tokenize
from prattle.parser.errors import ParseError, ParseErrorKind
from prattle.parser.registry import ParseletRegistry, default_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserConfig:
    """Options that control a parse.

    Parameters
    ----------
    max_depth:
        Maximum height of the returned tree (a leaf is 1).  Nested
        ``parse_expression`` calls (parentheses, prefix operators, and
        right operands each add one) are limited to twice this.  ``None``
        disables both checks; trees deeper than Python's recursion limit
        then cannot be formatted, compared, or evaluated.
    require_full_input:
        When ``True``, ``Parser.parse`` rejects tokens left over after
        the expression.
    """

    max_depth: int | None = 100
    require_full_input: bool = True

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


class Parser:
    """Precedence-climbing parser over a token list.

    Parameters
    ----------
    tokens:
        The token list produced by the lexer.  The parser owns its own
        cursor; the list itself is not modified.
    registry:
        Dispatch tables to parse with.  Defaults to a fresh default
        grammar.  The registry is frozen on first use.
    config:
        Parse options; defaults to ``ParserConfig()``.
    """

    def __init__(
        self,
        tokens: list[Token],
        registry: ParseletRegistry | None = None,
        config: ParserConfig | None = None,
    ) -> None:
        self._tokens: list[Token] = list(tokens)
        self._pos: int = 0
        self._depth: int = 0
        self.registry: ParseletRegistry = (
            registry if registry is not None else default_registry()
        ).freeze()
        self.config: ParserConfig = config if config is not None else ParserConfig()

    # ------------------------------------------------------------------
    # Navigation helpers
    # ------------------------------------------------------------------

    @property
    def at_end(self) -> bool:
        """True when every token has been consumed."""
        return self._pos >= len(self._tokens)

    @property
    def end_offset(self) -> int:
        """Offset just past the last token (where end-of-input errors point)."""
        return self._tokens[-1].end if self._tokens else 0

    def peek(self) -> Token | None:
        """Return the next token without consuming it, or ``None`` at the end."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def advance(self) -> Token:
        """Consume and return the next token.

        Raises
        ------
        ParseError
            ``UNEXPECTED_END_OF_INPUT`` if no token remains.
        """
        tok = self.peek()
        if tok is None:
            raise ParseError(
                kind=ParseErrorKind.UNEXPECTED_END_OF_INPUT,
                message="Unexpected end of input",
                offset=self.end_offset,
            )
        self._pos += 1
        return tok

    def consume(self, expected: TokenKind) -> Token:
        """Consume the next token, which must be of kind ``expected``.

        Raises
        ------
        ParseError
            ``UNEXPECTED_END_OF_INPUT`` if no token remains, or
            ``UNEXPECTED_TOKEN`` if the next token has another kind.
        """
        tok = self.peek()
        if tok is None:
            raise ParseError(
                kind=ParseErrorKind.UNEXPECTED_END_OF_INPUT,
                message=f"Expected {expected.name}, reached end of input",
                offset=self.end_offset,
            )
        if tok.kind is not expected:
            raise ParseError(
                kind=ParseErrorKind.UNEXPECTED_TOKEN,
                message=f"Expected {expected.name}",
                offset=tok.offset,
                found=tok,
            )
        self._pos += 1
        return tok

    # ------------------------------------------------------------------
    # Top-level entry point
    # ------------------------------------------------------------------

    def parse(self) -> Node:
        """Parse one complete expression.

        Returns
        -------
        Node
            The root of the expression tree.

        Raises
        ------
        ParseError
            On any syntax error, or ``TRAILING_TOKENS`` when tokens remain
            and ``config.require_full_input`` is set.  A stray ``)`` left
            over is reported as ``UNBALANCED_PARENS``.
        """
        root = self.parse_expression(0)
        leftover = self.peek()
        if leftover is not None and self.config.require_full_input:
            if leftover.kind is TokenKind.RPAREN:
                raise ParseError(
                    kind=ParseErrorKind.UNBALANCED_PARENS,
                    message="Closing parenthesis without a matching '('",
                    offset=leftover.offset,
                    found=leftover,
                )
            raise ParseError(
                kind=ParseErrorKind.TRAILING_TOKENS,
                message="Unexpected tokens after the end of the expression",
                offset=leftover.offset,
                found=leftover,
            )
        return root

    # ------------------------------------------------------------------
    # Precedence climbing
    # ------------------------------------------------------------------

    def parse_expression(self, min_precedence: int = 0) -> Node:
        """Parse an expression whose operators all bind tighter than ``min_precedence``.

        Parselets call back into this method to parse operands.  The
        nesting of those calls is limited to ``2 * config.max_depth``: the
        canonical text of a tree within the height limit wraps each level
        in at most one group and one operand call.
        """
        self._depth += 1
        try:
            max_depth = self.config.max_depth
            if max_depth is not None and self._depth > 2 * max_depth:
                tok = self.peek()
                raise ParseError(
                    kind=ParseErrorKind.NESTING_TOO_DEEP,
                    message=f"Expression nests too deeply (limit {max_depth})",
                    offset=tok.offset if tok is not None else self.end_offset,
                    found=tok,
                )

            token = self.advance()
            prefix = self.registry.prefix_for(token.kind)
            if prefix is None:
                raise ParseError(
                    kind=ParseErrorKind.NO_PREFIX_HANDLER,
                    message="Token cannot start an expression",
                    offset=token.offset,
                    found=token,
                )
            left = self._bounded(prefix(self, token), token)

            while True:
                nxt = self.peek()
                if nxt is None:
                    break
                entry = self.registry.infix_for(nxt.kind)
                if entry is None or entry.precedence <= min_precedence:
                    break
                self._pos += 1
                logger.debug(
                    "Infix %s at precedence %d (minimum %d)",
                    nxt.kind.name,
                    entry.precedence,
                    min_precedence,
                )
                left = self._bounded(entry.handler(self, left, nxt), nxt)
            return left
        finally:
            self._depth -= 1

    def _bounded(self, node: Node, token: Token) -> Node:
        """Return ``node`` unless its tree is taller than ``config.max_depth``.

        Operator chains such as ``1 + 1 + ... + 1`` grow the tree in the
        infix loop without nesting ``parse_expression`` calls.
        """
        max_depth = self.config.max_depth
        if max_depth is not None and node.height > max_depth:
            raise ParseError(
                kind=ParseErrorKind.NESTING_TOO_DEEP,
                message=f"Expression tree is taller than {max_depth} levels",
                offset=token.offset,
                found=token,
            )
        return node


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def parse(
    source: str,
    registry: ParseletRegistry | None = None,
    config: ParserConfig | None = None,
) -> Node:
    """Tokenize and parse an expression string.

    Parameters
    ----------
    source:
        Expression text.
    registry:
        Grammar to parse with; defaults to the default grammar.
    config:
        Parse options.

    Returns
    -------
    Node
        The root of the expression tree.

    Raises
    ------
    LexError
        If the source contains an unrecognized token.
    ParseError
        If the token sequence is not a valid expression.

    Example
    -------
    ::

        from prattle.parser import parse
        tree = parse("a = b = 1 + 2 * 3")
    """
    tokens = tokenize(source)
    return Parser(tokens, registry=registry, config=config).parse()
