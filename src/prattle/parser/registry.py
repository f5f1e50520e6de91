"""Parselet registry: the parser's two dispatch tables.

A ``ParseletRegistry`` maps each ``TokenKind`` to at most one prefix
handler and, independently, to at most one infix handler with its
binding precedence.  It is the only extension point of the grammar:
adding an operator means registering a handler, never editing the
parser engine.

A registry is mutable while it is being configured and is frozen by the
first ``Parser`` that uses it.  Frozen registries are read-only and can
be shared between any number of parses.

Example
-------
::

    from prattle.parser.registry import default_registry
    from prattle.parser.parselets import BinaryOperatorParselet

    registry = default_registry().copy()
    registry.register_infix(
        TokenKind.SLASH, BinaryOperatorParselet(), 9, replace=True
    )
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from prattle.grammar.grammar import RIGHT_ASSOCIATIVE_OPERATORS, Precedence
from prattle.grammar.tokens import SYMBOLS, TokenKind
from prattle.parser.parselets import (
    BinaryOperatorParselet,
    GroupParselet,
    IdentifierParselet,
    InfixParselet,
    LiteralParselet,
    PrefixParselet,
    UnaryOperatorParselet,
)

logger = logging.getLogger(__name__)


class ParseletAlreadyRegisteredError(ValueError):
    """Raised when a token kind already has a handler in the requested role."""

    def __init__(self, kind: TokenKind, role: str) -> None:
        self.kind = kind
        self.role = role
        super().__init__(
            f"Token kind {kind.name} already has a {role} parselet. "
            "Pass replace=True to override it."
        )


class RegistryFrozenError(RuntimeError):
    """Raised when a frozen registry is asked to change."""

    def __init__(self) -> None:
        super().__init__(
            "Parselet registry is frozen because a parser is using it. "
            "Call copy() to derive a mutable variant."
        )


@dataclass(frozen=True, slots=True)
class InfixEntry:
    """An infix handler together with its binding precedence."""

    handler: InfixParselet
    precedence: int


class ParseletRegistry:
    """Prefix and infix dispatch tables keyed by ``TokenKind``."""

    def __init__(self) -> None:
        self._prefix: dict[TokenKind, PrefixParselet] = {}
        self._infix: dict[TokenKind, InfixEntry] = {}
        self._frozen: bool = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_prefix(
        self, kind: TokenKind, handler: PrefixParselet, *, replace: bool = False
    ) -> None:
        """Associate ``kind`` with a prefix handler.

        Raises
        ------
        ParseletAlreadyRegisteredError
            If ``kind`` has a prefix handler and ``replace`` is false.
        RegistryFrozenError
            If the registry is frozen.
        """
        self._check_mutable()
        if kind in self._prefix and not replace:
            raise ParseletAlreadyRegisteredError(kind, "prefix")
        self._prefix[kind] = handler
        logger.debug("Registered prefix parselet %r for %s", handler, kind.name)

    def register_infix(
        self,
        kind: TokenKind,
        handler: InfixParselet,
        precedence: int,
        *,
        replace: bool = False,
    ) -> None:
        """Associate ``kind`` with an infix handler and its precedence.

        Parameters
        ----------
        kind:
            Operator token kind.
        handler:
            Callable ``(parser, left, token) -> Node``.
        precedence:
            Non-negative binding power; higher binds tighter.  A
            precedence of 0 never wins against the engine's starting
            minimum, so such an operator is effectively disabled.

        Raises
        ------
        ValueError
            If ``precedence`` is not a non-negative integer.
        ParseletAlreadyRegisteredError
            If ``kind`` has an infix handler and ``replace`` is false.
        RegistryFrozenError
            If the registry is frozen.
        """
        self._check_mutable()
        if isinstance(precedence, bool) or not isinstance(precedence, int) or precedence < 0:
            raise ValueError(
                f"Precedence for {kind.name} must be a non-negative integer, got {precedence!r}"
            )
        if kind in self._infix and not replace:
            raise ParseletAlreadyRegisteredError(kind, "infix")
        self._infix[kind] = InfixEntry(handler=handler, precedence=int(precedence))
        logger.debug(
            "Registered infix parselet %r for %s at precedence %d",
            handler,
            kind.name,
            precedence,
        )

    def unregister_prefix(self, kind: TokenKind) -> None:
        """Remove the prefix handler for ``kind``; missing kinds raise ``KeyError``."""
        self._check_mutable()
        del self._prefix[kind]
        logger.debug("Unregistered prefix parselet for %s", kind.name)

    def unregister_infix(self, kind: TokenKind) -> None:
        """Remove the infix handler for ``kind``; missing kinds raise ``KeyError``."""
        self._check_mutable()
        del self._infix[kind]
        logger.debug("Unregistered infix parselet for %s", kind.name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def prefix_for(self, kind: TokenKind) -> PrefixParselet | None:
        """Return the prefix handler for ``kind``, or ``None``."""
        return self._prefix.get(kind)

    def infix_for(self, kind: TokenKind) -> InfixEntry | None:
        """Return the infix entry for ``kind``, or ``None``."""
        return self._infix.get(kind)

    def precedence_of(self, kind: TokenKind) -> int:
        """Return the infix precedence of ``kind``; 0 when it has no infix role."""
        entry = self._infix.get(kind)
        return entry.precedence if entry is not None else Precedence.LOWEST

    @property
    def prefix_kinds(self) -> list[TokenKind]:
        """Token kinds with a prefix handler, in registration order."""
        return list(self._prefix)

    @property
    def infix_kinds(self) -> list[TokenKind]:
        """Token kinds with an infix handler, in registration order."""
        return list(self._infix)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def frozen(self) -> bool:
        """True once the registry no longer accepts changes."""
        return self._frozen

    def freeze(self) -> "ParseletRegistry":
        """Make the registry read-only and return it."""
        if not self._frozen:
            self._frozen = True
            logger.debug(
                "Froze parselet registry with %d prefix and %d infix entries",
                len(self._prefix),
                len(self._infix),
            )
        return self

    def copy(self) -> "ParseletRegistry":
        """Return a mutable registry with the same entries."""
        clone = ParseletRegistry()
        clone._prefix = dict(self._prefix)
        clone._infix = dict(self._infix)
        return clone

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError()

    def __contains__(self, kind: object) -> bool:
        return kind in self._prefix or kind in self._infix

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return (
            f"ParseletRegistry({state}, prefix={len(self._prefix)}, "
            f"infix={len(self._infix)})"
        )


# ---------------------------------------------------------------------------
# Built-in grammars
# ---------------------------------------------------------------------------


def _symbol_of(kind: TokenKind) -> str:
    return next(text for text, k in SYMBOLS.items() if k is kind)


def arithmetic_registry() -> ParseletRegistry:
    """Build a fresh registry for arithmetic without assignment.

    Numbers, identifiers, grouping, unary ``+``/``-`` and the four binary
    arithmetic operators.
    """
    registry = ParseletRegistry()
    registry.register_prefix(TokenKind.NUMBER, LiteralParselet())
    registry.register_prefix(TokenKind.IDENTIFIER, IdentifierParselet())
    registry.register_prefix(TokenKind.LPAREN, GroupParselet())

    unary = UnaryOperatorParselet(Precedence.PREFIX)
    registry.register_prefix(TokenKind.PLUS, unary)
    registry.register_prefix(TokenKind.MINUS, unary)

    levels = {
        TokenKind.PLUS: Precedence.SUM,
        TokenKind.MINUS: Precedence.SUM,
        TokenKind.STAR: Precedence.PRODUCT,
        TokenKind.SLASH: Precedence.PRODUCT,
    }
    for kind, precedence in levels.items():
        right = _symbol_of(kind) in RIGHT_ASSOCIATIVE_OPERATORS
        registry.register_infix(kind, BinaryOperatorParselet(right), precedence)
    return registry


def default_registry() -> ParseletRegistry:
    """Build a fresh registry for the default grammar.

    The arithmetic grammar plus right-associative assignment at the
    lowest binding precedence.
    """
    registry = arithmetic_registry()
    right = _symbol_of(TokenKind.ASSIGN) in RIGHT_ASSOCIATIVE_OPERATORS
    registry.register_infix(
        TokenKind.ASSIGN, BinaryOperatorParselet(right), Precedence.ASSIGNMENT
    )
    return registry
