"""Named grammar variants for prattle.

A *grammar* is a class that knows how to build a ``ParseletRegistry``.
Grammars are registered by name with the ``@grammars.register`` decorator
or discovered from installed packages through the ``prattle.grammars``
entry-point group, and the CLI selects one with ``--grammar NAME``.

Example
-------
Define and register a grammar::

    from prattle.grammar import TokenKind
    from prattle.parser import BinaryOperatorParselet, default_registry
    from prattle.plugins import Grammar, grammars

    @grammars.register("tight-division")
    class TightDivision(Grammar):
        description = "Division binds tighter than multiplication"

        def build_registry(self):
            registry = default_registry()
            registry.register_infix(
                TokenKind.SLASH, BinaryOperatorParselet(), 8, replace=True
            )
            return registry

Declare it for discovery in the plugin package's ``pyproject.toml``::

    [project.entry-points."prattle.grammars"]
    tight-division = "my_package.grammars:TightDivision"
"""
from __future__ import annotations

import importlib.metadata
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from prattle.grammar.grammar import GRAMMAR_ARITHMETIC, GRAMMAR_EXPRESSION
from prattle.parser.registry import (
    ParseletRegistry,
    arithmetic_registry,
    default_registry,
)

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "prattle.grammars"


class GrammarNotFoundError(KeyError):
    """Raised when a requested grammar name is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.grammar_name = name
        self.available = available
        super().__init__(
            f"Grammar {name!r} is not registered. "
            f"Available grammars: {', '.join(available) or '(none)'}."
        )


class GrammarAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a grammar name twice."""

    def __init__(self, name: str) -> None:
        self.grammar_name = name
        super().__init__(
            f"Grammar {name!r} is already registered. "
            "Use a unique name or deregister the existing grammar first."
        )


class Grammar(ABC):
    """Base class for grammar variants.

    Subclasses set ``description`` to a one-line summary and may set
    ``ebnf`` to a reference grammar shown by ``prattle grammars --show``.
    """

    description: str = ""
    ebnf: str = ""

    @abstractmethod
    def build_registry(self) -> ParseletRegistry:
        """Return a new, unfrozen parselet registry for this grammar."""


class GrammarRegistry:
    """Name → ``Grammar`` class catalog.

    Built registries are cached per name and frozen, so repeated lookups
    share one read-only registry.
    """

    def __init__(self) -> None:
        self._grammars: dict[str, type[Grammar]] = {}
        self._built: dict[str, ParseletRegistry] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[Grammar]], type[Grammar]]:
        """Return a class decorator that registers a grammar under ``name``.

        Raises
        ------
        GrammarAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated class is not a ``Grammar`` subclass.
        """

        def decorator(cls: type[Grammar]) -> type[Grammar]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[Grammar]) -> None:
        """Register ``cls`` under ``name`` without decorator syntax."""
        if name in self._grammars:
            raise GrammarAlreadyRegisteredError(name)
        if not (isinstance(cls, type) and issubclass(cls, Grammar)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: it must be a subclass of Grammar."
            )
        self._grammars[name] = cls
        logger.debug("Registered grammar %r -> %s", name, cls.__qualname__)

    def deregister(self, name: str) -> None:
        """Remove ``name`` and any registry cached for it."""
        if name not in self._grammars:
            raise GrammarNotFoundError(name, self.list_grammars())
        del self._grammars[name]
        self._built.pop(name, None)
        logger.debug("Deregistered grammar %r", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[Grammar]:
        """Return the grammar class registered under ``name``."""
        try:
            return self._grammars[name]
        except KeyError:
            raise GrammarNotFoundError(name, self.list_grammars()) from None

    def registry_for(self, name: str) -> ParseletRegistry:
        """Return the frozen parselet registry of grammar ``name``."""
        cached = self._built.get(name)
        if cached is not None:
            return cached
        registry = self.get(name)().build_registry().freeze()
        self._built[name] = registry
        return registry

    def list_grammars(self) -> list[str]:
        """Return registered grammar names in alphabetical order."""
        return sorted(self._grammars)

    def __contains__(self, name: object) -> bool:
        return name in self._grammars

    def __len__(self) -> int:
        return len(self._grammars)

    def __repr__(self) -> str:
        return f"GrammarRegistry(grammars={self.list_grammars()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Register grammars declared by installed packages.

        Names that are already registered are skipped, so repeated calls
        are idempotent.  An entry-point that fails to import, or does not
        point at a ``Grammar`` subclass, is logged and skipped.
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._grammars:
                logger.debug("Grammar entry-point %r already registered; skipping.", ep.name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load grammar entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except TypeError as exc:
                logger.warning("Skipping grammar entry-point %r: %s", ep.name, exc)


# ---------------------------------------------------------------------------
# Built-in grammars
# ---------------------------------------------------------------------------

grammars = GrammarRegistry()


@grammars.register("default")
class DefaultGrammar(Grammar):
    description = "Arithmetic with unary +/-, grouping, and right-associative '='"
    ebnf = GRAMMAR_EXPRESSION

    def build_registry(self) -> ParseletRegistry:
        return default_registry()


@grammars.register("arithmetic")
class ArithmeticGrammar(Grammar):
    description = "Arithmetic with unary +/- and grouping, no assignment"
    ebnf = GRAMMAR_ARITHMETIC

    def build_registry(self) -> ParseletRegistry:
        return arithmetic_registry()
