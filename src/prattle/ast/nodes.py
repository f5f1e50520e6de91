"""AST node definitions for prattle expressions.

Every node produced by the parser is a frozen dataclass, so trees are
immutable, hashable, and compare structurally.  The ``Node`` union
covers all variants; downstream code dispatches with ``isinstance``.

Operators are stored as their source text rather than as an enum so a
grammar can register new operators without touching this module.

Each node records its ``height`` (a leaf is 1) when it is built, so the
parser can bound the size of the trees it returns without walking them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class Literal:
    """A numeric constant (``int`` for whole literals, ``float`` otherwise)."""

    value: int | float

    def describe(self) -> str:
        return f"Literal({self.value})"

    @property
    def height(self) -> int:
        return 1


@dataclass(frozen=True, slots=True)
class Identifier:
    """A reference to a variable by name."""

    name: str

    def describe(self) -> str:
        return f"Identifier({self.name})"

    @property
    def height(self) -> int:
        return 1


@dataclass(frozen=True, slots=True)
class UnaryOp:
    """A prefix operator applied to a single operand.

    Parameters
    ----------
    operator:
        Operator text, e.g. ``"-"``.
    operand:
        The expression the operator applies to.
    """

    operator: str
    operand: "Node"
    height: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "height", self.operand.height + 1)

    def describe(self) -> str:
        return f"UnaryOp({self.operator}, {self.operand.describe()})"


@dataclass(frozen=True, slots=True)
class BinaryOp:
    """An infix operator combining two subtrees.

    Parameters
    ----------
    operator:
        Operator text, e.g. ``"*"`` or ``"="``.
    left:
        Left-hand operand.
    right:
        Right-hand operand.
    """

    operator: str
    left: "Node"
    right: "Node"
    height: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "height", max(self.left.height, self.right.height) + 1)

    def describe(self) -> str:
        return (
            f"BinaryOp({self.operator}, "
            f"{self.left.describe()}, {self.right.describe()})"
        )


Node = Union[Literal, Identifier, UnaryOp, BinaryOp]

# Nodes that never need parentheses when printed as an operand.
ATOMIC_NODES: tuple[type, ...] = (Literal, Identifier)


def walk(node: Node) -> list[Node]:
    """Return ``node`` and all of its descendants in pre-order."""
    result: list[Node] = []
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        result.append(current)
        if isinstance(current, UnaryOp):
            stack.append(current.operand)
        elif isinstance(current, BinaryOp):
            stack.append(current.right)
            stack.append(current.left)
    return result


def depth(node: Node) -> int:
    """Return the height of the tree rooted at ``node`` (a leaf is 1)."""
    return node.height
