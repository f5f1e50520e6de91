"""prattle AST module.

Exports the expression node types and the JSON/YAML serializer.
"""
from __future__ import annotations

from prattle.ast.nodes import (
    ATOMIC_NODES,
    BinaryOp,
    Identifier,
    Literal,
    Node,
    UnaryOp,
    depth,
    walk,
)
from prattle.ast.serializer import AstSerializer

__all__ = [
    "Node",
    "Literal",
    "Identifier",
    "UnaryOp",
    "BinaryOp",
    "ATOMIC_NODES",
    "walk",
    "depth",
    "AstSerializer",
]
