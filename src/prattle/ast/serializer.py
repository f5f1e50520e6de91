"""AST serialization and deserialization for prattle expressions.

Provides round-trip serialization of expression trees to and from JSON
and YAML.  The serialized form is a plain dict structure that maps
naturally to both formats.

Usage
-----
::

    from prattle.ast.serializer import AstSerializer

    serializer = AstSerializer()
    data = serializer.to_dict(tree)
    json_text = serializer.to_json(tree)
    tree2 = serializer.from_json(json_text)
    assert tree == tree2
"""
from __future__ import annotations

import json

import yaml

from prattle.ast.nodes import BinaryOp, Identifier, Literal, Node, UnaryOp


class AstSerializer:
    """Converts between expression trees and plain Python dicts.

    Every serialized node has a ``"kind"`` discriminator so that
    deserialization is unambiguous.
    """

    # ------------------------------------------------------------------
    # Serialization (AST → dict)
    # ------------------------------------------------------------------

    def to_dict(self, node: Node) -> dict[str, object]:
        """Serialize a node (and its subtree) to a JSON-compatible dict."""
        if isinstance(node, Literal):
            return {"kind": "Literal", "value": node.value}
        if isinstance(node, Identifier):
            return {"kind": "Identifier", "name": node.name}
        if isinstance(node, UnaryOp):
            return {
                "kind": "UnaryOp",
                "operator": node.operator,
                "operand": self.to_dict(node.operand),
            }
        if isinstance(node, BinaryOp):
            return {
                "kind": "BinaryOp",
                "operator": node.operator,
                "left": self.to_dict(node.left),
                "right": self.to_dict(node.right),
            }
        raise TypeError(f"Cannot serialize {type(node).__name__}")

    # ------------------------------------------------------------------
    # Deserialization (dict → AST)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Node:
        """Reconstruct a node from a dict produced by ``to_dict``.

        Raises
        ------
        ValueError
            If the dict has an unknown ``kind`` or a malformed field.
        """
        kind = data.get("kind")
        if kind == "Literal":
            value = data["value"]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Literal value must be a number, got {value!r}")
            return Literal(value=value)
        if kind == "Identifier":
            return Identifier(name=str(data["name"]))
        if kind == "UnaryOp":
            return UnaryOp(
                operator=str(data["operator"]),
                operand=self.from_dict(self._child(data, "operand")),
            )
        if kind == "BinaryOp":
            return BinaryOp(
                operator=str(data["operator"]),
                left=self.from_dict(self._child(data, "left")),
                right=self.from_dict(self._child(data, "right")),
            )
        raise ValueError(f"Unknown node kind: {kind!r}")

    @staticmethod
    def _child(data: dict[str, object], key: str) -> dict[str, object]:
        child = data.get(key)
        if not isinstance(child, dict):
            raise ValueError(f"Field {key!r} must be a node mapping, got {child!r}")
        return child

    # ------------------------------------------------------------------
    # JSON / YAML helpers
    # ------------------------------------------------------------------

    def to_json(self, node: Node, indent: int = 2) -> str:
        """Serialize a node to a JSON string."""
        return json.dumps(self.to_dict(node), indent=indent)

    def from_json(self, text: str) -> Node:
        """Deserialize a node from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    def to_yaml(self, node: Node) -> str:
        """Serialize a node to a YAML string."""
        return yaml.dump(self.to_dict(node), default_flow_style=False, sort_keys=False)

    def from_yaml(self, text: str) -> Node:
        """Deserialize a node from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
