"""Unit tests for prattle.ast.serializer — dict/JSON/YAML conversion."""
from __future__ import annotations

import json

import pytest
import yaml

from prattle.ast.nodes import BinaryOp, Identifier, Literal, UnaryOp
from prattle.ast.serializer import AstSerializer
from prattle.parser.parser import parse


@pytest.fixture()
def serializer() -> AstSerializer:
    return AstSerializer()


TREE = BinaryOp("=", Identifier("x"), BinaryOp("*", UnaryOp("-", Literal(2)), Literal(0.5)))


class TestToDict:
    def test_literal(self, serializer: AstSerializer) -> None:
        assert serializer.to_dict(Literal(3)) == {"kind": "Literal", "value": 3}

    def test_nested_structure(self, serializer: AstSerializer) -> None:
        data = serializer.to_dict(TREE)
        assert data["kind"] == "BinaryOp"
        assert data["operator"] == "="
        assert data["left"] == {"kind": "Identifier", "name": "x"}
        right = data["right"]
        assert isinstance(right, dict)
        assert right["left"] == {
            "kind": "UnaryOp",
            "operator": "-",
            "operand": {"kind": "Literal", "value": 2},
        }

    def test_unknown_node_rejected(self, serializer: AstSerializer) -> None:
        with pytest.raises(TypeError):
            serializer.to_dict(object())  # type: ignore[arg-type]


class TestFromDict:
    def test_dict_round_trip(self, serializer: AstSerializer) -> None:
        assert serializer.from_dict(serializer.to_dict(TREE)) == TREE

    def test_unknown_kind(self, serializer: AstSerializer) -> None:
        with pytest.raises(ValueError, match="Unknown node kind"):
            serializer.from_dict({"kind": "Call"})

    @pytest.mark.parametrize("value", ["1", None, True])
    def test_non_numeric_literal(self, serializer: AstSerializer, value: object) -> None:
        with pytest.raises(ValueError):
            serializer.from_dict({"kind": "Literal", "value": value})

    def test_malformed_child(self, serializer: AstSerializer) -> None:
        with pytest.raises(ValueError, match="operand"):
            serializer.from_dict({"kind": "UnaryOp", "operator": "-", "operand": 5})


class TestTextFormats:
    def test_json_is_valid_and_round_trips(self, serializer: AstSerializer) -> None:
        text = serializer.to_json(TREE)
        assert json.loads(text)["kind"] == "BinaryOp"
        assert serializer.from_json(text) == TREE

    def test_yaml_is_valid_and_round_trips(self, serializer: AstSerializer) -> None:
        text = serializer.to_yaml(TREE)
        assert yaml.safe_load(text)["operator"] == "="
        assert serializer.from_yaml(text) == TREE

    def test_yaml_keeps_kind_first(self, serializer: AstSerializer) -> None:
        assert serializer.to_yaml(Literal(1)).startswith("kind: Literal")

    def test_literal_types_survive_json(self, serializer: AstSerializer) -> None:
        restored = serializer.from_json(serializer.to_json(parse("1 + 1.0")))
        assert isinstance(restored, BinaryOp)
        assert isinstance(restored.left, Literal) and isinstance(restored.left.value, int)
        assert isinstance(restored.right, Literal) and isinstance(restored.right.value, float)
