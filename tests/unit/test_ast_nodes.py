"""Unit tests for prattle.ast.nodes — immutability, equality, rendering, traversal."""
from __future__ import annotations

import dataclasses

import pytest

from prattle.ast.nodes import BinaryOp, Identifier, Literal, UnaryOp, depth, walk


SAMPLE = BinaryOp(
    "+", Literal(1), BinaryOp("*", UnaryOp("-", Identifier("x")), Literal(2.5))
)


class TestImmutability:
    def test_literal_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Literal(1).value = 2  # type: ignore[misc]

    def test_binary_op_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SAMPLE.operator = "-"  # type: ignore[misc]

    def test_nodes_are_hashable(self) -> None:
        assert len({SAMPLE, SAMPLE, Literal(1)}) == 2


class TestEquality:
    def test_structural_equality(self) -> None:
        rebuilt = BinaryOp(
            "+", Literal(1), BinaryOp("*", UnaryOp("-", Identifier("x")), Literal(2.5))
        )
        assert rebuilt == SAMPLE
        assert rebuilt is not SAMPLE

    def test_operator_matters(self) -> None:
        assert BinaryOp("+", Literal(1), Literal(2)) != BinaryOp("-", Literal(1), Literal(2))

    def test_different_variants_differ(self) -> None:
        assert Identifier("x") != UnaryOp("+", Identifier("x"))


@pytest.mark.parametrize("node, expected", [
    (Literal(3), "Literal(3)"),
    (Literal(0.5), "Literal(0.5)"),
    (Identifier("rate"), "Identifier(rate)"),
    (UnaryOp("-", Literal(1)), "UnaryOp(-, Literal(1))"),
    (
        BinaryOp("+", Literal(1), BinaryOp("*", Literal(2), Literal(3))),
        "BinaryOp(+, Literal(1), BinaryOp(*, Literal(2), Literal(3)))",
    ),
])
def test_describe(node, expected: str) -> None:
    assert node.describe() == expected


class TestTraversal:
    def test_walk_is_preorder(self) -> None:
        kinds = [type(n).__name__ for n in walk(SAMPLE)]
        assert kinds == ["BinaryOp", "Literal", "BinaryOp", "UnaryOp", "Identifier", "Literal"]

    def test_walk_leaf(self) -> None:
        assert walk(Identifier("x")) == [Identifier("x")]

    def test_depth(self) -> None:
        assert depth(Literal(1)) == 1
        assert depth(UnaryOp("-", Literal(1))) == 2
        assert depth(SAMPLE) == 4

    def test_height_is_recorded_at_construction(self) -> None:
        assert SAMPLE.height == 4
        assert Identifier("x").height == 1

    def test_height_is_not_part_of_equality_or_repr(self) -> None:
        assert "height" not in repr(UnaryOp("-", Literal(1)))
        assert hash(UnaryOp("-", Literal(1))) == hash(UnaryOp("-", Literal(1)))

    def test_walk_and_depth_handle_tall_trees(self) -> None:
        node: BinaryOp | Literal = Literal(0)
        for i in range(1, 5000):
            node = BinaryOp("+", node, Literal(i))
        assert depth(node) == 5000
        nodes = walk(node)
        assert len(nodes) == 9999
        assert nodes[-1] == Literal(4999)
