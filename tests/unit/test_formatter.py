"""Unit tests for prattle.formatter — canonical infix rendering and the
print → parse round trip.
"""
from __future__ import annotations

import random

import pytest

from prattle.ast.nodes import BinaryOp, Identifier, Literal, Node, UnaryOp
from prattle.formatter.formatter import ExpressionFormatter, describe, format_expression
from prattle.parser.parser import parse


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("source, expected", [
    ("1", "1"),
    ("x", "x"),
    ("1+2", "1 + 2"),
    ("1 + 2 * 3", "1 + (2 * 3)"),
    ("(1 + 2) * 3", "(1 + 2) * 3"),
    ("1 - 2 - 3", "(1 - 2) - 3"),
    ("a = b = c", "a = (b = c)"),
    ("-x", "-x"),
    ("- -x", "-(-x)"),
    ("-(a + b)", "-(a + b)"),
    ("+1 + 2", "(+1) + 2"),
    ("((y))", "y"),
])
def test_format_expression(source: str, expected: str) -> None:
    assert format_expression(parse(source)) == expected


class TestNumbers:
    @pytest.mark.parametrize("value, expected", [
        (0, "0"),
        (12345678901234567890, "12345678901234567890"),
        (2.5, "2.5"),
        (4.0, "4.0"),
        (1e20, "100000000000000000000.0"),
        (1e-7, "0.0000001"),
    ])
    def test_number_spelling(self, value, expected: str) -> None:
        assert format_expression(Literal(value)) == expected

    def test_hand_built_non_finite_literal_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_expression(Literal(float("inf")))

    def test_leading_zero_normalised(self) -> None:
        assert format_expression(parse("007")) == "7"
        assert format_expression(parse(".5")) == "0.5"
        assert format_expression(parse("4.")) == "4.0"


def test_describe_matches_node_rendering() -> None:
    tree = parse("1 + 2 * 3")
    assert describe(tree) == "BinaryOp(+, Literal(1), BinaryOp(*, Literal(2), Literal(3)))"
    assert ExpressionFormatter().describe(tree) == tree.describe()


def test_format_rejects_unknown_node() -> None:
    with pytest.raises(TypeError):
        format_expression("not a node")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Round trip: parse(format(tree)) == tree
# ---------------------------------------------------------------------------


ROUND_TRIP_SOURCES = [
    "1 + 2 * 3",
    "(1 + 2) * 3",
    "1 - 2 - 3",
    "1 - (2 - 3)",
    "a = b = c",
    "(a = b) = c",
    "+1 + 2",
    "-a * -b / +c",
    "x = -(y + 2.75) * (3 - z) / 4",
    "--1",
    "-(-(-1))",
    "a / b / c / d",
    "total = price * (1 + rate) - discount",
    "0.1 + .2 + 3.",
    "123456789012345678901234567890 * 2",
]


@pytest.mark.parametrize("source", ROUND_TRIP_SOURCES)
def test_print_then_parse_is_identity(source: str) -> None:
    tree = parse(source)
    printed = format_expression(tree)
    assert parse(printed) == tree
    assert format_expression(parse(printed)) == printed


def test_round_trip_on_hand_built_tree() -> None:
    tree = BinaryOp(
        "=",
        Identifier("r"),
        UnaryOp("-", BinaryOp("/", Literal(1.5), BinaryOp("-", Identifier("q"), Literal(7)))),
    )
    assert parse(format_expression(tree)) == tree


def test_round_trip_at_float_boundary() -> None:
    tree = parse("x = " + "1" + "0" * 308 + ".0" + " * 2.5")
    assert parse(format_expression(tree)) == tree


def test_round_trip_at_height_limit() -> None:
    tree = parse(" - ".join(["1"] * 100))
    assert parse(format_expression(tree)) == tree


def test_round_trip_of_right_nested_chain_at_height_limit() -> None:
    tree = parse(" = ".join(f"v{i}" for i in range(100)))
    assert tree.height == 100
    assert parse(format_expression(tree)) == tree


# ---------------------------------------------------------------------------
# Round trip over generated trees
# ---------------------------------------------------------------------------

NAMES = ["a", "b", "rate", "x1", "total"]
UNARY = ["+", "-"]
BINARY = ["+", "-", "*", "/", "="]


def random_tree(rng: random.Random, height: int) -> Node:
    """Build a random tree no taller than ``height`` from what the parser emits."""
    if height <= 1 or rng.random() < 0.25:
        choice = rng.randrange(3)
        if choice == 0:
            return Literal(rng.randrange(10**rng.randrange(1, 25)))
        if choice == 1:
            return Literal(rng.uniform(0, 10 ** rng.randrange(-8, 30)))
        return Identifier(rng.choice(NAMES))
    if rng.random() < 0.3:
        return UnaryOp(rng.choice(UNARY), random_tree(rng, height - 1))
    return BinaryOp(
        rng.choice(BINARY),
        random_tree(rng, height - 1),
        random_tree(rng, height - 1),
    )


@pytest.mark.parametrize("seed", range(50))
def test_generated_tree_round_trips(seed: int) -> None:
    tree = random_tree(random.Random(seed), height=2 + seed % 7)
    printed = format_expression(tree)
    assert parse(printed) == tree, printed