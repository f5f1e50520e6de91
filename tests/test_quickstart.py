"""Test that the quickstart API works for prattle."""
from __future__ import annotations


def test_quickstart_imports(package_name: str) -> None:
    import importlib

    prattle = importlib.import_module(package_name)
    for name in ("tokenize", "parse", "format", "describe", "evaluate"):
        assert callable(getattr(prattle, name))
        assert name in prattle.__all__


def test_quickstart_version(expected_version: str) -> None:
    import prattle

    assert prattle.__version__ == expected_version


def test_quickstart_tokenize() -> None:
    import prattle

    assert [t.text for t in prattle.tokenize("x=1")] == ["x", "=", "1"]


def test_quickstart_parse_and_describe() -> None:
    import prattle

    tree = prattle.parse("1 + 2 * 3")
    assert prattle.describe(tree) == (
        "BinaryOp(+, Literal(1), BinaryOp(*, Literal(2), Literal(3)))"
    )


def test_quickstart_format_round_trips() -> None:
    import prattle

    tree = prattle.parse("a = b = 1 + 2 * 3")
    text = prattle.format(tree)
    assert text == "a = (b = (1 + (2 * 3)))"
    assert prattle.parse(text) == tree


def test_quickstart_evaluate() -> None:
    import prattle

    env = prattle.Environment()
    assert prattle.evaluate(prattle.parse("a = b = 1 + 2 * 3"), env) == 7
    assert dict(env) == {"a": 7, "b": 7}


def test_quickstart_alternate_grammar() -> None:
    import pytest

    import prattle
    from prattle.parser import ParseError, arithmetic_registry

    with pytest.raises(ParseError):
        prattle.parse("a = 1", registry=arithmetic_registry())
