"""Unit tests for prattle.grammar.grammar — precedence levels and EBNF constants."""
from __future__ import annotations

from prattle.grammar.grammar import (
    GRAMMAR_ARITHMETIC,
    GRAMMAR_EXPRESSION,
    RIGHT_ASSOCIATIVE_OPERATORS,
    Precedence,
)


class TestPrecedence:
    def test_levels(self) -> None:
        assert Precedence.LOWEST == 0
        assert Precedence.ASSIGNMENT == 1
        assert Precedence.SUM == 5
        assert Precedence.PRODUCT == 7
        assert Precedence.PREFIX == 10

    def test_ordering_loosest_to_tightest(self) -> None:
        assert list(Precedence) == sorted(Precedence)

    def test_prefix_binds_tighter_than_every_infix(self) -> None:
        assert Precedence.PREFIX > max(Precedence.ASSIGNMENT, Precedence.SUM, Precedence.PRODUCT)


class TestGrammarConstants:
    def test_expression_grammar_has_assignment(self) -> None:
        assert "assignment" in GRAMMAR_EXPRESSION
        assert "'='" in GRAMMAR_EXPRESSION

    def test_arithmetic_grammar_has_no_assignment(self) -> None:
        assert "assignment" not in GRAMMAR_ARITHMETIC
        assert "'='" not in GRAMMAR_ARITHMETIC

    def test_both_grammars_share_primaries(self) -> None:
        for grammar in (GRAMMAR_EXPRESSION, GRAMMAR_ARITHMETIC):
            assert "primary" in grammar
            assert "'(' expression ')'" in grammar

    def test_only_assignment_is_right_associative(self) -> None:
        assert RIGHT_ASSOCIATIVE_OPERATORS == frozenset({"="})
