#!/usr/bin/env python3
"""Example: Quickstart — prattle

Minimal working example: tokenize an expression, parse it, print the
tree, render it back to canonical infix, evaluate it, and extend the
grammar with a new operator binding.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install prattle
"""
from __future__ import annotations

import prattle
from prattle.grammar import TokenKind
from prattle.parser import BinaryOperatorParselet, ParseError, default_registry

SOURCE = "area = width * (height + 2) / 2"


def main() -> None:
    print(f"prattle version: {prattle.__version__}")

    # Step 1: Tokenize
    tokens = prattle.tokenize(SOURCE)
    print(f"Tokens: {' '.join(t.text for t in tokens)}")

    # Step 2: Parse into an AST
    tree = prattle.parse(SOURCE)
    print(f"Tree: {prattle.describe(tree)}")

    # Step 3: Canonical infix; re-parses to the same tree
    canonical = prattle.format(tree)
    print(f"Canonical: {canonical}")
    assert prattle.parse(canonical) == tree

    # Step 4: Evaluate in a flat namespace
    env = prattle.Environment({"width": 4, "height": 6})
    print(f"Value: {prattle.evaluate(tree, env)}  (area={env['area']})")

    # Step 5: Errors carry a kind and a source offset
    try:
        prattle.parse("(1 + 2")
    except ParseError as exc:
        print(f"Error: {exc.kind.name} at offset {exc.offset}")

    # Step 6: A registry copy with '/' binding tighter than '*'
    registry = default_registry()
    registry.register_infix(TokenKind.SLASH, BinaryOperatorParselet(), 8, replace=True)
    print(f"Tight division: {prattle.describe(prattle.parse('a * b / c', registry))}")


if __name__ == "__main__":
    main()
