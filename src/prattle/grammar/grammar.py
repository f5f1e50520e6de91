"""Reference grammar and binding precedences for prattle expressions.

The grammar is implemented by table-driven precedence climbing (see
``prattle.parser``), so the EBNF below is documentation of what the
default parselet registry accepts rather than an input to a parser
generator.  The ``Precedence`` levels are the single source of the
numbers the default registry registers.

Grammar notation used here:
    ``::=``     production rule
    ``|``       alternation
    ``( )``     grouping
    ``{ }``     zero or more repetitions
    ``NUMBER``  terminal: digits with at most one decimal point
    ``IDENT``   terminal: a run starting with a letter
"""
from __future__ import annotations

from enum import IntEnum


class Precedence(IntEnum):
    """Binding power of the default grammar's operators.

    Higher binds tighter.  ``LOWEST`` is what the engine starts with and
    what end-of-input and unregistered infix tokens report.
    """

    LOWEST = 0
    ASSIGNMENT = 1
    SUM = 5
    PRODUCT = 7
    PREFIX = 10


GRAMMAR_EXPRESSION = """
expression ::= assignment

assignment ::= sum ( '=' assignment )?          (* right-associative *)

sum        ::= product { ( '+' | '-' ) product }

product    ::= prefix { ( '*' | '/' ) prefix }

prefix     ::= ( '+' | '-' ) prefix
             | primary

primary    ::= NUMBER
             | IDENT
             | '(' expression ')'
"""

GRAMMAR_ARITHMETIC = """
expression ::= sum

sum        ::= product { ( '+' | '-' ) product }

product    ::= prefix { ( '*' | '/' ) prefix }

prefix     ::= ( '+' | '-' ) prefix
             | primary

primary    ::= NUMBER
             | IDENT
             | '(' expression ')'
"""

# Operators whose repeated occurrences group to the right.
RIGHT_ASSOCIATIVE_OPERATORS: frozenset[str] = frozenset({"="})
