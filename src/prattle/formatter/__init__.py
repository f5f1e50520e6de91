"""prattle formatter module.

Exports the ``ExpressionFormatter`` class and the ``format_expression``
and ``describe`` convenience functions.
"""
from __future__ import annotations

from prattle.formatter.formatter import ExpressionFormatter, describe, format_expression

__all__ = ["ExpressionFormatter", "format_expression", "describe"]
