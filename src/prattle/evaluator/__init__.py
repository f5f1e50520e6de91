"""prattle evaluator module.

Exports the ``Evaluator``, its flat ``Environment``, and ``EvaluationError``.
"""
from __future__ import annotations

from prattle.evaluator.evaluator import (
    BINARY_OPERATORS,
    UNARY_OPERATORS,
    Environment,
    EvaluationError,
    Evaluator,
    evaluate,
)

__all__ = [
    "Evaluator",
    "Environment",
    "EvaluationError",
    "evaluate",
    "UNARY_OPERATORS",
    "BINARY_OPERATORS",
]
