"""Tree-walking evaluator over a flat variable namespace.

Evaluates the trees the parser produces.  There is exactly one scope:
an ``Environment`` mapping names to numbers.  ``name = expr`` binds the
value of ``expr`` to ``name`` and yields that value, so chained
assignment ``a = b = 1`` binds both names.

Operators are looked up by their text in two tables, which an
``Evaluator`` can be given to match a grammar that registers extra
operators.
"""
from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Iterator, MutableMapping

from prattle.ast.nodes import BinaryOp, Identifier, Literal, Node, UnaryOp

logger = logging.getLogger(__name__)

Number = int | float

UNARY_OPERATORS: dict[str, Callable[[Number], Number]] = {
    "+": operator.pos,
    "-": operator.neg,
}

BINARY_OPERATORS: dict[str, Callable[[Number, Number], Number]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

ASSIGNMENT_OPERATOR = "="


class EvaluationError(Exception):
    """Raised when a well-formed tree cannot be evaluated.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    node:
        The node being evaluated when the problem was found.
    """

    def __init__(self, message: str, node: Node) -> None:
        super().__init__(f"EvaluationError: {message}")
        self.eval_message = message
        self.node = node


class Environment(MutableMapping[str, Number]):
    """The single, flat variable namespace."""

    def __init__(self, initial: dict[str, Number] | None = None) -> None:
        self._values: dict[str, Number] = dict(initial or {})

    def __getitem__(self, name: str) -> Number:
        return self._values[name]

    def __setitem__(self, name: str, value: Number) -> None:
        self._values[name] = value

    def __delitem__(self, name: str) -> None:
        del self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Environment({self._values!r})"


class Evaluator:
    """Evaluates expression trees against an ``Environment``.

    Parameters
    ----------
    environment:
        Namespace to read and assign variables in; a new empty one is
        created when omitted.
    unary_operators:
        Operator text → function for ``UnaryOp`` nodes.
    binary_operators:
        Operator text → function for ``BinaryOp`` nodes other than
        assignment.
    """

    def __init__(
        self,
        environment: Environment | None = None,
        unary_operators: dict[str, Callable[[Number], Number]] | None = None,
        binary_operators: dict[str, Callable[[Number, Number], Number]] | None = None,
    ) -> None:
        self.environment = environment if environment is not None else Environment()
        self._unary = dict(UNARY_OPERATORS if unary_operators is None else unary_operators)
        self._binary = dict(BINARY_OPERATORS if binary_operators is None else binary_operators)

    def evaluate(self, node: Node) -> Number:
        """Return the value of ``node``.

        Raises
        ------
        EvaluationError
            On an undefined name, a non-identifier assignment target,
            an operator with no implementation, division by zero, or a
            result too large to represent.
        """
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Identifier):
            try:
                return self.environment[node.name]
            except KeyError:
                raise EvaluationError(f"Name {node.name!r} is not defined", node) from None
        if isinstance(node, UnaryOp):
            func = self._unary.get(node.operator)
            if func is None:
                raise EvaluationError(f"Unsupported unary operator {node.operator!r}", node)
            return self._apply(node, func, self.evaluate(node.operand))
        if isinstance(node, BinaryOp):
            if node.operator == ASSIGNMENT_OPERATOR:
                return self._assign(node)
            return self._binary_op(node)
        raise TypeError(f"Cannot evaluate {type(node).__name__}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _assign(self, node: BinaryOp) -> Number:
        if not isinstance(node.left, Identifier):
            raise EvaluationError(
                f"Cannot assign to {node.left.describe()}; the target must be a name",
                node,
            )
        value = self.evaluate(node.right)
        self.environment[node.left.name] = value
        logger.debug("Assigned %s = %r", node.left.name, value)
        return value

    def _binary_op(self, node: BinaryOp) -> Number:
        func = self._binary.get(node.operator)
        if func is None:
            raise EvaluationError(f"Unsupported binary operator {node.operator!r}", node)
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        return self._apply(node, func, left, right)

    @staticmethod
    def _apply(node: UnaryOp | BinaryOp, func: Callable[..., Number], *args: Number) -> Number:
        try:
            return func(*args)
        except ZeroDivisionError:
            raise EvaluationError("Division by zero", node) from None
        except OverflowError:
            raise EvaluationError(
                f"Result of {node.operator!r} is too large to represent", node
            ) from None
        except ArithmeticError as exc:
            raise EvaluationError(f"Arithmetic error in {node.operator!r}: {exc}", node) from None


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def evaluate(node: Node, environment: Environment | None = None) -> Number:
    """Evaluate ``node`` in ``environment`` (a fresh one if omitted)."""
    return Evaluator(environment).evaluate(node)
