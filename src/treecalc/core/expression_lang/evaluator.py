"""
Expression evaluator for treecalc.

Folds an expression tree into a single float, children first.
Pure evaluation: no I/O, no side effects, no Python eval().
"""

from __future__ import annotations

import logging

from treecalc.core.errors import DivisionByZeroError, EvaluationError
from treecalc.core.ir.expressions import (
    Add,
    Constant,
    Divide,
    Expr,
    Multiply,
    Negate,
    Subtract,
)

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    This is a tree-walking interpreter over the closed set of node
    types in treecalc.core.ir.expressions.

    Args:
        expr: Expression tree, built by hand or by parse_expr().

    Returns:
        The computed value.

    Raises:
        DivisionByZeroError: If any Divide's right operand evaluates to zero.
        EvaluationError: If the tree contains a non-expression node.
    """
    return _interpret(expr)


# Work-stack phases: children not yet scheduled / operands on the value stack.
# Divide has an extra phase so the divisor is checked before the dividend runs.
_VISIT = 0
_COMBINE = 1
_DIVIDE = 2


def _interpret(expr: Expr) -> float:
    """Post-order fold over an explicit stack, so tree height is not bounded by recursion."""
    values: list[float] = []
    work: list[tuple[Expr, int]] = [(expr, _VISIT)]

    while work:
        node, phase = work.pop()

        if phase == _VISIT:
            _schedule(node, work, values)
        elif isinstance(node, Divide) and phase == _COMBINE:
            # Only the divisor has been evaluated so far
            if values[-1] == 0:
                logger.debug("Division by zero in %s", node)
                raise DivisionByZeroError("Division by zero")
            work.append((node, _DIVIDE))
            work.append((node.left, _VISIT))
        else:
            values.append(_combine(node, values))

    return values.pop()


def _schedule(node: Expr, work: list[tuple[Expr, int]], values: list[float]) -> None:
    """Push a node's children (and the node itself, to combine them) onto the work stack."""
    if isinstance(node, Constant):
        values.append(node.value)
        return

    if isinstance(node, (Add, Subtract, Multiply)):
        work.append((node, _COMBINE))
        work.append((node.right, _VISIT))
        work.append((node.left, _VISIT))
        return

    if isinstance(node, Divide):
        work.append((node, _COMBINE))
        work.append((node.right, _VISIT))
        return

    if isinstance(node, Negate):
        work.append((node, _COMBINE))
        work.append((node.operand, _VISIT))
        return

    raise EvaluationError(f"Unknown expression type: {type(node).__name__}")


def _combine(node: Expr, values: list[float]) -> float:
    """Pop a node's evaluated operands and apply its operator."""
    if isinstance(node, Negate):
        return -values.pop()

    if isinstance(node, Divide):
        dividend = values.pop()
        divisor = values.pop()
        return dividend / divisor

    right = values.pop()
    left = values.pop()
    if isinstance(node, Add):
        return left + right
    if isinstance(node, Subtract):
        return left - right
    return left * right
