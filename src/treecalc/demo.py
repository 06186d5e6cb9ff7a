"""
Demonstration expressions.

Two sets of examples:
- TREE_CASES: trees assembled by hand, one per operator, ending with a
  division by zero
- PARSE_CASES: strings run through the parser
"""

from __future__ import annotations

from collections.abc import Iterator

from treecalc.core.config import CalcConfig
from treecalc.core.expression_lang.calculator import Calculation, calculate, evaluate_tree
from treecalc.core.ir.expressions import (
    Add,
    Constant,
    Divide,
    Expr,
    Multiply,
    Negate,
    Subtract,
)

TREE_CASES: list[tuple[str, Expr]] = [
    (
        "2 * (3 + 4)",
        Multiply(
            left=Constant(value=2),
            right=Add(left=Constant(value=3), right=Constant(value=4)),
        ),
    ),
    (
        "13.75 + 22 * 15",
        Add(
            left=Constant(value=13.75),
            right=Multiply(left=Constant(value=22), right=Constant(value=15)),
        ),
    ),
    (
        "10 - 3 * 2",
        Subtract(
            left=Constant(value=10),
            right=Multiply(left=Constant(value=3), right=Constant(value=2)),
        ),
    ),
    (
        "10 / 2 + 5",
        Add(
            left=Divide(left=Constant(value=10), right=Constant(value=2)),
            right=Constant(value=5),
        ),
    ),
    ("-4", Negate(operand=Constant(value=4))),
    ("10 / 0", Divide(left=Constant(value=10), right=Constant(value=0))),
]

PARSE_CASES: tuple[str, ...] = (
    "2 * (3 + 4)",
    "13.75 + 22 * 15",
    "-(3 + 1) * 2",
)


def run_tree_demo() -> Iterator[Calculation]:
    for label, expr in TREE_CASES:
        yield evaluate_tree(expr, label=label)


def run_parse_demo(config: CalcConfig | None = None) -> Iterator[Calculation]:
    for source in PARSE_CASES:
        yield calculate(source, config)


def run_demo(config: CalcConfig | None = None) -> Iterator[Calculation]:
    """All demo calculations: hand-built trees first, then parsed strings."""
    yield from run_tree_demo()
    yield from run_parse_demo(config)
