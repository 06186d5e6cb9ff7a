"""
treecalc Intermediate Representation (IR) types.

The expression tree node models and the ``Expr`` union.
"""

from .expressions import (
    Add,
    BinaryExpr,
    Constant,
    Divide,
    Expr,
    Multiply,
    Negate,
    Subtract,
    format_number,
    render,
)

__all__ = [
    "Add",
    "BinaryExpr",
    "Constant",
    "Divide",
    "Expr",
    "Multiply",
    "Negate",
    "Subtract",
    "format_number",
    "render",
]
