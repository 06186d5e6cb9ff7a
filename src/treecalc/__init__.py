"""
treecalc - arithmetic expression trees and a recursive descent parser.

Build an expression tree by hand or parse one from infix text, then
evaluate it:

    from treecalc import parse_expr, evaluate

    evaluate(parse_expr("13.75 + 22 * 15"))  # 343.75
"""

from __future__ import annotations

from ._version import get_version
from .core.config import CalcConfig, load_config
from .core.errors import (
    ConfigError,
    DivisionByZeroError,
    ErrorKind,
    EvaluationError,
    ExpectedCloseParenError,
    ExpectedNumberError,
    NestingTooDeepError,
    ParseError,
    TreecalcError,
    UnexpectedTrailingInputError,
)
from .core.expression_lang import evaluate, parse_expr
from .core.expression_lang.calculator import Calculation, calculate
from .core.ir import Add, Constant, Divide, Expr, Multiply, Negate, Subtract

__version__ = get_version()

__all__ = [
    "__version__",
    # Expression tree
    "Add",
    "Constant",
    "Divide",
    "Expr",
    "Multiply",
    "Negate",
    "Subtract",
    # Operations
    "evaluate",
    "parse_expr",
    "calculate",
    "Calculation",
    # Configuration
    "CalcConfig",
    "load_config",
    # Errors
    "TreecalcError",
    "ErrorKind",
    "ParseError",
    "ExpectedNumberError",
    "ExpectedCloseParenError",
    "UnexpectedTrailingInputError",
    "NestingTooDeepError",
    "EvaluationError",
    "DivisionByZeroError",
    "ConfigError",
]
