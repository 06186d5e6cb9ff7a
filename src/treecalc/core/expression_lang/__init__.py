"""
treecalc expression language.

Recursive descent parser and tree-walking evaluator for arithmetic
expressions over +, -, *, / and unary minus.

Usage:
    from treecalc.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("2 * (3 + 4)")
    result = evaluate(expr)
    # result == 14.0
"""

from treecalc.core.expression_lang.evaluator import evaluate
from treecalc.core.expression_lang.parser import parse_expr

__all__ = ["evaluate", "parse_expr"]
