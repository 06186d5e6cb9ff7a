"""
Parse-and-evaluate with an explicit result record.

calculate() never raises for treecalc errors; it reports them as a
Calculation with ``error`` set, which is what the CLI and demo print.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from treecalc.core.config import CalcConfig
from treecalc.core.errors import ErrorKind, TreecalcError
from treecalc.core.expression_lang.evaluator import evaluate
from treecalc.core.expression_lang.parser import parse_expr
from treecalc.core.ir.expressions import Expr


def format_value(value: float, precision: int = 6) -> str:
    """Format a result the way iostream prints a double by default (%g)."""
    return f"{value:.{precision}g}"


class Calculation(BaseModel):
    """Outcome of evaluating one expression: a value or an error."""

    source: str = Field(description="Expression text or label")
    expression: Expr | None = Field(default=None, description="Parsed tree, if parsing succeeded")
    value: float | None = None
    error: ErrorKind | None = None
    message: str | None = Field(default=None, description="Error message, if any")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self, precision: int = 6) -> str:
        """'<source> = <value>' on success, 'Error: <message>' on failure."""
        if self.value is not None:
            return f"{self.source} = {format_value(self.value, precision)}"
        return f"Error: {self.message}"


def evaluate_tree(expr: Expr, label: str | None = None) -> Calculation:
    """Evaluate a hand-built tree, capturing treecalc errors."""
    source = label if label is not None else str(expr)
    try:
        value = evaluate(expr)
    except TreecalcError as e:
        return Calculation(source=source, expression=expr, error=e.kind, message=e.message)
    return Calculation(source=source, expression=expr, value=value)


def calculate(source: str, config: CalcConfig | None = None) -> Calculation:
    """Parse and evaluate an expression string.

    Args:
        source: Expression text.
        config: Parser options; defaults to CalcConfig().

    Returns:
        A Calculation carrying either the value or the error kind and message.
    """
    cfg = config or CalcConfig()
    try:
        expr = parse_expr(
            source,
            strict=cfg.strict,
            extended=cfg.extended,
            max_depth=cfg.max_depth,
        )
    except TreecalcError as e:
        return Calculation(source=source, error=e.kind, message=e.message)

    return evaluate_tree(expr, label=source)
