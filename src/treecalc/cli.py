"""
treecalc CLI - Entry point.

Commands:
- eval: Parse and evaluate one or more expressions
- tree: Show the parsed expression tree
- demo: Run the built-in demonstration expressions
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer

from treecalc._version import get_version
from treecalc.core.config import CalcConfig, load_config
from treecalc.core.errors import ConfigError, TreecalcError
from treecalc.core.expression_lang.calculator import calculate, format_value
from treecalc.core.expression_lang.evaluator import evaluate
from treecalc.core.expression_lang.parser import parse_expr
from treecalc.demo import run_parse_demo, run_tree_demo

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"treecalc {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


app = typer.Typer(
    help="treecalc - evaluate arithmetic expressions with a recursive descent parser",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """treecalc CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_config(
    config_path: Path | None,
    strict: bool | None,
    basic: bool,
    precision: int | None,
) -> CalcConfig:
    """Load treecalc.toml and apply command-line overrides."""
    try:
        config = load_config(config_path)
        return config.with_overrides(
            strict=strict,
            extended=False if basic else None,
            precision=precision,
        )
    except ConfigError as e:
        typer.echo(f"Error: {e.message}")
        raise typer.Exit(code=1)


@app.command("eval")
def eval_command(
    expressions: list[str] = typer.Argument(..., help="Expressions to evaluate"),
    strict: bool | None = typer.Option(
        None,
        "--strict/--lenient",
        help="Reject or ignore trailing input after an expression (default: from config)",
    ),
    basic: bool = typer.Option(
        False, "--basic", help="Only accept '+', '*' and unary '-' (no binary '-' or '/')"
    ),
    precision: int | None = typer.Option(
        None, "--precision", "-p", min=1, max=17, help="Significant digits in results"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to treecalc.toml"
    ),
) -> None:
    """
    Parse and evaluate expressions.

    Prints '<expr> = <result>' for each expression, or 'Error: <message>'.
    Exits with code 1 if any expression failed.
    """
    config = _resolve_config(config_path, strict, basic, precision)

    failures = 0
    for source in expressions:
        calc = calculate(source, config)
        typer.echo(calc.render(config.precision))
        if not calc.ok:
            failures += 1

    if failures:
        logger.debug("%d of %d expression(s) failed", failures, len(expressions))
        raise typer.Exit(code=1)


@app.command("tree")
def tree_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
    strict: bool | None = typer.Option(
        None,
        "--strict/--lenient",
        help="Reject or ignore trailing input after an expression (default: from config)",
    ),
    basic: bool = typer.Option(
        False, "--basic", help="Only accept '+', '*' and unary '-' (no binary '-' or '/')"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to treecalc.toml"
    ),
) -> None:
    """
    Show the parsed tree in fully parenthesized form, then its value.
    """
    config = _resolve_config(config_path, strict, basic, None)

    try:
        expr = parse_expr(
            expression,
            strict=config.strict,
            extended=config.extended,
            max_depth=config.max_depth,
        )
        typer.echo(f"Tree:  {expr}")
        typer.echo(f"Depth: {expr.depth}")
        value = evaluate(expr)
    except TreecalcError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Value: {format_value(value, config.precision)}")


@app.command("demo")
def demo_command(
    precision: int = typer.Option(
        6, "--precision", "-p", min=1, max=17, help="Significant digits in results"
    ),
) -> None:
    """
    Run the demonstration expressions.

    Evaluates a set of hand-built trees (including a division by zero),
    then parses and evaluates a set of expression strings.
    """
    typer.echo("Hand-built trees:")
    for calc in run_tree_demo():
        typer.echo(f"  {calc.render(precision)}")

    typer.echo("")
    typer.echo("Parsed expressions:")
    for calc in run_parse_demo():
        typer.echo(f"  {calc.render(precision)}")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
