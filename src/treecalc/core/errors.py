"""
Error types for treecalc parsing, evaluation, and configuration.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class ErrorKind(StrEnum):
    """Stable, machine-readable error categories."""

    EXPECTED_NUMBER = "expected_number"
    EXPECTED_CLOSE_PAREN = "expected_close_paren"
    UNEXPECTED_TRAILING_INPUT = "unexpected_trailing_input"
    NESTING_TOO_DEEP = "nesting_too_deep"
    DIVISION_BY_ZERO = "division_by_zero"
    UNKNOWN_NODE = "unknown_node"
    CONFIG = "config"
    PARSE = "parse"
    GENERIC = "generic"


class TreecalcError(Exception):
    """Base exception for all treecalc errors."""

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(TreecalcError):
    """
    Raised when expression text cannot be parsed.

    Attributes:
        pos: 0-indexed character offset where parsing failed
        source: The text being parsed, when known
    """

    kind = ErrorKind.PARSE

    def __init__(self, message: str, pos: int = 0, source: str | None = None):
        self.pos = pos
        self.source = source
        context = ErrorContext(source=source, column=pos + 1) if source is not None else None
        super().__init__(message, context)


class ExpectedNumberError(ParseError):
    """A primary position holds no number, '-' or '('."""

    kind = ErrorKind.EXPECTED_NUMBER


class ExpectedCloseParenError(ParseError):
    """A parenthesized group is missing its ')'."""

    kind = ErrorKind.EXPECTED_CLOSE_PAREN


class UnexpectedTrailingInputError(ParseError):
    """Characters remain after a complete expression (strict mode only)."""

    kind = ErrorKind.UNEXPECTED_TRAILING_INPUT


class NestingTooDeepError(ParseError):
    """Parentheses or unary minus nested beyond the configured limit."""

    kind = ErrorKind.NESTING_TOO_DEEP


class EvaluationError(TreecalcError):
    """
    Raised when an expression tree cannot be evaluated.

    Examples:
    - Division by zero
    - A node that is not part of the expression union
    """

    kind = ErrorKind.UNKNOWN_NODE


class DivisionByZeroError(EvaluationError):
    """The right operand of a Divide evaluated to exactly zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


class ConfigError(TreecalcError):
    """
    Raised when treecalc configuration cannot be loaded.

    Examples:
    - Malformed TOML
    - Values outside their allowed range
    """

    kind = ErrorKind.CONFIG


@dataclass
class ErrorContext:
    """
    Location of a parse error within a single-line expression.

    Attributes:
        source: The expression text
        column: Column number (1-indexed)
    """

    source: str
    column: int

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            The column, the source line, and a caret under the error column
        """
        return f"column {self.column}\n{self._format_snippet()}"

    def _format_snippet(self) -> str:
        """Format the source with an error marker under the failing column."""
        prefix = "    | "
        marker_pos = len(prefix) + self.column - 1
        return f"{prefix}{self.source}\n" + " " * marker_pos + "^"
