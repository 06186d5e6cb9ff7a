"""
Recursive descent parser for treecalc arithmetic expressions.

Grammar (precedence low to high):
    expression  → term (("+" | "-") term)*
    term        → primary (("*" | "/") primary)*
    primary     → "-" primary | "(" expression ")" | NUMBER
    NUMBER      → ["+"] (digits ["." digits] | "." digits) [exponent]

Binary "-" and "/" belong to the extended grammar and are only
recognised when ``extended=True``; the basic grammar knows "+", "*"
and unary "-" only.

Tokenizing is implicit: the parser walks the characters directly and
skips whitespace before every lookahead and every consume.
"""

from __future__ import annotations

import logging
import re

from treecalc.core.errors import (
    ExpectedCloseParenError,
    ExpectedNumberError,
    NestingTooDeepError,
    UnexpectedTrailingInputError,
)
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

DEFAULT_MAX_DEPTH = 100

# End-of-input sentinel returned by peek()/advance()
EOF = ""

_WHITESPACE = " \t\n\r\f\v"

# Decimal float literal with an optional "+" sign; "-" is unary minus in the grammar
_NUMBER_RE = re.compile(r"\+?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class _Parser:
    """Recursive descent parser over a character cursor."""

    def __init__(self, source: str, *, extended: bool, max_depth: int) -> None:
        self.source = source
        self.pos = 0
        self.extended = extended
        self.max_depth = max_depth
        self.depth = 0

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.source) and self.source[self.pos] in _WHITESPACE:
            self.pos += 1

    def peek(self) -> str:
        """Next non-whitespace character, without consuming it."""
        self._skip_whitespace()
        if self.pos < len(self.source):
            return self.source[self.pos]
        return EOF

    def advance(self) -> str:
        """Skip whitespace, then consume and return the next character."""
        c = self.peek()
        if c != EOF:
            self.pos += 1
        return c

    def match(self, chars: str) -> str | None:
        c = self.peek()
        if c != EOF and c in chars:
            return self.advance()
        return None

    def expect_close_paren(self) -> None:
        if self.peek() != ")":
            raise ExpectedCloseParenError("Expected ')'", self.pos, self.source)
        self.advance()

    @property
    def at_end(self) -> bool:
        return self.peek() == EOF

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        """term (('+' | '-') term)*"""
        ops = "+-" if self.extended else "+"
        left = self.parse_term()
        while op := self.match(ops):
            right = self.parse_term()
            if op == "+":
                left = Add(left=left, right=right)
            else:
                left = Subtract(left=left, right=right)
        return left

    def parse_term(self) -> Expr:
        """primary (('*' | '/') primary)*"""
        ops = "*/" if self.extended else "*"
        left = self.parse_primary()
        while op := self.match(ops):
            right = self.parse_primary()
            if op == "*":
                left = Multiply(left=left, right=right)
            else:
                left = Divide(left=left, right=right)
        return left

    def parse_primary(self) -> Expr:
        """'-' primary | '(' expression ')' | NUMBER"""
        c = self.peek()

        # Unary minus
        if c == "-":
            self.advance()
            self._enter()
            operand = self.parse_primary()
            self.depth -= 1
            return Negate(operand=operand)

        # Parenthesized expression
        if c == "(":
            self.advance()
            self._enter()
            expr = self.parse_expression()
            self.expect_close_paren()
            self.depth -= 1
            return expr

        return self._parse_number()

    def _parse_number(self) -> Constant:
        m = _NUMBER_RE.match(self.source, self.pos)
        if m is None:
            raise ExpectedNumberError("Expected number", self.pos, self.source)
        self.pos = m.end()
        return Constant(value=float(m.group(0)))

    def _enter(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeepError(
                f"Expression nested deeper than {self.max_depth} levels",
                self.pos,
                self.source,
            )


def parse_expr(
    source: str,
    *,
    strict: bool = False,
    extended: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Expr:
    """Parse an expression string into an expression tree.

    Args:
        source: Expression string (e.g., "13.75 + 22 * 15")
        strict: Reject characters left over after a complete expression.
            When False, trailing input is silently ignored.
        extended: Accept binary "-" and "/" in addition to "+" and "*".
        max_depth: Maximum nesting of parentheses and unary minus.

    Returns:
        Root of the parsed expression tree.

    Raises:
        ExpectedNumberError: If a number, "-" or "(" is missing.
        ExpectedCloseParenError: If a "(" group is not closed.
        UnexpectedTrailingInputError: In strict mode, if input remains.
        NestingTooDeepError: If nesting exceeds max_depth.
    """
    parser = _Parser(source, extended=extended, max_depth=max_depth)
    expr = parser.parse_expression()

    if not parser.at_end:
        if strict:
            raise UnexpectedTrailingInputError(
                f"Unexpected input after expression: {source[parser.pos :]!r}",
                parser.pos,
                source,
            )
        logger.debug("Ignoring trailing input %r", source[parser.pos :])

    logger.debug("Parsed %r as %s", source, expr)
    return expr
