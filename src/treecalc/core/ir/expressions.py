"""
Expression tree types for treecalc.

A closed set of immutable node types:
- Leaf: Constant (a float)
- Binary: Add, Subtract, Multiply, Divide
- Unary: Negate

Trees are built bottom-up, either by hand or by the parser, and are
read-only once constructed. Evaluation lives in
treecalc.core.expression_lang.evaluator; every node also exposes it as
``node.evaluate()``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


def format_number(value: float) -> str:
    """Render a float so that integral values drop their trailing '.0'."""
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


class _Node:
    """Behaviour shared by every expression node.

    Traversals use explicit stacks: a flat chain like ``1 + 1 + ... + 1``
    parses into a left-deep tree whose height grows with the input length.
    """

    def evaluate(self) -> float:
        """Evaluate this node and its subtrees."""
        from treecalc.core.expression_lang.evaluator import evaluate

        return evaluate(self)  # type: ignore[arg-type]

    @property
    def children(self) -> tuple[Expr, ...]:
        return ()

    def walk(self) -> Iterator[Expr]:
        """Yield this node and then every descendant, pre-order."""
        stack: list[Expr] = [self]  # type: ignore[list-item]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def depth(self) -> int:
        """Height of the tree rooted here (a leaf has depth 1)."""
        deepest = 0
        stack: list[tuple[Expr, int]] = [(self, 1)]  # type: ignore[list-item]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest

    def __str__(self) -> str:
        return render(self)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Leaf
# ---------------------------------------------------------------------------


class Constant(_Node, BaseModel):
    """A numeric constant."""

    value: float = Field(description="The constant value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_number(self.value)


# ---------------------------------------------------------------------------
# Binary operations
# ---------------------------------------------------------------------------


class _Binary(_Node):
    """Rendering and traversal for nodes with ``left``/``right`` operands."""

    @property
    def children(self) -> tuple[Expr, ...]:
        return (self.left, self.right)  # type: ignore[attr-defined]


class Add(_Binary, BaseModel):
    """left + right"""

    symbol: ClassVar[str] = "+"

    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)


class Subtract(_Binary, BaseModel):
    """left - right"""

    symbol: ClassVar[str] = "-"

    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)


class Multiply(_Binary, BaseModel):
    """left * right"""

    symbol: ClassVar[str] = "*"

    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)


class Divide(_Binary, BaseModel):
    """
    left / right.

    Evaluating a Divide whose right operand is exactly zero is an error.
    """

    symbol: ClassVar[str] = "/"

    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Unary operations
# ---------------------------------------------------------------------------


class Negate(_Node, BaseModel):
    """Arithmetic negation: -operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def children(self) -> tuple[Expr, ...]:
        return (self.operand,)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Constant | Add | Subtract | Multiply | Divide | Negate

BinaryExpr = Add | Subtract | Multiply | Divide

# Rebuild models for recursive forward references
Add.model_rebuild()
Subtract.model_rebuild()
Multiply.model_rebuild()
Divide.model_rebuild()
Negate.model_rebuild()


def render(expr: Expr) -> str:
    """Fully parenthesized text for a tree: binaries as '(l op r)', negation as '-x'."""
    parts: list[str] = []
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Constant):
            parts.append(format_number(item.value))
        elif isinstance(item, Negate):
            stack.extend([item.operand, "-"])
        else:
            stack.extend([")", item.right, f" {item.symbol} ", item.left, "("])
    return "".join(parts)
