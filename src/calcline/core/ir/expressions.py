"""
Expression types for the calcline IR.

The tree is built bottom-up by the parser and consumed once by the
evaluator. Nodes are frozen; each parent owns its children outright.

Supports:
- Arithmetic: +, -, *, /
- Unary minus applied to a single literal: -3
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from calcline.core.formatting import format_number

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_number(self.value)


class UnaryMinus(BaseModel):
    """Negation of its operand: - operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render_expr(self)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render_expr(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | UnaryMinus | BinaryExpr

# Rebuild models for recursive forward references
UnaryMinus.model_rebuild()
BinaryExpr.model_rebuild()


def render_expr(expr: Expr) -> str:
    """Render a tree in fully parenthesized infix form.

    ``1 - 2 * 3`` renders as ``(1 - (2 * 3))`` and ``-2`` as ``(- 2)``.
    Walks with an explicit stack of pending text and nodes, so deep trees
    from long lines render without recursion.
    """
    parts: list[str] = []
    stack: list[Expr | str] = [expr]

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Literal):
            parts.append(format_number(item.value))
        elif isinstance(item, UnaryMinus):
            stack.extend((")", item.operand, "(- "))
        else:
            stack.extend((")", item.right, f" {item.op.value} ", item.left, "("))

    return "".join(parts)
