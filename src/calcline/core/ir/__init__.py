"""Intermediate representation for parsed calculator input."""

from calcline.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryMinus,
    render_expr,
)

__all__ = ["BinaryExpr", "BinaryOp", "Expr", "Literal", "UnaryMinus", "render_expr"]
