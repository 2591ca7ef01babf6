"""
Expression evaluator for the calcline expression language.

Reduces expression trees to floats. Pure evaluation: no I/O, no side
effects, and the tree is never mutated. Does NOT use Python's eval().
"""

from __future__ import annotations

from collections.abc import Iterable

from calcline.core.errors import DivisionByZero, EvalError
from calcline.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal, UnaryMinus


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    Division uses IEEE-754 semantics, so overflow to infinity is allowed;
    only a divisor of exactly zero is rejected.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value.

    Raises:
        DivisionByZero: If a divisor reduces to 0.0.
    """
    return _interpret(expr)


def evaluate_program(exprs: Iterable[Expr]) -> list[float]:
    """Evaluate each top-level term in order, failing on the first error."""
    return [_interpret(expr) for expr in exprs]


def _interpret(expr: Expr) -> float:
    """Reduce a tree bottom-up with an explicit stack, left operand first.

    Trees built from long lines are as deep as the line has operators, so
    the walk never recurses.
    """
    stack: list[tuple[Expr, bool]] = [(expr, False)]
    values: list[float] = []

    while stack:
        node, expanded = stack.pop()

        if isinstance(node, Literal):
            values.append(node.value)
        elif isinstance(node, UnaryMinus):
            if expanded:
                values.append(-values.pop())
            else:
                stack.append((node, True))
                stack.append((node.operand, False))
        elif isinstance(node, BinaryExpr):
            if expanded:
                right = values.pop()
                left = values.pop()
                values.append(_apply(node.op, left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise EvalError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _apply(op: BinaryOp, left: float, right: float) -> float:
    """Apply a binary operator to two reduced operands."""
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUB:
        return left - right
    if op == BinaryOp.MUL:
        return left * right
    if op == BinaryOp.DIV:
        if right == 0.0:
            raise DivisionByZero()
        return left / right

    raise EvalError(f"Unknown binary op: {op}")
