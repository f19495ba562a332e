"""Expression helpers for attribute and parameter arguments.

Only literal expressions exist, so evaluating one means checking its shape
and unwrapping the literal.

Python 3.13+. Zero external dependencies.
"""

from bajzel.diagnostics import ErrorTemplate, ExprError
from bajzel.syntax.ast import (
    BytesLiteral,
    Expr,
    GroupExpr,
    IntegerLiteral,
    Literal,
    ReservedLiteral,
    StringLiteral,
)

__all__ = ["describe_literal", "expr_items", "expr_literal", "expr_to_int"]


def describe_literal(literal: Literal) -> str:
    """Short name of a literal kind, for error messages."""
    match literal:
        case IntegerLiteral():
            return "integer"
        case StringLiteral():
            return "string"
        case BytesLiteral():
            return "bytes"
        case ReservedLiteral(name=name):
            return name


def expr_items(expr: Expr) -> tuple[Expr, ...]:
    """Arguments of an attribute call: the group items, or the expression itself."""
    if GroupExpr.guard(expr):
        return expr.items
    return (expr,)


def expr_literal(expr: Expr, context: str) -> Literal:
    """Unwrap a single-literal expression.

    Raises:
        ExprError: If expr is a group
    """
    if GroupExpr.guard(expr):
        raise ExprError(ErrorTemplate.group_not_expected(context))
    return expr.literal


def expr_to_int(expr: Expr, context: str) -> int:
    """Evaluate an expression to an integer.

    Example:
        >>> expr_to_int(LiteralExpr(IntegerLiteral(42)), "RANGE")
        42

    Raises:
        ExprError: If expr is a group or a non-integer literal
    """
    literal = expr_literal(expr, context)
    if not isinstance(literal, IntegerLiteral):
        raise ExprError(ErrorTemplate.integer_expected(context, describe_literal(literal)))
    return literal.value
