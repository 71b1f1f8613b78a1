"""
Debug printer for expression trees.

Renders a tree in fully parenthesized prefix notation, e.g.
`-123 * (45.67)` prints as `(* (- 123) (group 45.67))`. Used to check what
the parser built; it is not meant as user-facing output.
"""

from ..lexer.tokens import format_literal
from .ast_nodes import Binary, Expr, ExprVisitor, Grouping, Literal, Unary


class AstPrinter(ExprVisitor):
    """Expression visitor producing a Lisp-like string."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary_expr(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.inner)

    def visit_literal_expr(self, expr: Literal) -> str:
        return format_literal(expr.value)

    def visit_unary_expr(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.operand)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name]
        parts.extend(expr.accept(self) for expr in exprs)
        return "(" + " ".join(parts) + ")"
