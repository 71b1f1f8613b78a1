"""
Expression tree node definitions for Lox.

The node set is closed: Binary, Grouping, Literal and Unary. Nodes are
frozen dataclasses, so a tree cannot be changed once the parser has built
it, and two trees with the same shape compare equal.

Operations over the tree (printing, evaluation, ...) are written as
ExprVisitor subclasses. Each node's accept() calls the visitor method named
for its own class, so adding an operation never touches the node classes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List

from ..lexer.tokens import Token, LiteralValue


class ExprVisitor(ABC):
    """Visitor interface with one method per expression node type."""

    @abstractmethod
    def visit_binary_expr(self, expr: 'Binary') -> Any:
        pass

    @abstractmethod
    def visit_grouping_expr(self, expr: 'Grouping') -> Any:
        pass

    @abstractmethod
    def visit_literal_expr(self, expr: 'Literal') -> Any:
        pass

    @abstractmethod
    def visit_unary_expr(self, expr: 'Unary') -> Any:
        pass


class Expr(ABC):
    """Base class for all expression nodes."""

    @abstractmethod
    def accept(self, visitor: ExprVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['Expr']:
        """Get all direct child nodes."""
        pass


@dataclass(frozen=True)
class Binary(Expr):
    """Infix operation, e.g. `1 + 2`."""
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_binary_expr(self)

    def children(self) -> List[Expr]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    inner: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_grouping_expr(self)

    def children(self) -> List[Expr]:
        return [self.inner]


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value: None (nil), bool, float or str."""
    value: LiteralValue

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_literal_expr(self)

    def children(self) -> List[Expr]:
        return []


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operation, e.g. `-x` or `!ok`."""
    operator: Token
    operand: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_unary_expr(self)

    def children(self) -> List[Expr]:
        return [self.operand]
