"""
Lox Parser Package

Implements a recursive descent parser for Lox expressions and the
expression tree it produces.

Key Features:
- Precedence cascade: equality < comparison < term < factor < unary < primary
- Immutable expression nodes with a double-dispatch visitor interface
- Prefix-notation AstPrinter for inspecting parse results
- Abort-on-first-error policy with a single reported diagnostic
"""

from .ast_nodes import Expr, ExprVisitor, Binary, Grouping, Literal, Unary
from .parser import Parser, parse, parse_string, parse_file
from .printer import AstPrinter
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "parse", "parse_string", "parse_file",

    # Expression tree
    "Expr", "ExprVisitor",
    "Binary", "Grouping", "Literal", "Unary",
    "AstPrinter",

    # Error handling
    "ParseError",
]
