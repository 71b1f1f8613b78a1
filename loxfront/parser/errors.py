"""
Error handling for the Lox parser.

A syntax error aborts the whole parse: the grammar has no statements, so
there is no boundary to synchronize to. ParseError unwinds to
Parser.parse(), which reports it and returns no tree.
"""

from ..diagnostics import where_for
from ..errors import LoxError
from ..lexer.tokens import Token


class ParseError(LoxError):
    """
    Exception raised when the parser encounters a syntax error.

    Keeps the offending token alongside the diagnostic.
    """

    def __init__(self, message: str, token: Token):
        super().__init__(message, token.line, where_for(token))
        self.token = token


def create_missing_token_error(message: str, found: Token) -> ParseError:
    """Create an error for a required token (e.g. ')') that is not there."""
    return ParseError(message, found)


def create_expected_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(
        f"Unexpected '{found.lexeme}' at line {found.line}, expect an expression.",
        found,
    )


NESTING_TOO_DEEP = "Expression nests too deeply."


def create_nesting_error(found: Token) -> ParseError:
    """Create an error for input nested past the interpreter's stack depth."""
    return ParseError(NESTING_TOO_DEEP, found)
