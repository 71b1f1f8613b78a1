"""
Base exception for the loxfront front end.

Lexical and syntax errors both carry a Diagnostic so the pass that catches
them can hand it straight to an ErrorReporter.
"""

from .diagnostics import Diagnostic


class LoxError(Exception):
    """Base class for errors raised while scanning or parsing Lox source."""

    def __init__(self, message: str, line: int, where: str = ""):
        super().__init__(message)
        self.diagnostic = Diagnostic(line=line, message=message, where=where)

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)
