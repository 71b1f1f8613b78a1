"""
Diagnostics for the loxfront scanner and parser.

Reports are line-tagged only (no columns) and render as

    [line 3] Error at ')': Expect expression.

The ErrorReporter is owned by whoever drives a scan/parse. It replaces a
process-wide "had error" flag: the REPL resets it between input lines and
the file runner turns it into an exit status.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .lexer.tokens import Token, TokenType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A single error report: source line, location context and message."""
    line: int
    message: str
    where: str = ""  # "", " at end" or " at '<lexeme>'"

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


def where_for(token: Token) -> str:
    """Location context used when an error is reported against a token."""
    if token.type == TokenType.EOF:
        return " at end"
    return f" at '{token.lexeme}'"


class ErrorReporter:
    """
    Collects diagnostics from the scanner and parser.

    Args:
        stream: Optional text stream every report is written to as it
            arrives (the CLI passes sys.stderr). Reports are always kept
            in ``diagnostics`` as well.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.diagnostics: List[Diagnostic] = []
        self.had_error = False

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        self.had_error = True
        logger.debug("Reported %s", diagnostic)
        if self.stream is not None:
            print(diagnostic, file=self.stream)

    def error(self, line: int, message: str) -> None:
        """Report an error that has no token to point at (lexical errors)."""
        self.report(Diagnostic(line=line, message=message))

    def error_at(self, token: Token, message: str) -> None:
        """Report an error against a token (syntax errors)."""
        self.report(Diagnostic(line=token.line, message=message, where=where_for(token)))

    def has_errors(self) -> bool:
        return self.had_error

    def reset(self) -> None:
        """Clear the error flag and collected reports before the next input."""
        self.had_error = False
        self.diagnostics.clear()
