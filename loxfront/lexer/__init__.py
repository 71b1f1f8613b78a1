"""
Lox Lexer Package

Implements the scanner for the Lox expression front end.

Key Features:
- Single-pass scanning with one character of lookahead (two for numbers)
- Keyword recognition through a fixed lookup table
- Error resilience: bad characters are reported and skipped
- Line tracking through strings and comments for diagnostics
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, scan
from .errors import LexerError

__all__ = [
    "Scanner",
    "scan",
    "Token",
    "TokenType",
    "KEYWORDS",
    "LexerError",
]
