"""
Token definitions for the Lox scanner.

This module defines every token type the scanner can produce:
- Single-character punctuation and operators
- One-or-two character comparison operators
- Literals (identifiers, strings, numbers)
- Reserved keywords

plus the lookup tables the scanner uses to classify characters and words.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional, Union


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # answer, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


LiteralValue = Union[None, bool, float, str]


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Holds the token type, the exact lexeme scanned from source, the decoded
    literal value (if any) and the 1-based line the lexeme started on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: LiteralValue           # Decoded value for NUMBER, STRING, TRUE, FALSE
    line: int

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {format_literal(self.literal)}"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, {self.line})"

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES


# Lookup tables used by the scanner

KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

LITERAL_TYPES = frozenset({
    TokenType.NUMBER, TokenType.STRING, TokenType.TRUE, TokenType.FALSE, TokenType.NIL,
})

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Characters whose token changes when followed by '=': (alone, with '=')
EQUAL_SUFFIX_TOKENS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = frozenset(" \r\t")


def eof_token(line: int) -> Token:
    """Build the end-of-input marker for the given line."""
    return Token(TokenType.EOF, "", None, line)


def keyword_literal(token_type: TokenType) -> Optional[bool]:
    """Literal value carried by a keyword token (booleans only)."""
    if token_type == TokenType.TRUE:
        return True
    if token_type == TokenType.FALSE:
        return False
    return None


def format_literal(value: Any) -> str:
    """Canonical Lox text form of a literal value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # Whole numbers print without a fractional part: 3, not 3.0
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
