"""
Lox scanner - turns source text into tokens

Single left-to-right pass with one cursor. Lookahead is one character
(peek), plus a second one (peek_next) used only to decide whether a '.'
after a digit run starts a fractional part.
"""

import logging
from typing import List, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS, WHITESPACE,
    LiteralValue, eof_token, keyword_literal
)
from .errors import LexerError, create_invalid_character_error, create_unterminated_string_error
from ..diagnostics import ErrorReporter

logger = logging.getLogger(__name__)


class Scanner:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens ending with a single EOF
    token. Bad characters and unterminated strings are reported to the
    ErrorReporter and skipped; the scan itself never aborts.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Source code string
            reporter: Sink for lexical errors; a private one is created if omitted
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens including the trailing EOF token
        """
        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = 1

        while not self._is_at_end():
            # Beginning of the next lexeme
            self.start = self.current
            try:
                self._scan_token()
            except LexerError as e:
                # The offending lexeme is already consumed, keep going
                self.reporter.report(e.diagnostic)

        self.tokens.append(eof_token(self.line))
        logger.debug("Scanned %d tokens over %d line(s)", len(self.tokens), self.line)

        return self.tokens

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            alone, with_equal = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(with_equal if self._match("=") else alone)
        elif char == "/":
            if self._match("/"):
                # Line comment runs to end of line; the newline is scanned next
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            raise create_invalid_character_error(self.line)

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        start_line = self.line

        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self.line)

        self._advance()  # Closing quote

        # Trim the surrounding quotes
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value, line=start_line)

    def _number(self):
        while _is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self):
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        token_type = KEYWORDS.get(text, TokenType.IDENTIFIER)
        self._add_token(token_type, keyword_literal(token_type))

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is `expected`."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None,
                   line: Optional[int] = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, literal, self.line if line is None else line))

    def has_errors(self) -> bool:
        """Check if the reporter has seen any error."""
        return self.reporter.has_errors()


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


def scan(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        reporter: Sink for lexical errors

    Returns:
        List of tokens ending with EOF
    """
    return Scanner(source, reporter).scan_tokens()
