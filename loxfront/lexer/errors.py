"""
Error handling for the Lox scanner.

Lexical errors never stop a scan: the scanner raises one of these from the
character it cannot handle, reports it, and carries on with the next
character so a single pass can surface several problems.
"""

from ..errors import LoxError


class LexerError(LoxError):
    """
    Exception raised when the scanner cannot turn a lexeme into a token.

    Lexical reports carry no location context, only the line.
    """

    def __init__(self, message: str, line: int):
        super().__init__(message, line)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character.",
    "L002": "Unterminated string.",
}


def create_invalid_character_error(line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    return LexerError(ERROR_CODES["L001"], line)


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that runs to end of input."""
    return LexerError(ERROR_CODES["L002"], line)
