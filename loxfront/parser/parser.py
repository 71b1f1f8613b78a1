"""
Lox Recursive Descent Parser

One method per precedence level, lowest first:

    expression -> equality
    equality   -> comparison (("!=" | "==") comparison)*
    comparison -> term ((">" | ">=" | "<" | "<=") term)*
    term       -> factor (("+" | "-") factor)*
    factor     -> unary (("*" | "/") unary)*
    unary      -> ("!" | "-") unary | primary
    primary    -> "true" | "false" | "nil" | NUMBER | STRING | "(" expression ")"

Binary levels are left-associative; unary is right-recursive.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..lexer.tokens import Token, TokenType, eof_token
from ..diagnostics import ErrorReporter
from .ast_nodes import Binary, Expr, Grouping, Literal, Unary
from .errors import (
    ParseError, create_expected_expression_error, create_missing_token_error, create_nesting_error
)

logger = logging.getLogger(__name__)


# Operators accepted at each binary precedence level
EQUALITY_OPERATORS = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
COMPARISON_OPERATORS = (
    TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL,
)
TERM_OPERATORS = (TokenType.PLUS, TokenType.MINUS)
FACTOR_OPERATORS = (TokenType.STAR, TokenType.SLASH)
UNARY_OPERATORS = (TokenType.BANG, TokenType.MINUS)

# Keyword literals and the value each one produces
KEYWORD_LITERALS = {
    TokenType.TRUE: True,
    TokenType.FALSE: False,
    TokenType.NIL: None,
}


class Parser:
    """
    Lox expression parser.

    Reads a single expression from the token list. The first syntax error
    ends the parse; it is reported to the ErrorReporter and parse() returns
    None instead of a partial tree.
    """

    def __init__(self, tokens: List[Token], reporter: Optional[ErrorReporter] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the scanner, normally ending with EOF
            reporter: Sink for the syntax error, if one occurs
        """
        self.tokens = tokens
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.current = 0

    def parse(self) -> Optional[Expr]:
        """
        Parse the token stream into an expression tree.

        Returns:
            The expression tree, or None if a syntax error was reported
        """
        self.current = 0
        try:
            expr = self._expression()
        except ParseError as e:
            self.reporter.report(e.diagnostic)
            logger.debug("Parse aborted at token %r", e.token)
            return None
        except RecursionError:
            # Nesting deeper than the interpreter stack allows
            error = create_nesting_error(self._peek())
            self.reporter.report(error.diagnostic)
            logger.debug("Parse aborted at token %r: nesting too deep", error.token)
            return None

        logger.debug("Parsed expression from %d of %d tokens", self.current, len(self.tokens))
        return expr

    # Grammar rules

    def _expression(self) -> Expr:
        return self._equality()

    def _equality(self) -> Expr:
        return self._binary(self._comparison, EQUALITY_OPERATORS)

    def _comparison(self) -> Expr:
        return self._binary(self._term, COMPARISON_OPERATORS)

    def _term(self) -> Expr:
        return self._binary(self._factor, TERM_OPERATORS)

    def _factor(self) -> Expr:
        return self._binary(self._unary, FACTOR_OPERATORS)

    def _binary(self, operand: Callable[[], Expr], operators) -> Expr:
        """Parse one left-associative level: operand (op operand)*."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            # Fold into the left side so `a - b - c` is `(a - b) - c`
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expr:
        if self._match(*UNARY_OPERATORS):
            operator = self._previous()
            return Unary(operator, self._unary())

        return self._primary()

    def _primary(self) -> Expr:
        token = self._peek()

        if token.type in KEYWORD_LITERALS:
            self._advance()
            return Literal(KEYWORD_LITERALS[token.type])

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise create_expected_expression_error(token)

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Token lists without a trailing EOF behave as if they had one
        line = self.tokens[-1].line if self.tokens else 1
        return eof_token(line)

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()
        raise create_missing_token_error(message, self._peek())


def parse(tokens: List[Token], reporter: Optional[ErrorReporter] = None) -> Optional[Expr]:
    """Convenience function: parse one expression from a token list."""
    return Parser(tokens, reporter).parse()


def parse_string(source: str, reporter: Optional[ErrorReporter] = None) -> Optional[Expr]:
    """
    Convenience function to scan and parse a source string.

    Lexical errors are reported but do not stop the parse; the parser sees
    whatever tokens the scanner managed to produce.

    Args:
        source: Source code string
        reporter: Sink shared by the scanner and the parser

    Returns:
        Expression tree, or None on a syntax error
    """
    from ..lexer import scan

    reporter = reporter if reporter is not None else ErrorReporter()
    tokens = scan(source, reporter)
    return Parser(tokens, reporter).parse()


def parse_file(filepath: Union[str, Path], reporter: Optional[ErrorReporter] = None) -> Optional[Expr]:
    """
    Convenience function to parse a source file.

    Raises:
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, reporter)
