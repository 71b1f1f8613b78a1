"""
loxfront - front end for the Lox expression language

Turns Lox source text into an expression tree:

    loxfront/
    ├── lexer/           # Tokens and the scanner
    ├── parser/          # Recursive descent parser, expression tree, printer
    ├── diagnostics.py   # Line-tagged error reports and the ErrorReporter sink
    ├── config.py        # Environment configuration
    └── cli.py           # File runner and interactive prompt

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

# The lexer has to load first: diagnostics depends on its token types
from .lexer import Scanner, Token, TokenType, scan
from .parser import AstPrinter, Parser, parse, parse_string, parse_file
from .diagnostics import Diagnostic, ErrorReporter
from .errors import LoxError

__all__ = [
    # Core classes
    "Scanner",
    "Parser",
    "AstPrinter",
    "Token",
    "TokenType",
    "ErrorReporter",
    "Diagnostic",
    "LoxError",

    # Entry points
    "scan",
    "parse",
    "parse_string",
    "parse_file",

    # Version info
    "__version__",
    "__license__",
]
