"""
Command-line interface for loxfront.

    loxfront script.lox     scan + parse a file, print the tree
    loxfront                interactive prompt, one expression per line
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .config import get_log_level, get_prompt
from .diagnostics import ErrorReporter
from .lexer import scan
from .parser import AstPrinter, Expr, Parser
from .parser.errors import NESTING_TOO_DEEP

logger = logging.getLogger(__name__)

# sysexits.h codes used by the file runner
EXIT_OK = 0
EXIT_DATAERR = 65
EXIT_NOINPUT = 66


def build_cli_parser() -> argparse.ArgumentParser:
    cli = argparse.ArgumentParser(
        prog="loxfront",
        description="Scan and parse Lox expressions, printing the expression tree.",
    )
    cli.add_argument("script", nargs="?", help="Source file to run; omit for an interactive prompt")
    cli.add_argument("--tokens", action="store_true", help="Print each scanned token before the tree")
    cli.add_argument("--log-level", default=None, help="Logging level (overrides LOX_LOG_LEVEL)")
    cli.add_argument("--version", action="version", version=f"loxfront {__version__}")
    return cli


def run(source: str, reporter: ErrorReporter, show_tokens: bool = False,
        out: Optional[TextIO] = None) -> Optional[Expr]:
    """Scan and parse `source`, printing the tree (and tokens) to `out`."""
    out = out if out is not None else sys.stdout

    tokens = scan(source, reporter)
    if show_tokens:
        for token in tokens:
            print(token, file=out)

    expr = Parser(tokens, reporter).parse()
    if expr is None:
        return None

    try:
        rendered = AstPrinter().print(expr)
    except RecursionError:
        # Parsed fine but too deep for the recursive printer
        reporter.error(tokens[0].line, NESTING_TOO_DEEP)
        return expr
    print(rendered, file=out)
    return expr


def run_file(path: str, reporter: ErrorReporter, show_tokens: bool = False,
             out: Optional[TextIO] = None) -> int:
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except OSError as e:
        print(f"loxfront: cannot read {path}: {e.strerror or e}", file=sys.stderr)
        return EXIT_NOINPUT

    logger.debug("Running %s (%d chars)", path, len(source))
    run(source, reporter, show_tokens, out)

    # Indicate an error in the exit code
    return EXIT_DATAERR if reporter.had_error else EXIT_OK


def run_prompt(reporter: ErrorReporter, show_tokens: bool = False, prompt: Optional[str] = None,
               out: Optional[TextIO] = None) -> int:
    prompt = get_prompt() if prompt is None else prompt
    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print(file=out if out is not None else sys.stdout)
            return EXIT_OK
        run(line, reporter, show_tokens, out)
        # One bad line must not poison the next
        reporter.reset()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_cli_parser().parse_args(argv)
    logging.basicConfig(
        level=get_log_level(args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    reporter = ErrorReporter(stream=sys.stderr)
    if args.script:
        return run_file(args.script, reporter, args.tokens)
    return run_prompt(reporter, args.tokens)


if __name__ == "__main__":
    sys.exit(main())
