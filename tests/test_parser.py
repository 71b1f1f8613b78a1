"""
Test suite for the Lox parser.

Tests cover:
- Operator precedence and associativity
- Primary expressions (literals, grouping)
- Syntax error reporting and the abort-on-first-error policy
"""

import dataclasses
import os
import sys
import tempfile
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxfront.diagnostics import ErrorReporter
from loxfront.lexer import Token, TokenType, scan
from loxfront.parser import (
    AstPrinter, Binary, Grouping, Literal, Parser, Unary, parse, parse_file, parse_string,
)


class TestParser(unittest.TestCase):
    """Test cases for the parser."""

    def setUp(self):
        """Set up test fixtures."""
        self.reporter = ErrorReporter()
        self.printer = AstPrinter()

    def _parse(self, source: str):
        """Helper to scan and parse a snippet."""
        tokens = scan(source, self.reporter)
        return parse(tokens, self.reporter)

    def _print(self, source: str) -> str:
        expr = self._parse(source)
        self.assertIsNotNone(expr, f"Unexpected errors: {self.reporter.diagnostics}")
        return self.printer.print(expr)

    def test_factor_binds_tighter_than_term(self):
        self.assertEqual(self._print("1 + 2 * 3"), "(+ 1 (* 2 3))")
        self.assertEqual(self._print("1 * 2 + 3"), "(+ (* 1 2) 3)")

    def test_binary_levels_are_left_associative(self):
        self.assertEqual(self._print("1 - 2 - 3"), "(- (- 1 2) 3)")
        self.assertEqual(self._print("8 / 4 / 2"), "(/ (/ 8 4) 2)")
        self.assertEqual(self._print("1 == 2 != 3"), "(!= (== 1 2) 3)")

    def test_unary_is_right_recursive(self):
        self.assertEqual(self._print("- - 1"), "(- (- 1))")
        self.assertEqual(self._print("--1"), "(- (- 1))")
        self.assertEqual(self._print("!!true"), "(! (! true))")

    def test_unary_binds_tighter_than_factor(self):
        self.assertEqual(self._print("-2 * 3"), "(* (- 2) 3)")

    def test_full_precedence_cascade(self):
        self.assertEqual(
            self._print("1 + 2 > 3 == !false"),
            "(== (> (+ 1 2) 3) (! false))",
        )
        self.assertEqual(
            self._print("1 < 2 <= 3 > 4 >= 5"),
            "(>= (> (<= (< 1 2) 3) 4) 5)",
        )

    def test_grouping_overrides_precedence(self):
        self.assertEqual(self._print("(1 + 2) * 3"), "(* (group (+ 1 2)) 3)")
        self.assertEqual(self._print("((1))"), "(group (group 1))")

    def test_literals(self):
        self.assertEqual(self._print("nil"), "nil")
        self.assertEqual(self._print("true"), "true")
        self.assertEqual(self._print("false"), "false")
        self.assertEqual(self._print('"hi there"'), "hi there")
        self.assertEqual(self._print("45.67"), "45.67")

    def test_tree_structure(self):
        expr = self._parse("1 - 2")

        self.assertIsInstance(expr, Binary)
        self.assertEqual(expr.left, Literal(1.0))
        self.assertEqual(expr.operator.type, TokenType.MINUS)
        self.assertEqual(expr.right, Literal(2.0))
        self.assertEqual(expr.children(), [Literal(1.0), Literal(2.0)])

    def test_unary_and_grouping_nodes(self):
        expr = self._parse("-(nil)")

        self.assertIsInstance(expr, Unary)
        self.assertIsInstance(expr.operand, Grouping)
        self.assertEqual(expr.operand.inner, Literal(None))

    def test_nodes_are_immutable(self):
        expr = self._parse("1 + 2")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            expr.left = Literal(5.0)

    def test_missing_right_paren(self):
        expr = self._parse("(1 + 2")

        self.assertIsNone(expr)
        self.assertEqual(len(self.reporter.diagnostics), 1)
        self.assertEqual(
            str(self.reporter.diagnostics[0]),
            "[line 1] Error at end: Expect ')' after expression.",
        )

    def test_wrong_token_instead_of_right_paren(self):
        self.assertIsNone(self._parse("(1 2)"))
        self.assertEqual(self.reporter.diagnostics[0].where, " at '2'")

    def test_missing_operand(self):
        self.assertIsNone(self._parse("1 +"))

        diagnostic = self.reporter.diagnostics[0]
        self.assertEqual(diagnostic.message, "Unexpected '' at line 1, expect an expression.")
        self.assertEqual(diagnostic.where, " at end")

    def test_token_that_cannot_start_expression(self):
        self.assertIsNone(self._parse("\n\n)"))

        diagnostic = self.reporter.diagnostics[0]
        self.assertEqual(diagnostic.line, 3)
        self.assertEqual(
            str(diagnostic),
            "[line 3] Error at ')': Unexpected ')' at line 3, expect an expression.",
        )

    def test_identifiers_are_not_expressions(self):
        self.assertIsNone(self._parse("x + 1"))
        self.assertIn("Unexpected 'x'", self.reporter.diagnostics[0].message)

    def test_only_first_syntax_error_is_reported(self):
        self.assertIsNone(self._parse("(1 + (2 * )"))
        self.assertEqual(len(self.reporter.diagnostics), 1)

    def test_deeply_nested_groups_report_error(self):
        source = "(" * 200 + "1" + ")" * 200

        self.assertIsNone(parse_string(source, self.reporter))
        self.assertEqual(len(self.reporter.diagnostics), 1)
        self.assertEqual(self.reporter.diagnostics[0].message, "Expression nests too deeply.")

    def test_long_unary_chain_reports_error(self):
        self.assertIsNone(parse_string("-" * 2000 + "1", self.reporter))
        self.assertEqual(len(self.reporter.diagnostics), 1)
        self.assertEqual(self.reporter.diagnostics[0].message, "Expression nests too deeply.")

        # The parser is still usable afterwards
        expr = parse_string("-1", ErrorReporter())
        self.assertEqual(expr, Unary(Token(TokenType.MINUS, "-", None, 1), Literal(1.0)))

    def test_empty_input(self):
        self.assertIsNone(self._parse(""))
        self.assertEqual(self.reporter.diagnostics[0].where, " at end")

    def test_trailing_tokens_are_left_unparsed(self):
        parser = Parser(scan("1 2", self.reporter), self.reporter)
        expr = parser.parse()

        self.assertEqual(expr, Literal(1.0))
        self.assertFalse(self.reporter.has_errors())
        self.assertEqual(parser.current, 1)

    def test_token_list_without_eof(self):
        tokens = [Token(TokenType.NUMBER, "7", 7.0, 1)]
        self.assertEqual(parse(tokens, self.reporter), Literal(7.0))

    def test_empty_token_list(self):
        self.assertIsNone(parse([], self.reporter))
        self.assertEqual(self.reporter.diagnostics[0].line, 1)

    def test_parser_without_reporter(self):
        parser = Parser(scan("("))
        self.assertIsNone(parser.parse())
        self.assertTrue(parser.reporter.has_errors())

    def test_parse_string_keeps_going_after_lexical_error(self):
        expr = parse_string("1 @ + 2", self.reporter)

        self.assertEqual(self.printer.print(expr), "(+ 1 2)")
        self.assertEqual([d.message for d in self.reporter.diagnostics], ["Unexpected character."])

    def test_parse_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "expr.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("// product\n(2 + 3) * 4\n")

            expr = parse_file(path, self.reporter)

        self.assertEqual(self.printer.print(expr), "(* (group (+ 2 3)) 4)")

    def test_parse_file_missing(self):
        with self.assertRaises(OSError):
            parse_file(os.path.join(tempfile.gettempdir(), "no-such-file.lox"))


if __name__ == '__main__':
    unittest.main()
