"""
Test suite for the quickcalc lexer.

Tests cover:
- Numbers with fractions and upper-case exponents
- Operators, parentheses and identifiers
- Positions of tokens and of lexical errors

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from quickcalc.lexer import Lexer, tokenize_string, TokenType, UnexpectedCharacter, ErrorKind


class TestLexer(unittest.TestCase):
    """Test cases for the lexer."""

    def _types(self, source: str):
        return [token.type for token in tokenize_string(source)]

    def test_empty_input_is_only_eof(self):
        tokens = tokenize_string("")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.EOF)
        self.assertEqual(tokens[0].position, 0)

    def test_whitespace_only_is_only_eof(self):
        tokens = tokenize_string("   \t ")
        self.assertEqual([t.type for t in tokens], [TokenType.EOF])
        self.assertEqual(tokens[0].position, 5)

    def test_simple_expression(self):
        """Test token types and positions for 2 + 3 * 4."""
        tokens = tokenize_string("2 + 3 * 4")
        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER,
             TokenType.STAR, TokenType.NUMBER, TokenType.EOF]
        )
        self.assertEqual([t.position for t in tokens], [0, 2, 4, 6, 8, 9])
        self.assertEqual(tokens[0].value, 2.0)

    def test_all_operators(self):
        self.assertEqual(
            self._types("+-*/^()"),
            [TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH,
             TokenType.CARET, TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.EOF]
        )

    def test_number_forms(self):
        """Test integers, decimals and exponents."""
        cases = {
            "42": 42.0,
            "3.14": 3.14,
            "8E3": 8000.0,
            "1.5E-2": 0.015,
            "2E+3": 2000.0,
            "007": 7.0,
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                tokens = tokenize_string(source)
                self.assertEqual(tokens[0].type, TokenType.NUMBER)
                self.assertEqual(tokens[0].lexeme, source)
                self.assertAlmostEqual(tokens[0].value, expected)
                self.assertEqual(tokens[1].type, TokenType.EOF)

    def test_lowercase_e_after_number_is_identifier(self):
        """Lower-case e is Euler's number, never an exponent marker."""
        tokens = tokenize_string("2e")
        self.assertEqual([t.type for t in tokens],
                         [TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.EOF])
        self.assertEqual(tokens[1].lexeme, "e")
        self.assertEqual(tokens[1].position, 1)

    def test_identifiers(self):
        tokens = tokenize_string("sqrt(pi) + log_2")
        names = [t.lexeme for t in tokens if t.type == TokenType.IDENTIFIER]
        self.assertEqual(names, ["sqrt", "pi", "log_2"])

    def test_digits_continue_an_identifier(self):
        """Test that letters then digits form one name: 3pi3pi is 3, pi3pi."""
        tokens = tokenize_string("3pi3pi")
        self.assertEqual([t.type for t in tokens],
                         [TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.EOF])
        self.assertEqual(tokens[1].lexeme, "pi3pi")

        tokens = tokenize_string("3e2")
        self.assertEqual([t.lexeme for t in tokens[:2]], ["3", "e2"])
        self.assertTrue(tokens[1].is_identifier)
        self.assertTrue(tokens[0].is_literal)

    def test_unicode_pi(self):
        tokens = tokenize_string("2π")
        self.assertEqual(tokens[1].type, TokenType.IDENTIFIER)
        self.assertEqual(tokens[1].lexeme, "π")

    def test_implicit_product_tokens(self):
        self.assertEqual(
            self._types("3floor(2.4)"),
            [TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.LEFT_PAREN,
             TokenType.NUMBER, TokenType.RIGHT_PAREN, TokenType.EOF]
        )

    def test_unexpected_character(self):
        with self.assertRaises(UnexpectedCharacter) as context:
            tokenize_string("2 $ 3")
        error = context.exception
        self.assertEqual(error.character, "$")
        self.assertEqual(error.position, 2)
        self.assertEqual(error.kind, ErrorKind.UNEXPECTED_CHARACTER)
        self.assertEqual(error.category, "lexical")
        self.assertEqual(error.diagnostic.code, "L001")

    def test_leading_decimal_point(self):
        """Test that '.20' is rejected at the dot."""
        with self.assertRaises(UnexpectedCharacter) as context:
            tokenize_string("3 .20")
        self.assertEqual(context.exception.character, ".")
        self.assertEqual(context.exception.position, 2)

    def test_second_decimal_point(self):
        with self.assertRaises(UnexpectedCharacter) as context:
            tokenize_string("1.2.3")
        self.assertEqual(context.exception.position, 3)

    def test_trailing_decimal_point(self):
        with self.assertRaises(UnexpectedCharacter) as context:
            tokenize_string("5.")
        self.assertEqual(context.exception.character, ".")
        self.assertEqual(context.exception.position, 1)

    def test_exponent_without_digits(self):
        for source, position in [("8E", 1), ("8E+", 1), ("1.5E-x", 3)]:
            with self.subTest(source=source):
                with self.assertRaises(UnexpectedCharacter) as context:
                    tokenize_string(source)
                self.assertEqual(context.exception.character, "E")
                self.assertEqual(context.exception.position, position)

    def test_first_error_wins(self):
        with self.assertRaises(UnexpectedCharacter) as context:
            tokenize_string("1 # 2 @ 3")
        self.assertEqual(context.exception.character, "#")

    def test_lookalike_operator_suggestion(self):
        with self.assertRaises(UnexpectedCharacter) as context:
            tokenize_string("6 × 7")
        self.assertIn("*", context.exception.diagnostic.suggestions)

    def test_lexer_is_reusable(self):
        lexer = Lexer("1 + 2")
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertEqual(first, second)

    def test_token_describe(self):
        tokens = tokenize_string("2 + x)")
        self.assertEqual(tokens[0].describe(), "number 2")
        self.assertEqual(tokens[1].describe(), "operator '+'")
        self.assertEqual(tokens[2].describe(), "identifier 'x'")
        self.assertEqual(tokens[3].describe(), "')'")
        self.assertEqual(tokens[4].describe(), "end of input")


if __name__ == '__main__':
    unittest.main()
