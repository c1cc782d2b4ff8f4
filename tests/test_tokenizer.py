"""Unit tests for tokenizer module."""

import re
import unittest

from rpncalc_pkg.config import MAX_INPUT_LENGTH
from rpncalc_pkg.tokenizer import RegexTokenizer, Tokenizer, tokenize
from rpncalc_pkg.types import Token, TokenKind, ValidationError

NUM = TokenKind.NUMBER
OP = TokenKind.OPERATOR
LP = TokenKind.LEFT_PARENTHESIS
RP = TokenKind.RIGHT_PARENTHESIS


class TestTokenize(unittest.TestCase):
    """Test splitting expressions into tokens."""

    def test_sample_expression(self):
        self.assertEqual(
            tokenize("5 ** (4/2)"),
            [
                Token(NUM, "5"),
                Token(OP, "**"),
                Token(LP, "("),
                Token(NUM, "4"),
                Token(OP, "/"),
                Token(NUM, "2"),
                Token(RP, ")"),
            ],
        )

    def test_power_is_not_split(self):
        tokens = tokenize("2**3")
        self.assertEqual([t.lexeme for t in tokens], ["2", "**", "3"])
        self.assertEqual(tokens[1], Token(OP, "**"))

    def test_three_stars(self):
        # "**" is taken first, the remaining "*" stands alone
        self.assertEqual([t.lexeme for t in tokenize("2***3")], ["2", "**", "*", "3"])

    def test_multi_digit_numbers(self):
        self.assertEqual(tokenize("123+4567"), [
            Token(NUM, "123"),
            Token(OP, "+"),
            Token(NUM, "4567"),
        ])

    def test_all_operators(self):
        lexemes = [t.lexeme for t in tokenize("1+2-3*4/5**6")]
        self.assertEqual(lexemes, ["1", "+", "2", "-", "3", "*", "4", "/", "5", "**", "6"])

    def test_whitespace_and_unknown_characters_are_skipped(self):
        self.assertEqual(
            [t.lexeme for t in tokenize("  1 \t+ x2 & 3\n")],
            ["1", "+", "2", "3"],
        )

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   "), [])
        self.assertEqual(tokenize("abc"), [])

    def test_positions_are_recorded(self):
        tokens = tokenize("12 + (3)")
        self.assertEqual([t.position for t in tokens], [0, 3, 5, 6, 7])

    def test_position_does_not_affect_equality(self):
        self.assertEqual(Token(NUM, "1", 0), Token(NUM, "1", 9))

    def test_tokens_are_immutable(self):
        token = tokenize("7")[0]
        with self.assertRaises(AttributeError):
            token.lexeme = "8"

    def test_token_str(self):
        self.assertEqual(str(Token(OP, "**")), "Operator: **")
        self.assertEqual(str(Token(LP, "(")), "LeftParenthesis: (")

    def test_input_length_limit(self):
        with self.assertRaises(ValidationError) as ctx:
            tokenize("1" * (MAX_INPUT_LENGTH + 1))
        self.assertEqual(ctx.exception.code, "TOO_LONG")


class TestRegexTokenizer(unittest.TestCase):
    """Test the tokenizer strategy class."""

    def test_is_tokenizer(self):
        self.assertIsInstance(RegexTokenizer(), Tokenizer)

    def test_custom_patterns(self):
        tokenizer = RegexTokenizer(
            {
                NUM: re.compile(r"[0-9]+"),
                OP: re.compile(r"[+]"),
            }
        )
        self.assertEqual(
            [t.lexeme for t in tokenizer.tokenize("1+2*(3)")], ["1", "+", "2", "3"]
        )

    def test_longer_match_wins_on_tie(self):
        tokenizer = RegexTokenizer(
            {
                OP: re.compile(r"\*"),
                NUM: re.compile(r"\*\*"),
            }
        )
        tokens = tokenizer.tokenize("**")
        self.assertEqual(tokens, [Token(NUM, "**")])

    def test_is_repeatable(self):
        tokenizer = RegexTokenizer()
        self.assertEqual(tokenizer.tokenize("(1+2)"), tokenizer.tokenize("(1+2)"))


if __name__ == "__main__":
    unittest.main()
