"""Fuzzing tests for the pipeline with random inputs."""

import random
import string
import unittest

from rpncalc_pkg.api import calculate, evaluate_expression
from rpncalc_pkg.types import CalculatorError, EvalResult

# "*" is always padded so that random sequences never build "**" chains
FUZZ_PIECES = list("0123456789") + ["+", "-", " * ", "/", "(", ")", " ", "x"]


class TestPipelineFuzzing(unittest.TestCase):
    """Fuzz test the pipeline with random inputs."""

    def test_random_token_soup(self):
        """Random inputs either evaluate or raise a CalculatorError."""
        rng = random.Random(1234)
        for _ in range(500):
            expr = "".join(rng.choices(FUZZ_PIECES, k=rng.randint(0, 20)))
            try:
                result = evaluate_expression(expr)
            except CalculatorError:
                continue
            self.assertIsInstance(result, int, expr)

    def test_random_printable_strings(self):
        """Letters and punctuation are skipped, never crash the tokenizer."""
        rng = random.Random(99)
        alphabet = string.ascii_letters + string.punctuation.replace("*", "") + " "
        for _ in range(200):
            expr = "".join(rng.choices(alphabet, k=rng.randint(1, 40)))
            result = calculate(expr)
            self.assertIsInstance(result, EvalResult)
            if result.ok:
                self.assertIsInstance(result.result, int)
            else:
                self.assertIsNotNone(result.error_code)

    def test_malformed_expressions(self):
        """Test pipeline rejects malformed expressions."""
        malformed = [
            "(((",
            ")))",
            "1++2",
            "2**",
            "*/3",
            "()",
            "",
            "   ",
            "(1)(2)",
        ]

        for expr in malformed:
            with self.subTest(expr=expr):
                with self.assertRaises(CalculatorError):
                    evaluate_expression(expr)


if __name__ == "__main__":
    unittest.main()
