"""Postfix evaluation on an integer stack."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

from .config import MAX_RESULT_BITS, MAX_RESULT_DIGITS, NUMBER_RE
from .logging_config import get_logger
from .types import (
    DivisionByZeroError,
    MalformedExpressionError,
    NumberParseError,
    Token,
    TokenKind,
    ValidationError,
)

logger = get_logger("evaluator")


def _too_large() -> ValidationError:
    return ValidationError(
        f"Result too large (max {MAX_RESULT_DIGITS} digits)", "RESULT_TOO_LARGE"
    )


def _power(base: int, exponent: int) -> int:
    if exponent < 0:
        if base == 0:
            raise DivisionByZeroError("Zero cannot be raised to a negative power")
        if abs(base) > 1:
            # |1 / base**n| < 1 truncates to zero
            return 0
        return base if exponent % 2 else 1
    if abs(base) > 1 and (abs(base).bit_length() - 1) * exponent >= MAX_RESULT_BITS:
        raise _too_large()
    return base**exponent


def _divide(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise DivisionByZeroError("Division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


OPERATOR_FUNCTIONS: Mapping[str, Callable[[int, int], int]] = MappingProxyType(
    {
        "**": _power,
        "*": lambda left, right: left * right,
        "/": _divide,
        "+": lambda left, right: left + right,
        "-": lambda left, right: left - right,
    }
)


def parse_number(token: Token) -> int:
    """Parse a number token's lexeme as a decimal integer.

    Raises:
        NumberParseError: The lexeme is not a run of ASCII digits
    """
    if not NUMBER_RE.fullmatch(token.lexeme):
        raise NumberParseError(f"Invalid number: {token.lexeme!r}")
    digits = token.lexeme.lstrip("0") or "0"
    if len(digits) > MAX_RESULT_DIGITS:
        raise _too_large()
    return int(digits)


class Evaluator(ABC):
    """Interface for evaluation strategies."""

    @abstractmethod
    def evaluate(self, tokens: Iterable[Token]) -> int:
        """Compute the integer value of ``tokens``."""


class PostfixEvaluator(Evaluator):
    """Stack machine evaluating tokens in postfix order.

    Args:
        functions: Operator lexeme to binary integer function. Defaults to
            ``OPERATOR_FUNCTIONS``.
    """

    def __init__(self, functions: Mapping[str, Callable[[int, int], int]] | None = None):
        self.functions = OPERATOR_FUNCTIONS if functions is None else functions

    def evaluate(self, tokens: Iterable[Token]) -> int:
        """Evaluate a postfix token sequence.

        Args:
            tokens: Number and Operator tokens in postfix order, consumed once

        Returns:
            The single value left on the stack

        Raises:
            MalformedExpressionError: Missing operands, leftover operands,
                empty input, or a token that cannot appear in postfix
            DivisionByZeroError: Division (or negative power) of zero
            NumberParseError: A number lexeme is not a decimal integer
            ValidationError: A literal or intermediate value exceeds
                ``MAX_RESULT_DIGITS``
        """
        stack: list[int] = []

        for token in tokens:
            if token.kind is TokenKind.NUMBER:
                stack.append(parse_number(token))

            elif token.kind is TokenKind.OPERATOR:
                function = self.functions.get(token.lexeme)
                if function is None:
                    raise MalformedExpressionError(
                        f"Unknown operator: {token.lexeme!r}", "UNKNOWN_OPERATOR"
                    )
                if len(stack) < 2:
                    raise MalformedExpressionError(
                        f"Operator {token.lexeme!r} is missing an operand"
                    )
                right = stack.pop()
                left = stack.pop()
                value = function(left, right)
                if value.bit_length() > MAX_RESULT_BITS:
                    raise _too_large()
                stack.append(value)

            else:
                raise MalformedExpressionError(
                    f"Unexpected token in postfix expression: {token}"
                )

        if not stack:
            raise MalformedExpressionError("Empty expression", "EMPTY_EXPRESSION")
        if len(stack) > 1:
            raise MalformedExpressionError(
                f"Expression leaves {len(stack)} values, expected one operator between each pair of numbers"
            )
        logger.debug("Evaluated to %d", stack[0])
        return stack[0]


_DEFAULT_EVALUATOR = PostfixEvaluator()


def evaluate(postfix: Iterable[Token]) -> int:
    """Evaluate postfix tokens with the default operator functions."""
    return _DEFAULT_EVALUATOR.evaluate(postfix)
