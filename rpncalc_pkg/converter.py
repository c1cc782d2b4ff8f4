"""Infix to postfix conversion (shunting-yard).

Note on associativity: an operator already on the stack is popped whenever
its precedence is greater than *or equal to* the incoming operator. Every
operator is therefore left-associative, exponentiation included, so
``2 ** 3 ** 2`` is read as ``(2 ** 3) ** 2``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .config import OPERATOR_PRECEDENCE
from .logging_config import get_logger
from .types import (
    MalformedExpressionError,
    Token,
    TokenKind,
    UnbalancedParenthesesError,
)

logger = get_logger("converter")


class NotationConverter:
    """Reorders infix tokens into postfix order.

    Args:
        precedence: Operator lexeme to rank, higher binds tighter. Defaults to
            ``config.OPERATOR_PRECEDENCE``.
    """

    def __init__(self, precedence: Mapping[str, int] | None = None):
        self.precedence = OPERATOR_PRECEDENCE if precedence is None else precedence

    def _rank(self, token: Token) -> int:
        try:
            return self.precedence[token.lexeme]
        except KeyError:
            raise MalformedExpressionError(
                f"Unknown operator: {token.lexeme!r}", "UNKNOWN_OPERATOR"
            ) from None

    def takes_precedence(self, first: Token, second: Token) -> bool:
        """Whether ``first`` (on the stack) must be applied before ``second``."""
        return self._rank(first) >= self._rank(second)

    def to_postfix(self, infix: Iterable[Token]) -> list[Token]:
        """Convert an infix token sequence to postfix order.

        Args:
            infix: Tokens in source order, consumed once

        Returns:
            Number and Operator tokens in postfix order

        Raises:
            UnbalancedParenthesesError: A ")" has no matching "(" or a "(" is
                never closed
            MalformedExpressionError: An operator is not in the precedence table
        """
        output: list[Token] = []
        operators: list[Token] = []

        for token in infix:
            if token.kind is TokenKind.NUMBER:
                output.append(token)

            elif token.kind is TokenKind.OPERATOR:
                # Unknown operators fail here even when the stack is empty
                self._rank(token)
                while (
                    operators
                    and operators[-1].kind is not TokenKind.LEFT_PARENTHESIS
                    and self.takes_precedence(operators[-1], token)
                ):
                    output.append(operators.pop())
                operators.append(token)

            elif token.kind is TokenKind.LEFT_PARENTHESIS:
                operators.append(token)

            elif token.kind is TokenKind.RIGHT_PARENTHESIS:
                while operators and operators[-1].kind is not TokenKind.LEFT_PARENTHESIS:
                    output.append(operators.pop())
                if not operators:
                    raise UnbalancedParenthesesError(
                        _describe("Unmatched ')'", token)
                    )
                operators.pop()

            else:
                raise MalformedExpressionError(f"Unexpected token: {token}")

        while operators:
            token = operators.pop()
            if token.kind is TokenKind.LEFT_PARENTHESIS:
                raise UnbalancedParenthesesError(_describe("Unmatched '('", token))
            output.append(token)

        logger.debug("Postfix: %s", " ".join(t.lexeme for t in output))
        return output


def _describe(message: str, token: Token) -> str:
    if token.position is None:
        return message
    return f"{message} at position {token.position}"


_DEFAULT_CONVERTER = NotationConverter()


def to_postfix(infix: Iterable[Token]) -> list[Token]:
    """Convert infix tokens to postfix with the default precedence table."""
    return _DEFAULT_CONVERTER.to_postfix(infix)
