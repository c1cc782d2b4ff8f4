"""Token types, result dataclasses and the error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TokenKind(Enum):
    """Lexical class of a token."""

    NUMBER = "Number"
    OPERATOR = "Operator"
    LEFT_PARENTHESIS = "LeftParenthesis"
    RIGHT_PARENTHESIS = "RightParenthesis"


@dataclass(frozen=True)
class Token:
    """A single lexeme tagged with its kind.

    ``position`` is the start offset in the source string. It is informational
    only and does not take part in equality, so tokens built by hand compare
    equal to tokenizer output.
    """

    kind: TokenKind
    lexeme: str
    position: int | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.lexeme}"


@dataclass
class EvalResult:
    """Result of running an expression through the full pipeline."""

    ok: bool
    expression: str
    result: int | None = None
    tokens: list[str] | None = None
    postfix: list[str] | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "expression": self.expression}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.tokens is not None:
            result_dict["tokens"] = self.tokens
        if self.postfix is not None:
            result_dict["postfix"] = self.postfix
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return (
                f"EvalResult(ok=False, expression={self.expression!r}, "
                f"error={self.error!r}, error_code={self.error_code!r})"
            )
        parts = [f"ok={self.ok}", f"expression={self.expression!r}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.postfix is not None:
            parts.append(f"postfix={self.postfix!r}")
        return f"EvalResult({', '.join(parts)})"


class CalculatorError(Exception):
    """Base class for every error that aborts evaluation of an expression."""

    default_code = "CALCULATOR_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(CalculatorError):
    """Raised when input exceeds configured limits."""

    default_code = "VALIDATION_ERROR"


class UnbalancedParenthesesError(CalculatorError):
    """Raised when a parenthesis has no partner."""

    default_code = "UNBALANCED_PARENTHESES"


class MalformedExpressionError(CalculatorError):
    """Raised when operators and operands do not line up."""

    default_code = "MALFORMED_EXPRESSION"


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when dividing by zero."""

    default_code = "DIVISION_BY_ZERO"


class NumberParseError(CalculatorError, ValueError):
    """Raised when a number token's lexeme is not a decimal integer."""

    default_code = "NUMBER_PARSE_ERROR"
