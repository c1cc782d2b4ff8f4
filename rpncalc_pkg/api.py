"""Public API for rpncalc: run the tokenize, convert, evaluate pipeline."""

from __future__ import annotations

from collections.abc import Iterable

from .converter import to_postfix
from .evaluator import evaluate
from .logging_config import get_logger
from .tokenizer import tokenize
from .types import CalculatorError, EvalResult, Token

logger = get_logger("api")


def format_postfix(tokens: Iterable[Token]) -> str:
    """Render tokens as space separated lexemes (e.g., "5 4 2 / **")."""
    return " ".join(token.lexeme for token in tokens)


def evaluate_expression(expression: str) -> int:
    """Evaluate an arithmetic expression to an integer.

    Args:
        expression: Expression string (e.g., "5 ** (4/2)")

    Returns:
        Integer result

    Raises:
        CalculatorError: Any subclass, depending on what went wrong

    Example:
        >>> evaluate_expression("5 ** (4/2)")
        25
        >>> evaluate_expression("(1 + 2) * 3")
        9
    """
    return evaluate(to_postfix(tokenize(expression)))


def calculate(expression: str) -> EvalResult:
    """Evaluate an expression and report the outcome as an EvalResult.

    Pipeline errors are captured in the result rather than raised.

    Example:
        >>> calculate("3 + 4 * 2").postfix
        ['3', '4', '2', '*', '+']
        >>> calculate("1 / 0").error_code
        'DIVISION_BY_ZERO'
    """
    try:
        tokens = tokenize(expression)
        postfix = to_postfix(tokens)
        value = evaluate(postfix)
    except CalculatorError as e:
        logger.info("Evaluation of %r failed: %s (%s)", expression, e.message, e.code)
        return EvalResult(
            ok=False, expression=expression, error=e.message, error_code=e.code
        )
    return EvalResult(
        ok=True,
        expression=expression,
        result=value,
        tokens=[str(token) for token in tokens],
        postfix=[token.lexeme for token in postfix],
    )


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check that an expression tokenizes and converts, without evaluating it.

    Operand counts and division by zero are only detected during evaluation,
    so a valid result here does not guarantee evaluation succeeds.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> validate_expression("(1 + 2")
        (False, "Unmatched '(' at position 0")
    """
    try:
        to_postfix(tokenize(expression))
    except CalculatorError as e:
        return False, str(e)
    return True, None
