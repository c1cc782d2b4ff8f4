"""Lexical analysis: turn an expression string into an ordered list of tokens.

Each lexical class is described by its own regular expression. All classes
are matched independently over the whole input and the matches are merged
back into source order. Characters that no class matches (whitespace,
letters, stray punctuation) are dropped without error.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping

from .config import MAX_INPUT_LENGTH, TOKEN_PATTERNS
from .logging_config import get_logger
from .types import Token, TokenKind, ValidationError

logger = get_logger("tokenizer")


class Tokenizer(ABC):
    """Interface for tokenization strategies."""

    @abstractmethod
    def tokenize(self, expression: str) -> list[Token]:
        """Split ``expression`` into tokens in left-to-right order."""


class RegexTokenizer(Tokenizer):
    """Tokenizer driven by one compiled pattern per token kind.

    Args:
        patterns: Mapping of TokenKind to compiled pattern. Defaults to
            ``config.TOKEN_PATTERNS``.
    """

    def __init__(self, patterns: Mapping[TokenKind, re.Pattern[str]] | None = None):
        self.patterns = TOKEN_PATTERNS if patterns is None else patterns

    def tokenize(self, expression: str) -> list[Token]:
        if len(expression) > MAX_INPUT_LENGTH:
            raise ValidationError(
                f"Input too long (max {MAX_INPUT_LENGTH} characters)", "TOO_LONG"
            )

        matches: list[tuple[int, int, TokenKind, str]] = []
        for kind, pattern in self.patterns.items():
            for match in pattern.finditer(expression):
                if match.end() == match.start():
                    continue
                matches.append((match.start(), match.end(), kind, match.group()))

        # Source order; at equal offsets the longer match wins ("**" over "*")
        matches.sort(key=lambda m: (m[0], -(m[1] - m[0])))

        tokens: list[Token] = []
        cursor = 0
        for start, end, kind, lexeme in matches:
            if start < cursor:
                # Shadowed by a longer match starting earlier or at the same offset
                continue
            if start > cursor:
                skipped = expression[cursor:start]
                if skipped.strip():
                    logger.debug("Skipping unrecognized input %r at %d", skipped, cursor)
            tokens.append(Token(kind, lexeme, start))
            cursor = end
        if cursor < len(expression) and expression[cursor:].strip():
            logger.debug(
                "Skipping unrecognized input %r at %d", expression[cursor:], cursor
            )

        logger.debug("Tokenized %r into %d tokens", expression, len(tokens))
        return tokens


_DEFAULT_TOKENIZER = RegexTokenizer()


def tokenize(expression: str) -> list[Token]:
    """Tokenize an expression with the default regex tokenizer.

    Args:
        expression: Arithmetic expression (e.g., "5 ** (4/2)")

    Returns:
        Tokens in source order. An input without any token gives an empty list.

    Example:
        >>> [t.lexeme for t in tokenize("5 ** (4/2)")]
        ['5', '**', '(', '4', '/', '2', ')']
    """
    return _DEFAULT_TOKENIZER.tokenize(expression)
