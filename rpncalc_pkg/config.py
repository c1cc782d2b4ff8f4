"""Centralized configuration for rpncalc.

This module defines:
- Regex patterns for each lexical class of the tokenizer
- The operator precedence table used by the notation converter
- Input limits and logging defaults

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with RPNCALC_)
"""

import math
import os
import re
from types import MappingProxyType

from .types import TokenKind

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("rpncalc")
except importlib.metadata.PackageNotFoundError:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input limits (can be overridden via environment variables)
MAX_INPUT_LENGTH = int(os.getenv("RPNCALC_MAX_INPUT_LENGTH", "10000"))  # characters

# Largest integer (in decimal digits) a literal or intermediate result may have.
# Raising it past 4300 also needs PYTHONINTMAXSTRDIGITS raised for printing.
MAX_RESULT_DIGITS = int(os.getenv("RPNCALC_MAX_RESULT_DIGITS", "4300"))
MAX_RESULT_BITS = int(MAX_RESULT_DIGITS * math.log2(10))

# Logging
LOG_LEVEL = os.getenv("RPNCALC_LOG_LEVEL", "WARNING").upper()

# One pattern per lexical class; the tokenizer merges matches by offset and length
TOKEN_PATTERNS = MappingProxyType(
    {
        TokenKind.NUMBER: re.compile(r"[0-9]+"),
        TokenKind.OPERATOR: re.compile(r"\*\*|\*|/|\+|-"),
        TokenKind.LEFT_PARENTHESIS: re.compile(r"\("),
        TokenKind.RIGHT_PARENTHESIS: re.compile(r"\)"),
    }
)

NUMBER_RE = re.compile(r"[0-9]+")

# Higher rank binds tighter
OPERATOR_PRECEDENCE = MappingProxyType(
    {
        "**": 4,
        "/": 3,
        "*": 2,
        "-": 1,
        "+": 0,
    }
)

# Expression used by --health-check and the REPL banner
SAMPLE_EXPRESSION = "5 ** (4/2)"
