"""rpncalc package: tokenizer, infix-to-postfix converter, postfix evaluator and CLI."""

__all__ = [
    "config",
    "types",
    "tokenizer",
    "converter",
    "evaluator",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate_expression",
    "calculate",
    "validate_expression",
    "format_postfix",
    "tokenize",
    "to_postfix",
    "evaluate",
]
