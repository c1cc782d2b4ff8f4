from __future__ import annotations

import argparse
import json
import sys

from .api import calculate, format_postfix
from .config import SAMPLE_EXPRESSION, VERSION
from .logging_config import get_logger, setup_logging
from .tokenizer import tokenize
from .types import CalculatorError, EvalResult

logger = get_logger("cli")

REPL_QUIT_COMMANDS = {"quit", "exit"}


def _health_check() -> int:
    """Run health check on each pipeline stage.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running rpncalc health check...")
    print("-" * 50)

    try:
        lexemes = [token.lexeme for token in tokenize(SAMPLE_EXPRESSION)]
        if lexemes == ["5", "**", "(", "4", "/", "2", ")"]:
            print("[OK] Tokenizer works")
            checks_passed += 1
        else:
            print(f"[FAIL] Tokenizer check failed: got {lexemes}")
            checks_failed += 1
    except CalculatorError as e:
        print(f"[FAIL] Tokenizer check failed: {e}")
        checks_failed += 1

    try:
        from .converter import to_postfix

        postfix = format_postfix(to_postfix(tokenize(SAMPLE_EXPRESSION)))
        if postfix == "5 4 2 / **":
            print("[OK] Postfix conversion works")
            checks_passed += 1
        else:
            print(f"[FAIL] Postfix conversion failed: got {postfix}")
            checks_failed += 1
    except CalculatorError as e:
        print(f"[FAIL] Postfix conversion failed: {e}")
        checks_failed += 1

    result = calculate(SAMPLE_EXPRESSION)
    if result.ok and result.result == 25:
        print("[OK] Evaluation works")
        checks_passed += 1
    else:
        print(f"[FAIL] Evaluation check failed: {result}")
        checks_failed += 1

    result = calculate("1 / 0")
    if result.error_code == "DIVISION_BY_ZERO":
        print("[OK] Error reporting works")
        checks_passed += 1
    else:
        print(f"[FAIL] Error reporting check failed: {result}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(
    res: EvalResult, output_format: str = "human", show_postfix: bool = False
) -> None:
    """Print result in specified format.

    Args:
        res: Evaluation result
        output_format: "json" for JSON output, "human" for human-readable
        show_postfix: Also print the tokens and postfix form (human format)
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    if show_postfix:
        print("Tokens: ", ", ".join(res.tokens or []))
        print("Postfix:", " ".join(res.postfix or []))
    print(f"{res.expression} = {res.result}")


def print_help_text() -> None:
    print(
        """rpncalc - integer expression calculator

Operators (highest precedence first):
  **   power (left-associative: 2 ** 3 ** 2 is (2 ** 3) ** 2)
  /    integer division, truncating toward zero
  *    multiplication
  -    subtraction
  +    addition
Parentheses group sub-expressions. Any other character is ignored.

Commands:
  help         show this text
  quit, exit   leave the calculator
"""
    )


def repl_loop(output_format: str = "human", show_postfix: bool = False) -> None:
    """Interactive REPL loop with graceful interrupt handling."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print(f"rpncalc {VERSION}. Type 'help' for usage, 'quit' to exit.")
    print(f"Try: {SAMPLE_EXPRESSION}")
    while True:
        try:
            line = input(">>> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue
        expr = line.strip()
        if not expr:
            continue
        if expr.lower() in REPL_QUIT_COMMANDS:
            break
        if expr.lower() == "help":
            print_help_text()
            continue
        print_result_pretty(
            calculate(expr), output_format=output_format, show_postfix=show_postfix
        )


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the rpncalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="rpncalc",
        description="Evaluate integer arithmetic expressions via postfix notation",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to evaluate (starts the interactive REPL if omitted)",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--show-postfix",
        action="store_true",
        help="Also print the token list and the postfix form",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: RPNCALC_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check on every pipeline stage",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    expr = args.eval_expr if args.eval_expr is not None else args.expression
    if expr is not None:
        expr = expr.strip()
        logger.debug("Evaluating %r from the command line", expr)
        res = calculate(expr)
        print_result_pretty(
            res, output_format=args.format, show_postfix=args.show_postfix
        )
        return 0 if res.ok else 1

    try:
        repl_loop(output_format=args.format, show_postfix=args.show_postfix)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
