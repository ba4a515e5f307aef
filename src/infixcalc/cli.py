"""
infixcalc Command-Line Interface.

Evaluates one arithmetic expression and prints the result.

Usage:
    infixcalc "6/2(1+2)"            # prints 1.000000
    infixcalc --tokens "2(3+4)"     # show the token stream
    infixcalc --ast "10-2-3"        # show the expression tree
    infixcalc -v "-3+5"             # debug logging on stderr
"""

import argparse
import logging
import os
import re
import sys
from typing import Optional

from infixcalc import __version__
from infixcalc.engine import evaluate_source
from infixcalc.engine.lexer import tokenize
from infixcalc.engine.parser import parse
from infixcalc.engine.printer import format_expression
from infixcalc.engine.tokens import format_tokens
from infixcalc.utils.errors import CalcError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# An argument such as "-3+5" or "-(1+2)" is an expression, not an option
_LEADING_SIGN = re.compile(r"^-[\d.(]")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    if not sys.stderr.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


# Initialize on module load
_init_colors()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="infixcalc",
        description="Evaluate an infix arithmetic expression.",
        epilog='Implicit multiplication binds tighter than division: "6/2(1+2)" is 1.',
    )
    parser.add_argument(
        "expression",
        help="Expression to evaluate, e.g. \"2(3+4)\"",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream instead of the result",
    )
    parser.add_argument(
        "--ast",
        action="store_true",
        help="Print the expression tree instead of the result",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every pipeline stage to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _separate_expression(argv: list[str]) -> list[str]:
    """Insert ``--`` before an expression that starts with a sign."""
    for index, arg in enumerate(argv):
        if arg == "--":
            break
        if _LEADING_SIGN.match(arg):
            return argv[:index] + ["--"] + argv[index:]
    return argv


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def format_result(value: float) -> str:
    """Format a result with six fractional digits, like C's ``%f``."""
    return f"{value:f}"


def _print_debug(args: argparse.Namespace) -> None:
    """Print the token stream and/or tree; tokens are shown even if parsing fails."""
    tokens = tokenize(args.expression)

    if args.tokens:
        for token in tokens:
            print(repr(token))
        print(format_tokens(tokens))

    if args.ast:
        print(format_expression(parse(tokens, args.expression)))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(_separate_expression(list(argv)))
    configure_logging(args.verbose)

    try:
        if args.tokens or args.ast:
            _print_debug(args)
        else:
            print(format_result(evaluate_source(args.expression)))
    except CalcError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
