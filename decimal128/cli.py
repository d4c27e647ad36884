"""Command-line calculator for Decimal128 arithmetic.

Usage:
    decimal128 add 0.1 0.2
    decimal128 divide 1 3 --style fixed --digits 5
    decimal128 round 123.456 --digits 1 --rounding-mode ceil
    decimal128 format 42 --style exponential

Environment:
    DECIMAL128_LOG_LEVEL: Log level when --verbose is not given (default: WARNING)
"""

from __future__ import annotations

import argparse
import logging
import math
import os
import sys
from collections.abc import Callable, Sequence

import structlog

from decimal128 import __version__
from decimal128.errors import DecimalError
from decimal128.rounding import DEFAULT_ROUNDING_MODE, RoundingMode
from decimal128.value import DecimalValue

logger = structlog.get_logger()

# Log level from environment, overridden by --verbose
LOG_LEVEL = os.environ.get("DECIMAL128_LOG_LEVEL", "WARNING").upper()

BINARY_OPERATIONS: dict[str, Callable[..., DecimalValue]] = {
    "add": DecimalValue.add,
    "subtract": DecimalValue.subtract,
    "multiply": DecimalValue.multiply,
    "divide": DecimalValue.divide,
    "remainder": DecimalValue.remainder,
}

UNARY_OPERATIONS: dict[str, Callable[[DecimalValue], DecimalValue]] = {
    "negate": DecimalValue.negate,
    "abs": DecimalValue.abs,
    "format": DecimalValue,
}

OPERATIONS = [*BINARY_OPERATIONS, *UNARY_OPERATIONS, "compare", "round"]

STYLES = ("string", "fixed", "precision", "exponential")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decimal128",
        description="Exact Decimal128 arithmetic on decimal literals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("operation", choices=OPERATIONS, help="Operation to perform")
    parser.add_argument("operands", nargs="+", help="Decimal literals (NaN, Infinity, -Infinity allowed)")
    parser.add_argument(
        "--rounding-mode",
        choices=[mode.value for mode in RoundingMode],
        default=DEFAULT_ROUNDING_MODE.value,
        help="Rounding mode for inexact results (default: halfEven)",
    )
    parser.add_argument(
        "--style",
        choices=STYLES,
        default="string",
        help="Output notation for the result",
    )
    parser.add_argument(
        "--digits",
        type=int,
        default=None,
        help="Digit count for --style fixed/precision/exponential, or fraction digits for round",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging (overflow, underflow, rounding)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    """Configure structlog for console output on stderr."""
    if verbose:
        log_level = logging.DEBUG
    else:
        level = logging.getLevelName(LOG_LEVEL)
        log_level = level if isinstance(level, int) else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def render(value: DecimalValue, style: str, digits: int | None) -> str:
    """Render a result in the requested notation."""
    if style == "fixed":
        return value.to_fixed(digits=digits)
    if style == "precision":
        return value.to_precision(digits=digits)
    if style == "exponential":
        return value.to_exponential(digits=digits)
    return value.to_string()


def evaluate(
    operation: str,
    operands: Sequence[str],
    rounding_mode: str,
    digits: int | None,
) -> DecimalValue | int | float:
    """Run one operation on literal operands.

    Raises:
        DecimalError: If an operand or argument is invalid
        ValueError: If the operand count does not fit the operation
    """
    expected = 2 if operation in BINARY_OPERATIONS or operation == "compare" else 1
    if len(operands) != expected:
        raise ValueError(f"{operation} takes {expected} operand(s), got {len(operands)}")

    values = [DecimalValue(text, rounding_mode=rounding_mode) for text in operands]
    logger.debug("decimal128_evaluate", operation=operation, operands=[str(v) for v in values])

    if operation in BINARY_OPERATIONS:
        return BINARY_OPERATIONS[operation](values[0], values[1], rounding_mode=rounding_mode)
    if operation == "compare":
        return values[0].compare(values[1])
    if operation == "round":
        return values[0].round(digits or 0, rounding_mode)
    return UNARY_OPERATIONS[operation](values[0])


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the decimal128 command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        result = evaluate(args.operation, args.operands, args.rounding_mode, args.digits)
    except (DecimalError, ValueError) as err:
        logger.debug("decimal128_failed", operation=args.operation, error=str(err))
        print(f"error: {err}", file=sys.stderr)
        return 1

    if isinstance(result, DecimalValue):
        # round() already consumed --digits
        digits = None if args.operation == "round" else args.digits
        try:
            print(render(result, args.style, digits))
        except DecimalError as err:
            logger.debug("decimal128_format_failed", style=args.style, error=str(err))
            print(f"error: {err}", file=sys.stderr)
            return 1
    elif isinstance(result, float) and math.isnan(result):
        print("NaN")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
