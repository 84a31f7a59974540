"""Demo command line.

Walks through the Result API using the worked pipelines, one numbered
section per feature.
"""
from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from result_kit.application.pipelines import (
    check_eligibility,
    divide,
    eligibility_workflow,
    parse_and_divide,
    parse_number,
    validate_age,
)
from result_kit.shared.config import settings
from result_kit.shared.logging import configure_logging, get_logger, reset_logging

logger = get_logger(__name__)


def _safe_division() -> None:
    for a, b in ((10, 2), (10, 0)):
        divide(a, b).match(
            lambda value, a=a, b=b: print(f"  {a} / {b} = {value}"),
            lambda error: print(f"  Error: {error}"),
        )


def _state_checks() -> None:
    result = divide(20, 4)
    if result.is_ok():
        print(f"  Success! Result: {result.unwrap_value()}")
    if result.is_err():
        print(f"  Failed with error: {result.unwrap_error()}")


def _callbacks() -> None:
    divide(15, 3).on_ok(lambda value: print(f"  Got value: {value}"))
    divide(15, 0).on_err(lambda error: print(f"  Got error: {error}"))


def _mapping() -> None:
    doubled = divide(100, 10).map(lambda value: value * 2)
    print(f"  (100 / 10) * 2 = {doubled.unwrap_value()}")


def _chain(text: str) -> None:
    parse_number(text).flat_map(lambda n: divide(100, n)).map(lambda n: n * 10).match(
        lambda value: print(f"  Chain result: {value}"),
        lambda error: print(f"  Chain error: {error}"),
    )


def _folding() -> None:
    for b in (5, 0):
        message = divide(50, b).fold(
            lambda v: f"Success: {v}",
            lambda e: f"Failure: {e}",
        )
        print(f"  {message}")


def _defaults() -> None:
    result = divide(10, 0)
    print(f"  With default: {result.unwrap_or(-1)}")
    print(f"  With computed default: {result.unwrap_or_else(lambda e: 0)}")


def _workflow() -> None:
    eligibility_workflow("25").match(
        lambda msg: print(f"  ✓ {msg}"),
        lambda error: print(f"  ✗ {error}"),
    )


def _error_cases() -> None:
    for i, text in enumerate(("15", "invalid", "25"), start=1):
        validate_age(text).flat_map(check_eligibility).map(str.upper).match(
            lambda msg, i=i: print(f"  Case {i}: ✓ {msg}"),
            lambda error, i=i: print(f"  Case {i}: ✗ {error}"),
        )


def _pipeline() -> None:
    for text in ("10", "0", "abc"):
        print(f"  parse_and_divide(100, {text!r}) -> {parse_and_divide(100, text)!r}")


SECTIONS: dict[int, tuple[str, Callable[[], None]]] = {
    1: ("Safe division", _safe_division),
    2: ("Checking result state", _state_checks),
    3: ("Conditional callbacks", _callbacks),
    4: ("Transforming results", _mapping),
    5: ("Chaining operations", lambda: _chain("50")),
    6: ("Error propagation in chains", lambda: _chain("invalid")),
    7: ("Folding results", _folding),
    8: ("Providing defaults", _defaults),
    9: ("Complex workflow", _workflow),
    10: ("Handling various errors", _error_cases),
    11: ("Parse, divide, double", _pipeline),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="result-kit-demo",
        description="Walk through the result_kit Result API.",
    )
    parser.add_argument(
        "--section",
        type=int,
        choices=sorted(SECTIONS),
        help="Run a single numbered section",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    parser.add_argument(
        "--log-format",
        default=settings.log_format,
        choices=["json", "console"],
    )
    return parser


def run_section(number: int) -> None:
    """Print one section heading and its output."""
    title, body = SECTIONS[number]
    print(f"Example {number}: {title}")
    body()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the demo command."""
    args = build_parser().parse_args(argv)

    reset_logging()
    configure_logging(
        level=args.log_level,
        log_format=args.log_format,
        log_file=settings.log_file,
    )

    numbers = [args.section] if args.section else sorted(SECTIONS)
    logger.debug("Running demo", sections=numbers)

    print("=== Result Examples ===")
    try:
        for number in numbers:
            print()
            run_section(number)
    except Exception as e:
        logger.error("Demo section failed", error=str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
