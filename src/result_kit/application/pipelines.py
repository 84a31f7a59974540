"""Result pipelines.

Small fallible operations (parsing, division, validation) and the chains
that compose them with flat_map and map. Failures are returned as Err with
a human-readable message; nothing here raises.
"""
from __future__ import annotations

import re

from result_kit.domain import Err, Ok, Result

# Optional sign, then ASCII decimal digits or 0x-prefixed hex digits
INTEGER_PATTERN = re.compile(
    r"^(?P<sign>[+-]?)(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<dec>[0-9]+))$"
)

MIN_AGE = 0
MAX_AGE = 150
ELIGIBLE_AGE = 18


def divide(a: int, b: int) -> Result[int, str]:
    """Divide two integers, truncating toward zero.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Ok with the quotient, or Err if ``b`` is zero

    Example:
        >>> divide(10, 2)
        Ok(5)
        >>> divide(10, 0)
        Err('Cannot divide by zero')
    """
    if b == 0:
        return Err("Cannot divide by zero")
    quotient = abs(a) // abs(b)
    return Ok(quotient if (a < 0) == (b < 0) else -quotient)


def parse_number(text: str) -> Result[int, str]:
    """Parse an integer literal.

    Accepts an optional sign followed by ASCII decimal digits or by
    0x-prefixed hexadecimal digits. Surrounding whitespace is ignored.

    Args:
        text: String such as "42", "-7" or "0x1F"

    Returns:
        Ok with the integer, or Err naming the rejected input
    """
    match = INTEGER_PATTERN.fullmatch(text.strip())
    if match is None:
        return Err(f"Not a number: {text}")

    if match["hex"] is not None:
        magnitude = int(match["hex"], 16)
    else:
        magnitude = int(match["dec"])
    return Ok(-magnitude if match["sign"] == "-" else magnitude)


def validate_age(text: str) -> Result[int, str]:
    """Parse and range-check an age."""
    parsed = parse_number(text)
    if parsed.is_err():
        return Err(f"Invalid age format: {text}")

    age = parsed.unwrap_value()
    if age < MIN_AGE:
        return Err("Age cannot be negative")
    if age > MAX_AGE:
        return Err("Age seems unrealistic")
    return Ok(age)


def check_eligibility(age: int) -> Result[str, str]:
    if age < ELIGIBLE_AGE:
        return Err(f"Must be {ELIGIBLE_AGE} or older (current age: {age})")
    return Ok(f"Eligible! Age: {age}")


def parse_and_divide(dividend: int, text: str) -> Result[int, str]:
    """Parse a divisor, divide ``dividend`` by it and double the quotient.

    The division step only runs when parsing succeeded.

    Example:
        >>> parse_and_divide(100, "10")
        Ok(20)
        >>> parse_and_divide(100, "abc")
        Err('Not a number: abc')
    """
    return (
        parse_number(text)
        .flat_map(lambda n: divide(dividend, n))
        .map(lambda n: n * 2)
    )


def eligibility_workflow(text: str) -> Result[str, str]:
    """Validate an age string, check eligibility and shout the outcome."""
    return (
        validate_age(text)
        .flat_map(check_eligibility)
        .map(str.upper)
    )
