"""Tests for the worked Result pipelines."""
from __future__ import annotations

import pytest

from result_kit import Err, Ok
from result_kit.application import pipelines
from result_kit.application.pipelines import (
    check_eligibility,
    divide,
    eligibility_workflow,
    parse_and_divide,
    parse_number,
    validate_age,
)


class TestDivide:
    """Tests for divide."""

    def test_divides(self) -> None:
        """Test a regular division."""
        assert divide(10, 2) == Ok(5)

    def test_division_by_zero(self) -> None:
        """Test zero divisor yields Err."""
        assert divide(10, 0) == Err("Cannot divide by zero")

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (7, 2, 3),
            (-7, 2, -3),
            (7, -2, -3),
            (-7, -2, 3),
        ],
    )
    def test_truncates_toward_zero(self, a: int, b: int, expected: int) -> None:
        """Test the quotient is truncated, not floored."""
        assert divide(a, b) == Ok(expected)


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("42", 42),
            ("-7", -7),
            ("+3", 3),
            (" 10 ", 10),
            ("0", 0),
            ("0x1F", 31),
            ("0XfF", 255),
            ("-0x10", -16),
        ],
    )
    def test_parse_valid(self, text: str, expected: int) -> None:
        """Test integer literals parse."""
        assert parse_number(text) == Ok(expected)

    @pytest.mark.parametrize(
        "text",
        ["abc", "", "1.5", "1_000", "not a number", "0x", "0xG1", "\u0663", "1\uff12"],
    )
    def test_parse_invalid(self, text: str) -> None:
        """Test non-integers yield Err naming the input."""
        assert parse_number(text) == Err(f"Not a number: {text}")


class TestValidateAge:
    """Tests for validate_age."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("25", Ok(25)),
            ("0", Ok(0)),
            ("150", Ok(150)),
            ("invalid", Err("Invalid age format: invalid")),
            ("-1", Err("Age cannot be negative")),
            ("151", Err("Age seems unrealistic")),
        ],
    )
    def test_validate(self, text: str, expected: object) -> None:
        """Test format and range checks."""
        assert validate_age(text) == expected


class TestCheckEligibility:
    """Tests for check_eligibility."""

    def test_eligible(self) -> None:
        """Test adults are eligible."""
        assert check_eligibility(18) == Ok("Eligible! Age: 18")

    def test_too_young(self) -> None:
        """Test minors are rejected with their age."""
        assert check_eligibility(15) == Err("Must be 18 or older (current age: 15)")


class TestParseAndDivide:
    """End-to-end tests for the parse, divide, double chain."""

    def test_success(self) -> None:
        """Test a valid divisor."""
        assert parse_and_divide(100, "10") == Ok(20)

    def test_division_by_zero(self) -> None:
        """Test a zero divisor fails in the divide step."""
        assert parse_and_divide(100, "0") == Err("Cannot divide by zero")

    def test_parse_failure_skips_divide(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a parse failure never reaches divide."""
        calls: list[tuple[int, int]] = []

        def spy(a: int, b: int) -> object:
            calls.append((a, b))
            return Ok(0)

        monkeypatch.setattr(pipelines, "divide", spy)

        assert parse_and_divide(100, "abc") == Err("Not a number: abc")
        assert calls == []

    def test_error_message_names_input(self) -> None:
        """Test the propagated error mentions the bad input."""
        result = parse_and_divide(100, "not a number")
        assert result.is_err()
        assert "Not a number" in result.unwrap_error()


class TestEligibilityWorkflow:
    """Tests for the validate, check, upper-case chain."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("25", Ok("ELIGIBLE! AGE: 25")),
            ("15", Err("Must be 18 or older (current age: 15)")),
            ("invalid", Err("Invalid age format: invalid")),
        ],
    )
    def test_workflow(self, text: str, expected: object) -> None:
        """Test each stage's failure propagates unchanged."""
        assert eligibility_workflow(text) == expected
