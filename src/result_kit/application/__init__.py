"""Application Layer.

Worked operations that model fallible steps as Result-returning functions.
"""
from __future__ import annotations

from result_kit.application.pipelines import (
    check_eligibility,
    divide,
    eligibility_workflow,
    parse_and_divide,
    parse_number,
    validate_age,
)

__all__ = [
    "divide",
    "parse_number",
    "parse_and_divide",
    "validate_age",
    "check_eligibility",
    "eligibility_workflow",
]
