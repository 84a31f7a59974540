"""Domain layer exceptions.

All library faults inherit from ResultError. These signal misuse of the
Result API by the caller; they are never used to carry domain failures,
which travel as Err payloads instead.
"""
from __future__ import annotations

from typing import Any


class ResultError(Exception):
    """Base exception for result_kit faults."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidResultStateError(ResultError, RuntimeError):
    """Payload of the variant not currently held was requested.

    Raised by ``unwrap_value`` on Err and ``unwrap_error`` on Ok. This is a
    programming error in the caller and must not be caught as part of
    normal control flow.
    """

    def __init__(self, operation: str, variant: str) -> None:
        super().__init__(f"Called {operation} on {variant}")
        self.operation = operation
        self.variant = variant


class ClosedResultHierarchyError(ResultError, TypeError):
    def __init__(self, class_name: str) -> None:
        super().__init__(
            f"Cannot subclass Result: {class_name}",
            {"allowed": ["Ok", "Err"]},
        )
        self.class_name = class_name
