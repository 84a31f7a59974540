"""Domain Layer.

Contains the Result type and the faults raised when it is misused.
"""
from __future__ import annotations

from result_kit.domain.exceptions import (
    ClosedResultHierarchyError,
    InvalidResultStateError,
    ResultError,
)
from result_kit.domain.result import Err, Ok, Result, ResultBase, err, ok

__all__ = [
    # Exceptions
    "ResultError",
    "InvalidResultStateError",
    "ClosedResultHierarchyError",
    # Result
    "Result",
    "ResultBase",
    "Ok",
    "Err",
    "ok",
    "err",
]
