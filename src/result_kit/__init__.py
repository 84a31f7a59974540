"""result_kit.

A closed Ok/Err Result type for returning failures as values instead of
raising exceptions.
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "result_kit Team"

from result_kit.domain import (
    ClosedResultHierarchyError,
    Err,
    InvalidResultStateError,
    Ok,
    Result,
    ResultBase,
    ResultError,
    err,
    ok,
)

__all__ = [
    "Result",
    "ResultBase",
    "Ok",
    "Err",
    "ok",
    "err",
    "ResultError",
    "InvalidResultStateError",
    "ClosedResultHierarchyError",
    "__version__",
]
