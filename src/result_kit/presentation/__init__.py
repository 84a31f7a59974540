"""Presentation Layer.

Command line demo of the Result API.
"""
from __future__ import annotations

from result_kit.presentation.cli import main

__all__ = ["main"]
