"""Shared module.

Cross-cutting concerns: configuration, logging.
"""
from result_kit.shared.config import Settings, get_settings, settings

__all__ = [
    "Settings",
    "get_settings",
    "settings",
]
