"""Utility helpers for the HEX file inspector."""

from .debug import debug_enabled, debug_log

__all__ = [
    "debug_enabled",
    "debug_log",
]
