"""User-facing front ends."""

from .app import HexInfoApp, InfoConfig

__all__ = ["HexInfoApp", "InfoConfig"]
