"""Report rendering for HEX file summaries."""

from __future__ import annotations

from .text import format_summary

__all__ = ["format_summary"]
