"""Session driver for Intel HEX files."""

from __future__ import annotations

from pyhexinfo.codec.errors import (
    ChecksumError,
    HexFileError,
    HexFormatError,
    HexOverflowError,
    HexReadError,
    SequenceError,
)

from .session import (
    MISSING_EOF_WARNING,
    make_printable,
    parse_hex,
    parse_hex_from_path,
    parse_hex_stream,
)
from .summary import HexSummary

__all__ = [
    "ChecksumError",
    "HexFileError",
    "HexFormatError",
    "HexOverflowError",
    "HexReadError",
    "SequenceError",
    "HexSummary",
    "MISSING_EOF_WARNING",
    "make_printable",
    "parse_hex",
    "parse_hex_from_path",
    "parse_hex_stream",
]
