"""Field and record decoding for Intel HEX files."""

from __future__ import annotations

from .errors import (
    ChecksumError,
    HexFileError,
    HexFormatError,
    HexOverflowError,
    HexReadError,
    SequenceError,
)
from .hexdigits import MAX_DIGITS, decode_hex
from .record import MAX_DATA_SIZE, Record, RecordType, parse_record, record_checksum

__all__ = [
    "ChecksumError",
    "HexFileError",
    "HexFormatError",
    "HexOverflowError",
    "HexReadError",
    "SequenceError",
    "MAX_DIGITS",
    "MAX_DATA_SIZE",
    "Record",
    "RecordType",
    "decode_hex",
    "parse_record",
    "record_checksum",
]
