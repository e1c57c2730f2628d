"""Exception hierarchy for HEX file parsing."""

from __future__ import annotations

from typing import Optional


class HexFileError(RuntimeError):
    """Raised when a HEX file cannot be read or violates the record format.

    ``reason`` is the bare description of the failure. Once the session driver
    has seen the error it is re-raised with ``line_number`` and a sanitized
    ``line_text`` attached, and the message gains a ``Line <n>: <text>`` tail.
    """

    default_reason = "Error in hex file"

    def __init__(
        self,
        reason: Optional[str] = None,
        *,
        line_number: Optional[int] = None,
        line_text: Optional[str] = None,
    ) -> None:
        self.reason = reason or self.default_reason
        self.line_number = line_number
        self.line_text = line_text
        message = self.reason
        if line_number is not None:
            message = f"{message}\nLine {line_number}: {line_text or ''}"
        super().__init__(message)

    def with_line(self, line_number: int, line_text: str) -> "HexFileError":
        """Return a copy of this error annotated with its source line."""

        return type(self)(self.reason, line_number=line_number, line_text=line_text)


class HexFormatError(HexFileError):
    """Raised for malformed framing, bad record sizes or non-hex characters."""

    default_reason = "Invalid data in hex file"


class ChecksumError(HexFormatError):
    """Raised when a record's bytes do not sum to zero modulo 256."""

    default_reason = "Incorrect checksum"


class HexOverflowError(HexFormatError):
    """Raised when a hex field has more digits than a 32-bit value holds."""

    default_reason = "Number too large"


class SequenceError(HexFormatError):
    """Raised when a record follows the end-of-file record."""

    default_reason = "EOF record before end of file"


class HexReadError(HexFileError):
    """Raised when the input stream cannot be opened or fully read."""

    default_reason = "Error reading file"
