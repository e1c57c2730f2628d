"""Fixed-width hexadecimal field decoding."""

from __future__ import annotations

from .errors import HexFormatError, HexOverflowError

VALUE_BITS = 32
MAX_DIGITS = VALUE_BITS // 4

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode_hex(text: str) -> int:
    """Decode ``text`` as a big-endian unsigned hex number of at most 32 bits.

    The width check comes before the digit check, so an over-long field is
    reported as too large even if it also contains bad characters. ``int()``
    is not used directly because it accepts signs, whitespace, underscores and
    ``0x`` prefixes.
    """

    if len(text) > MAX_DIGITS:
        raise HexOverflowError()
    value = 0
    for digit in text:
        if digit not in _HEX_DIGITS:
            raise HexFormatError()
        value = (value << 4) | int(digit, 16)
    return value
