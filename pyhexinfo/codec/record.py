"""Intel HEX record parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import ChecksumError, HexFormatError
from .hexdigits import decode_hex

START_CODE = ":"
DATA_OFFSET = 1 + 2 + 4 + 2  # start code, count, address, type
MIN_LINE_LENGTH = DATA_OFFSET + 2
MAX_DATA_SIZE = 255
MAX_LINE_LENGTH = MIN_LINE_LENGTH + 2 * MAX_DATA_SIZE


class RecordType(IntEnum):
    """Record types defined by the Intel HEX format."""

    DATA = 0x00
    END_OF_FILE = 0x01
    EXTENDED_SEGMENT_ADDRESS = 0x02
    START_SEGMENT_ADDRESS = 0x03
    EXTENDED_LINEAR_ADDRESS = 0x04
    START_LINEAR_ADDRESS = 0x05


@dataclass(frozen=True)
class Record:
    """One decoded line of a HEX file with a verified checksum."""

    record_type: RecordType
    address: int
    data: bytes
    checksum: int

    @property
    def size(self) -> int:
        return len(self.data)


def parse_record(line: str) -> Record:
    """Parse one HEX record line (without its line terminator)."""

    length = len(line)
    if length < MIN_LINE_LENGTH or length > MAX_LINE_LENGTH:
        raise HexFormatError()
    if line[0] != START_CODE:
        raise HexFormatError()

    count = decode_hex(line[1:3])
    if length != MIN_LINE_LENGTH + 2 * count:
        raise HexFormatError()
    address = decode_hex(line[3:7])
    type_value = decode_hex(line[7:9])

    # Every byte from the count field through the checksum byte.
    fields = [decode_hex(line[index : index + 2]) for index in range(1, length - 1, 2)]
    if sum(fields) & 0xFF:
        raise ChecksumError()

    try:
        record_type = RecordType(type_value)
    except ValueError as exc:
        raise HexFormatError() from exc

    data_start = DATA_OFFSET // 2
    return Record(
        record_type=record_type,
        address=address,
        data=bytes(fields[data_start : data_start + count]),
        checksum=fields[-1],
    )


def record_checksum(count: int, address: int, record_type: int, data: bytes) -> int:
    """Return the checksum byte that makes a record body sum to zero."""

    total = count + (address >> 8) + (address & 0xFF) + record_type + sum(data)
    return (-total) & 0xFF
