"""Base and start address tracking for HEX record streams."""

from __future__ import annotations

from typing import Optional

from pyhexinfo.codec import HexFormatError, Record, RecordType
from pyhexinfo.utils import debug_log

BASE_RECORD_SIZE = 2
START_RECORD_SIZE = 4


class AddressState:
    """Holds the base address applied to data records and the start address.

    Base address records replace the current base outright. Start address
    records of either kind overwrite ``start_address`` and bump
    ``start_address_count`` so callers can tell when more than one was given.
    """

    def __init__(self) -> None:
        self.base_address = 0
        self.start_address: Optional[int] = None
        self.start_address_count = 0

    def effective_address(self, raw_address: int) -> int:
        return self.base_address + raw_address

    def apply(self, record: Record) -> None:
        record_type = record.record_type
        data = record.data

        if record_type == RecordType.EXTENDED_SEGMENT_ADDRESS:
            _expect_size(record, BASE_RECORD_SIZE)
            self._set_base(int.from_bytes(data, "big") << 4)
        elif record_type == RecordType.EXTENDED_LINEAR_ADDRESS:
            _expect_size(record, BASE_RECORD_SIZE)
            self._set_base(int.from_bytes(data, "big") << 16)
        elif record_type == RecordType.START_SEGMENT_ADDRESS:
            _expect_size(record, START_RECORD_SIZE)
            segment = int.from_bytes(data[:2], "big")
            offset = int.from_bytes(data[2:], "big")
            self._set_start((segment << 4) + offset)
        elif record_type == RecordType.START_LINEAR_ADDRESS:
            _expect_size(record, START_RECORD_SIZE)
            self._set_start(int.from_bytes(data, "big"))
        else:
            raise HexFormatError(f"Not an address record: {record_type.name}")

    def _set_base(self, address: int) -> None:
        self.base_address = address
        debug_log("address", "base=0x%X", address)

    def _set_start(self, address: int) -> None:
        self.start_address = address
        self.start_address_count += 1
        debug_log("address", "start=0x%X count=%d", address, self.start_address_count)


def _expect_size(record: Record, size: int) -> None:
    if record.size != size:
        raise HexFormatError()
