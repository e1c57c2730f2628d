"""Result structures produced by the HEX session driver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from pyhexinfo.layout import Chunk


@dataclass
class HexSummary:
    """Everything learned from one pass over a HEX file."""

    source_name: str = "stdin"
    found_eof: bool = False
    start_address: Optional[int] = None
    start_address_count: int = 0
    data_record_count: int = 0
    max_data_size: int = 0
    overlap_count: int = 0
    chunks: List[Chunk] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

    @property
    def multiple_start_addresses(self) -> bool:
        return self.start_address_count > 1

    @property
    def total_size(self) -> int:
        return sum(chunk.size for chunk in self.chunks)
