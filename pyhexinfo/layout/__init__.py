"""Address bookkeeping for HEX record streams."""

from __future__ import annotations

from .address import AddressState
from .chunks import Chunk, ChunkAccumulator

__all__ = [
    "AddressState",
    "Chunk",
    "ChunkAccumulator",
]
