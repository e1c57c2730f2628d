"""Merging accumulator for the address ranges covered by data records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from pyhexinfo.utils import debug_log


@dataclass
class Chunk:
    """A contiguous run of bytes covered by one or more data records."""

    address: int
    size: int

    @property
    def end(self) -> int:
        return self.address + self.size

    def overlaps(self, other: "Chunk") -> bool:
        return self.end > other.address and other.end > self.address

    def touches(self, other: "Chunk") -> bool:
        """True when the two ranges overlap or are directly adjacent."""

        return self.end >= other.address and other.end >= self.address

    def absorb(self, other: "Chunk") -> None:
        end = max(self.end, other.end)
        self.address = min(self.address, other.address)
        self.size = end - self.address


class ChunkAccumulator:
    """Collects data ranges into disjoint, maximal chunks.

    Chunks are kept in descending address order because HEX files usually
    list data in ascending order, so a new chunk normally lands at the front
    of the list after a single comparison. ``chunks()`` reverses this for
    callers.
    """

    def __init__(self) -> None:
        self._chunks: List[Chunk] = []
        self.overlap_count = 0

    def __len__(self) -> int:
        return len(self._chunks)

    def chunks(self) -> List[Chunk]:
        """Return copies of the chunks in ascending address order."""

        return [Chunk(chunk.address, chunk.size) for chunk in reversed(self._chunks)]

    def add(self, address: int, size: int) -> int:
        """Merge ``size`` bytes at ``address`` into the collection.

        Returns the number of existing chunks the new range overlapped, which
        is also added to ``overlap_count``.
        """

        if size <= 0:
            raise ValueError("chunk size must be positive")

        new = Chunk(address, size)
        chunks = self._chunks
        overlaps = 0
        position = None

        for index, existing in enumerate(chunks):
            if existing.overlaps(new):
                overlaps += 1
            if existing.touches(new):
                existing.absorb(new)
                position = index
                break
            if new.address >= existing.address:
                chunks.insert(index, Chunk(new.address, new.size))
                position = index
                break

        if position is None:
            chunks.append(Chunk(new.address, new.size))
        else:
            overlaps += self._merge_following(position, new)

        self.overlap_count += overlaps
        if overlaps:
            debug_log("chunk", "overlap address=0x%X size=0x%X count=%d", address, size, overlaps)
        return overlaps

    def _merge_following(self, position: int, new: Chunk) -> int:
        # Entries after ``position`` have lower addresses; a widened chunk can
        # swallow several of them when the new range bridges a gap.
        chunks = self._chunks
        current = chunks[position]
        overlaps = 0
        while position + 1 < len(chunks) and current.touches(chunks[position + 1]):
            following = chunks.pop(position + 1)
            if following.overlaps(new):
                overlaps += 1
            current.absorb(following)
        return overlaps
