"""Plain-text rendering of a HEX file summary."""

from __future__ import annotations

from typing import List

from pyhexinfo.loader import HexSummary


def format_summary(summary: HexSummary, *, list_chunks: bool = True) -> List[str]:
    """Render ``summary`` as report lines (without newlines)."""

    lines = [f"HEX file: {summary.source_name}"]
    lines.extend(summary.warnings)

    if summary.multiple_start_addresses:
        lines.append("Multiple start addresses found")
    elif summary.start_address is not None:
        lines.append(f"Start address: 0x{summary.start_address:X}")

    lines.append(f"{summary.data_record_count} data records, max size {summary.max_data_size}")

    header = f"{summary.chunk_count} data segments"
    if summary.overlap_count > 0:
        header += f", {summary.overlap_count} overlaps found"
    lines.append(header + ":")

    if list_chunks:
        for chunk in summary.chunks:
            lines.append(f"start 0x{chunk.address:X} size 0x{chunk.size:X}")
    return lines
