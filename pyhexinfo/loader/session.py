"""Single-pass driver that validates a HEX file and summarizes its layout."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator

from pyhexinfo.codec import (
    HexFileError,
    HexFormatError,
    HexReadError,
    Record,
    RecordType,
    SequenceError,
    parse_record,
)
from pyhexinfo.layout import AddressState, ChunkAccumulator
from pyhexinfo.utils import debug_log

from .summary import HexSummary

MISSING_EOF_WARNING = "Missing EOF record"
MAX_SNIPPET_LENGTH = 64
ELISION_MARKER = "[etc]"


def parse_hex(lines: Iterable[str], source_name: str = "stdin") -> HexSummary:
    """Validate the HEX records in ``lines`` and summarize them."""

    session = _HexSession(source_name)
    return session.run(lines)


def parse_hex_from_path(path: Path, *, encoding: str = "utf-8") -> HexSummary:
    """Validate and summarize the HEX file at ``path``."""

    try:
        handle = path.open("r", encoding=encoding, errors="replace")
    except OSError as exc:
        raise HexReadError(f"Failed to open file {path}") from exc
    with handle:
        return parse_hex(handle, str(path))


def parse_hex_stream(stream: BinaryIO, source_name: str = "stdin", *, encoding: str = "utf-8") -> HexSummary:
    """Validate and summarize HEX records read from a binary ``stream``.

    Undecodable bytes are replaced rather than rejected so that they show up
    as format errors on the line that holds them.
    """

    reader = io.TextIOWrapper(stream, encoding=encoding, errors="replace")
    try:
        return parse_hex(reader, source_name)
    finally:
        reader.detach()


def make_printable(text: str) -> str:
    """Return ``text`` truncated for error messages, with non-printables as ``?``."""

    if len(text) > MAX_SNIPPET_LENGTH:
        text = text[:MAX_SNIPPET_LENGTH] + ELISION_MARKER
    return "".join(char if " " <= char <= "~" else "?" for char in text)


class _HexSession:
    def __init__(self, source_name: str) -> None:
        self._source_name = source_name
        self._line_number = 1
        self._line = ""
        self._found_eof = False
        self._data_record_count = 0
        self._max_data_size = 0
        self._addresses = AddressState()
        self._chunks = ChunkAccumulator()

    def run(self, lines: Iterable[str]) -> HexSummary:
        try:
            for raw_line in self._read_lines(lines):
                self._line = _strip_terminator(raw_line)
                self._process_line(self._line)
                self._line_number += 1
        except HexReadError:
            raise
        except HexFileError as exc:
            raise exc.with_line(self._line_number, make_printable(self._line)) from exc
        return self._summarize()

    def _read_lines(self, lines: Iterable[str]) -> Iterator[str]:
        iterator = iter(lines)
        while True:
            try:
                line = next(iterator)
            except StopIteration:
                return
            except (OSError, UnicodeDecodeError) as exc:
                raise HexReadError(f"Error reading file {self._source_name}") from exc
            yield line

    def _process_line(self, line: str) -> None:
        if self._found_eof:
            raise SequenceError()

        record = parse_record(line)
        debug_log(
            "record",
            "line=%d type=%s address=0x%04X size=%d",
            self._line_number,
            record.record_type.name,
            record.address,
            record.size,
        )

        if record.record_type == RecordType.DATA:
            self._add_data(record)
        elif record.record_type == RecordType.END_OF_FILE:
            if record.size != 0:
                raise HexFormatError()
            self._found_eof = True
        else:
            self._addresses.apply(record)

    def _add_data(self, record: Record) -> None:
        if record.size:
            address = self._addresses.effective_address(record.address)
            self._chunks.add(address, record.size)
        self._data_record_count += 1
        self._max_data_size = max(self._max_data_size, record.size)

    def _summarize(self) -> HexSummary:
        summary = HexSummary(
            source_name=self._source_name,
            found_eof=self._found_eof,
            start_address=self._addresses.start_address,
            start_address_count=self._addresses.start_address_count,
            data_record_count=self._data_record_count,
            max_data_size=self._max_data_size,
            overlap_count=self._chunks.overlap_count,
            chunks=self._chunks.chunks(),
        )
        if not self._found_eof:
            summary.warnings.append(MISSING_EOF_WARNING)
        debug_log(
            "session",
            "source=%s lines=%d chunks=%d overlaps=%d eof=%s",
            self._source_name,
            self._line_number - 1,
            summary.chunk_count,
            summary.overlap_count,
            summary.found_eof,
        )
        return summary


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
