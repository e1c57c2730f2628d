"""Command-line front end for the HEX file inspector."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional

from pyhexinfo.loader import HexSummary, parse_hex_from_path, parse_hex_stream
from pyhexinfo.report import format_summary
from pyhexinfo.utils import debug_log

STDIN_NAME = "stdin"


@dataclass
class InfoConfig:
    """Options chosen on the command line."""

    input_path: Optional[Path] = None
    encoding: str = "utf-8"
    list_chunks: bool = True


class HexInfoApp:
    """Reads one HEX file (or standard input) and renders its summary."""

    def __init__(self, config: InfoConfig, stdin: Optional[BinaryIO] = None) -> None:
        self._config = config
        self._stdin = stdin

    def load(self) -> HexSummary:
        path = self._config.input_path
        if path is None:
            stream = self._stdin if self._stdin is not None else sys.stdin.buffer
            debug_log("session", "reading %s", STDIN_NAME)
            return parse_hex_stream(stream, STDIN_NAME, encoding=self._config.encoding)
        debug_log("session", "reading %s", path)
        return parse_hex_from_path(path, encoding=self._config.encoding)

    def run(self) -> List[str]:
        summary = self.load()
        return format_summary(summary, list_chunks=self._config.list_chunks)
