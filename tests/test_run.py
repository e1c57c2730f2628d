"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import sys

import pytest

import run
from pyhexinfo.codec import record_checksum
from pyhexinfo.ui import HexInfoApp, InfoConfig


def _line(record_type: int, address: int, data: bytes) -> str:
    checksum = record_checksum(len(data), address, record_type, data)
    return f":{len(data):02X}{address:04X}{record_type:02X}{data.hex().upper()}{checksum:02X}"


SAMPLE = "\n".join(
    [
        _line(0x04, 0x0000, b"\x00\x01"),
        _line(0x00, 0x0000, bytes(16)),
        _line(0x00, 0x0010, bytes(16)),
        _line(0x05, 0x0000, b"\x00\x01\x00\x00"),
        ":00000001FF",
        "",
    ]
)


def test_main_reports_file(tmp_path, capsys) -> None:
    path = tmp_path / "sample.hex"
    path.write_text(SAMPLE)

    assert run.main([str(path)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"HEX file: {path}",
        "Start address: 0x10000",
        "2 data records, max size 16",
        "1 data segments:",
        "start 0x10000 size 0x20",
    ]


def test_main_quiet_skips_segments(tmp_path, capsys) -> None:
    path = tmp_path / "sample.hex"
    path.write_text(SAMPLE)

    assert run.main(["--quiet", str(path)]) == 0

    out = capsys.readouterr().out
    assert "start 0x" not in out
    assert "1 data segments:" in out


def test_main_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(SAMPLE.encode("ascii"))))

    assert run.main([]) == 0

    assert capsys.readouterr().out.startswith("HEX file: stdin\n")


def test_main_format_error_exit_status(tmp_path, capsys) -> None:
    path = tmp_path / "broken.hex"
    path.write_text(":00000001FE\n")

    with pytest.raises(SystemExit) as excinfo:
        run.main([str(path)])

    assert excinfo.value.code == run.EXIT_FORMAT_ERROR
    err = capsys.readouterr().err
    assert err == "hexinfo: Error: Incorrect checksum\nLine 1: :00000001FE\n"


def test_main_missing_file_exit_status(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run.main([str(tmp_path / "nope.hex")])

    assert excinfo.value.code == run.EXIT_READ_ERROR
    assert "Failed to open file" in capsys.readouterr().err


def test_main_rejects_extra_arguments() -> None:
    with pytest.raises(SystemExit) as excinfo:
        run.main(["a.hex", "b.hex"])

    assert excinfo.value.code == 2


def test_app_uses_supplied_stdin() -> None:
    app = HexInfoApp(InfoConfig(), stdin=io.BytesIO(b":00000001FF\n"))

    assert app.run() == ["HEX file: stdin", "0 data records, max size 0", "0 data segments:"]
