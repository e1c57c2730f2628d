"""Tests for the environment-driven debug log."""

from __future__ import annotations

import pytest

from pyhexinfo.utils import debug


@pytest.fixture
def categories(monkeypatch):
    def _set(value: str) -> None:
        monkeypatch.setenv(debug.ENV_VAR, value)
        monkeypatch.setattr(debug, "_CATEGORIES", None)

    return _set


def test_debug_disabled_by_default(categories, capsys) -> None:
    categories("")

    assert debug.debug_enabled() is False
    debug.debug_log("chunk", "hidden %d", 1)
    assert capsys.readouterr().err == ""


def test_debug_selected_categories(categories, capsys) -> None:
    categories("Record, chunk")

    assert debug.debug_enabled("record") is True
    assert debug.debug_enabled("CHUNK") is True
    assert debug.debug_enabled("session") is False

    debug.debug_log("chunk", "overlap address=0x%X", 0x100)
    captured = capsys.readouterr()
    assert captured.err == "[HEXINFO][chunk] overlap address=0x100\n"
    assert captured.out == ""


def test_debug_all(categories) -> None:
    categories("all")

    assert debug.debug_enabled("anything") is True


def test_debug_bad_format_arguments_are_appended(categories, capsys) -> None:
    categories("session")

    debug.debug_log("session", "no placeholders", 1, 2)
    assert capsys.readouterr().err == "[HEXINFO][session] no placeholders (1, 2)\n"
