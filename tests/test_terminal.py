from __future__ import annotations

import os
from typing import Optional

import pytest

from kilo_engine.terminal import RawTerminal, TerminalError, get_window_size
from kilo_engine.terminal import raw
from kilo_engine.terminal.raw import parse_cursor_report, query_cursor_position
from kilo_engine.view import ansi


def make_reader(data: bytes):
    pending = list(data)

    def read_byte() -> Optional[int]:
        return pending.pop(0) if pending else None

    return read_byte


def make_writer(sink: list[bytes]):
    def write(data: bytes) -> int:
        sink.append(data)
        return len(data)

    return write


def test_parse_cursor_report() -> None:
    assert parse_cursor_report(b"\x1b[24;80") == (24, 80)
    assert parse_cursor_report(b"\x1b[0;80") is None
    assert parse_cursor_report(b"garbage") is None


def test_query_cursor_position_reads_until_r() -> None:
    sink: list[bytes] = []

    position = query_cursor_position(make_writer(sink), make_reader(b"\x1b[12;34Rxyz"))

    assert position == (12, 34)
    assert sink == [ansi.QUERY_CURSOR_POSITION]


def test_window_size_falls_back_to_cursor_position_query(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_size(fd: int) -> os.terminal_size:
        raise OSError("not a tty")

    monkeypatch.setattr(raw.os, "get_terminal_size", no_size)
    sink: list[bytes] = []

    size = get_window_size(1, make_writer(sink), make_reader(b"\x1b[30;100R"))

    assert size == (30, 100)
    assert sink[0] == ansi.cursor_right(999) + ansi.cursor_down(999)


def test_window_size_failure_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(raw.os, "get_terminal_size", lambda fd: os.terminal_size((0, 0)))

    with pytest.raises(TerminalError) as excinfo:
        get_window_size(1, make_writer([]), make_reader(b""))
    assert excinfo.value.operation == "get_window_size"


def test_raw_mode_requires_a_terminal() -> None:
    read_fd, write_fd = os.pipe()
    try:
        with pytest.raises(TerminalError) as excinfo:
            with RawTerminal(read_fd):
                pass
        assert excinfo.value.operation == "tcgetattr"
    finally:
        os.close(read_fd)
        os.close(write_fd)
