from __future__ import annotations

import os
from typing import Optional

import pytest

from kilo_engine import __version__
from kilo_engine.app import Editor, fd_writer, main
from kilo_engine.terminal import InputDecoder, TerminalError
from kilo_engine.view import ansi

from support import make_session


class ScriptedSource:
    def __init__(self, data: bytes) -> None:
        self._pending: list[Optional[int]] = list(data)

    def read_byte(self) -> Optional[int]:
        return self._pending.pop(0) if self._pending else None


class FakeStream:
    def __init__(self, fd: int) -> None:
        self._fd = fd

    def fileno(self) -> int:
        return self._fd


def make_editor(keys: bytes, *lines: bytes) -> tuple[Editor, list[bytes]]:
    frames: list[bytes] = []
    session = make_session(*lines, rows=5, cols=40)
    editor = Editor(session, InputDecoder(ScriptedSource(keys)), frames.append)
    return editor, frames


def test_run_until_quit_and_clear_screen() -> None:
    editor, frames = make_editor(b"hi\x11\x11\x11\x11")

    editor.run()

    assert not editor.running
    assert editor.session.document.snapshot() == (b"hi",)
    assert frames[-1] == ansi.clear_screen()
    assert b"WARNING!!!" in frames[-2]


def test_step_without_input_only_refreshes() -> None:
    editor, frames = make_editor(b"")

    assert editor.step() is None
    assert len(frames) == 1
    assert frames[0].startswith(ansi.CURSOR_HIDE)
    assert editor.running


def test_search_events_flow_through_bus() -> None:
    editor, _ = make_editor(b"\x06two\r\x11", b"one", b"two")
    seen: list[object] = []
    editor.manager.context.bus.subscribe("search.commit", seen.append)

    editor.run()

    assert seen == ["two"]
    assert editor.session.cursor == (1, 0)


def test_fd_writer_writes_everything() -> None:
    read_fd, write_fd = os.pipe()
    try:
        fd_writer(write_fd)(b"frame")
        assert os.read(read_fd, 16) == b"frame"
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_fd_writer_failure_is_terminal_error() -> None:
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)

    with pytest.raises(TerminalError) as excinfo:
        fd_writer(write_fd)(b"frame")
    assert excinfo.value.operation == "write"


def test_main_refuses_non_terminal_input(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    in_read, in_write = os.pipe()
    out_read, out_write = os.pipe()
    monkeypatch.setattr("sys.stdin", FakeStream(in_read))
    monkeypatch.setattr("sys.stdout", FakeStream(out_write))
    try:
        status = main([])
        assert status == 1
        assert os.read(out_read, 64) == ansi.clear_screen()
    finally:
        for fd in (in_read, in_write, out_read, out_write):
            os.close(fd)
    assert "isatty" in capsys.readouterr().err


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out
