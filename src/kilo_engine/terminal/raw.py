"""Raw terminal mode and window size detection."""

from __future__ import annotations

import os
import re
import termios
from typing import Any, Callable, List, Optional, Tuple

from kilo_engine.view import ansi

_CURSOR_REPORT = re.compile(rb"^\x1b\[(\d+);(\d+)$")


class TerminalError(RuntimeError):
    """Fatal environment failure; ``operation`` names the failing call."""

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{operation}{detail}")
        self.operation = operation
        self.cause = cause


class RawTerminal:
    """Context manager that holds the terminal in raw mode.

    The original attributes are restored on every exit from the ``with``
    block, including exceptions.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._original: Optional[List[Any]] = None

    def __enter__(self) -> "RawTerminal":
        try:
            self._original = termios.tcgetattr(self.fd)
        except termios.error as exc:
            raise TerminalError("tcgetattr", exc) from exc

        raw = termios.tcgetattr(self.fd)
        raw[0] &= ~(
            termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise TerminalError("tcsetattr", exc) from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore()
        return False

    def restore(self) -> None:
        if self._original is None:
            return
        original, self._original = self._original, None
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, original)
        except termios.error as exc:
            raise TerminalError("tcsetattr", exc) from exc


def parse_cursor_report(report: bytes) -> Optional[Tuple[int, int]]:
    """Parse ``ESC [ rows ; cols`` (the trailing ``R`` already removed)."""

    match = _CURSOR_REPORT.match(report)
    if match is None:
        return None
    rows, cols = int(match.group(1)), int(match.group(2))
    if rows == 0 or cols == 0:
        return None
    return rows, cols


def query_cursor_position(
    write: Callable[[bytes], int], read_byte: Callable[[], Optional[int]]
) -> Optional[Tuple[int, int]]:
    """Ask the terminal where the cursor is via ``ESC[6n``."""

    if write(ansi.QUERY_CURSOR_POSITION) != len(ansi.QUERY_CURSOR_POSITION):
        return None
    report = bytearray()
    while len(report) < 31:
        byte = read_byte()
        if byte is None or byte == ord("R"):
            break
        report.append(byte)
    return parse_cursor_report(bytes(report))


def get_window_size(
    fd_out: int,
    write: Callable[[bytes], int],
    read_byte: Callable[[], Optional[int]],
) -> Tuple[int, int]:
    """Return ``(rows, cols)``; falls back to a cursor-position query."""

    try:
        size = os.get_terminal_size(fd_out)
    except OSError:
        size = None
    if size is not None and size.lines > 0 and size.columns > 0:
        return size.lines, size.columns

    corner_jump = ansi.cursor_right(999) + ansi.cursor_down(999)
    if write(corner_jump) != len(corner_jump):
        raise TerminalError("get_window_size")
    position = query_cursor_position(write, read_byte)
    if position is None:
        raise TerminalError("get_window_size")
    return position


__all__ = [
    "RawTerminal",
    "TerminalError",
    "get_window_size",
    "parse_cursor_report",
    "query_cursor_position",
]
