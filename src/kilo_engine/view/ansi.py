"""VT100 control sequences the editor emits."""

from __future__ import annotations

CLEAR_SCREEN = b"\x1b[2J"
CLEAR_LINE = b"\x1b[K"
CURSOR_HIDE = b"\x1b[?25l"
CURSOR_SHOW = b"\x1b[?25h"
INVERT_COLOR = b"\x1b[7m"
DEFAULT_COLOR = b"\x1b[m"
QUERY_CURSOR_POSITION = b"\x1b[6n"
NEWLINE = b"\r\n"


def set_cursor(row: int, col: int) -> bytes:
    """Absolute positioning; ``row``/``col`` are 1-based."""

    return b"\x1b[%d;%dH" % (row, col)


def cursor_down(rows: int) -> bytes:
    return b"\x1b[%dB" % rows


def cursor_right(cols: int) -> bytes:
    return b"\x1b[%dC" % cols


def clear_screen() -> bytes:
    return CLEAR_SCREEN + set_cursor(1, 1)
