from __future__ import annotations

from kilo_engine import __version__
from kilo_engine.buffer import Document
from kilo_engine.view import FrameInfo, StatusMessage, Viewport, ansi, compose_frame
from kilo_engine.view.compositor import (
    draw_message_bar,
    draw_rows,
    draw_status_bar,
    welcome_banner,
)


def make_viewport(rows: int = 6, cols: int = 40) -> Viewport:
    return Viewport(rows=rows, cols=cols)


def split_rows(output: bytes) -> list[bytes]:
    rows = output.split(ansi.CLEAR_LINE + ansi.NEWLINE)
    assert rows[-1] == b""
    return rows[:-1]


def test_empty_document_shows_banner_once_centered() -> None:
    viewport = make_viewport(rows=6, cols=80)

    rows = split_rows(draw_rows(Document(), viewport))

    banner = welcome_banner()
    assert banner == f"Kilo editor -- version {__version__}".encode()
    assert sum(banner in row for row in rows) == 1
    centered = rows[6 // 3]
    padding = (80 - len(banner)) // 2
    assert centered == b"~" + b" " * (padding - 1) + banner
    assert all(row == b"~" for index, row in enumerate(rows) if index != 2)


def test_banner_hidden_once_document_has_lines() -> None:
    rows = split_rows(draw_rows(Document([b"hello"]), make_viewport()))

    assert rows[0] == b"hello"
    assert all(row == b"~" for row in rows[1:])


def test_rows_are_sliced_by_offsets_in_render_space() -> None:
    document = Document([b"\tabcdef", b"second", b"third"])
    viewport = make_viewport(rows=2, cols=4)
    viewport.row_offset = 0
    viewport.col_offset = 3

    rows = split_rows(draw_rows(document, viewport))

    assert rows == [b" abc", b"ond"]


def test_status_bar_shows_name_line_count_and_position() -> None:
    document = Document([b"a", b"b", b"c"])
    document.insert_char(0, 0, ord("x"))
    viewport = make_viewport(cols=50)
    viewport.cursor_row = 1
    info = FrameInfo(filename="a-very-long-file-name-indeed.txt")

    bar = draw_status_bar(document, viewport, info)

    assert bar.startswith(ansi.INVERT_COLOR)
    assert bar.endswith(ansi.DEFAULT_COLOR + ansi.NEWLINE)
    body = bar[len(ansi.INVERT_COLOR) : -len(ansi.DEFAULT_COLOR + ansi.NEWLINE)]
    assert len(body) == 50
    assert body.startswith(b"a-very-long-file-nam - 3 lines (modified)")
    assert body.endswith(b"2/3")


def test_status_bar_without_name_and_narrow_screen() -> None:
    viewport = make_viewport(cols=12)

    bar = draw_status_bar(Document(), viewport, FrameInfo())

    body = bar[len(ansi.INVERT_COLOR) : -len(ansi.DEFAULT_COLOR + ansi.NEWLINE)]
    assert body == b"[No name] - "


def test_message_expires_after_timeout() -> None:
    viewport = make_viewport()
    message = StatusMessage("hello", timestamp=100.0)

    fresh = draw_message_bar(viewport, FrameInfo(message=message, now=104.9))
    stale = draw_message_bar(viewport, FrameInfo(message=message, now=105.0))

    assert fresh == ansi.CLEAR_LINE + b"hello"
    assert stale == ansi.CLEAR_LINE


def test_compose_frame_wraps_output_and_places_cursor() -> None:
    document = Document([b"\tab"])
    viewport = make_viewport(rows=3, cols=20)
    viewport.set_cursor(0, 2)

    frame = compose_frame(document, viewport, FrameInfo(filename="f.txt"))

    assert frame.startswith(ansi.CURSOR_HIDE + ansi.set_cursor(1, 1))
    assert frame.endswith(ansi.set_cursor(1, 6) + ansi.CURSOR_SHOW)
    assert b"    ab" in frame
    assert b"f.txt - 1 lines" in frame


def test_compose_frame_scrolls_before_drawing() -> None:
    document = Document([b"line%d" % i for i in range(10)])
    viewport = make_viewport(rows=3, cols=20)
    viewport.set_cursor(8, 0)

    frame = compose_frame(document, viewport, FrameInfo())

    assert viewport.row_offset == 6
    assert b"line6" in frame and b"line8" in frame
    assert b"line5" not in frame
    assert frame.endswith(ansi.set_cursor(3, 1) + ansi.CURSOR_SHOW)
