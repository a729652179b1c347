"""Screen Compositor: one frame of terminal output per refresh."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kilo_engine import __version__
from kilo_engine.buffer import Document
from kilo_engine.runtime.config import EDITOR_NAME
from kilo_engine.runtime.telemetry import span

from . import ansi
from .viewport import Viewport

FILLER = b"~"
NO_NAME = "[No name]"


@dataclass(frozen=True, slots=True)
class StatusMessage:
    """Message bar text; ``pinned`` keeps it up past the timeout (live prompts)."""

    text: str
    timestamp: float
    pinned: bool = False

    def visible(self, now: float, timeout: float) -> bool:
        return bool(self.text) and (self.pinned or now - self.timestamp < timeout)


@dataclass(frozen=True, slots=True)
class FrameInfo:
    """Everything outside the document that a frame displays."""

    filename: Optional[str] = None
    message: Optional[StatusMessage] = None
    now: float = 0.0
    message_timeout: float = 5.0
    name_width: int = 20


def welcome_banner() -> bytes:
    return f"{EDITOR_NAME} editor -- version {__version__}".encode()


def draw_rows(document: Document, viewport: Viewport) -> bytes:
    out = bytearray()
    for y in range(viewport.rows):
        row = viewport.row_offset + y
        if row >= len(document):
            if len(document) == 0 and y == viewport.rows // 3:
                out += _centered_banner(viewport.cols)
            else:
                out += FILLER
        else:
            render = document.get_line(row).render
            out += render[viewport.col_offset : viewport.col_offset + viewport.cols]
        out += ansi.CLEAR_LINE + ansi.NEWLINE
    return bytes(out)


def _centered_banner(cols: int) -> bytes:
    banner = welcome_banner()[:cols]
    padding = (cols - len(banner)) // 2
    out = bytearray()
    if padding:
        out += FILLER
        padding -= 1
    out += b" " * padding
    out += banner
    return bytes(out)


def draw_status_bar(document: Document, viewport: Viewport, info: FrameInfo) -> bytes:
    name = (info.filename or NO_NAME)[: info.name_width]
    modified = "(modified)" if document.dirty else ""
    left = f"{name} - {len(document)} lines {modified}".encode(errors="replace")
    right = f"{viewport.cursor_row + 1}/{len(document)}".encode()

    cols = viewport.cols
    left = left[:cols]
    body = bytearray(left)
    if len(left) + len(right) <= cols:
        body += b" " * (cols - len(left) - len(right))
        body += right
    else:
        body += b" " * (cols - len(left))
    return ansi.INVERT_COLOR + bytes(body) + ansi.DEFAULT_COLOR + ansi.NEWLINE


def draw_message_bar(viewport: Viewport, info: FrameInfo) -> bytes:
    out = bytearray(ansi.CLEAR_LINE)
    message = info.message
    if message is not None and message.visible(info.now, info.message_timeout):
        out += message.text.encode(errors="replace")[: viewport.cols]
    return bytes(out)


def compose_frame(document: Document, viewport: Viewport, info: FrameInfo) -> bytes:
    """Build the full output for one refresh.

    Scrolls ``viewport`` first, so the cursor is always inside the window the
    frame shows.
    """

    with span(
        "view::compose",
        component="compositor",
        metadata={"lines": len(document), "row_offset": viewport.row_offset},
    ):
        viewport.scroll(document)
        out = bytearray(ansi.CURSOR_HIDE)
        out += ansi.set_cursor(1, 1)
        out += draw_rows(document, viewport)
        out += draw_status_bar(document, viewport, info)
        out += draw_message_bar(viewport, info)
        out += ansi.set_cursor(*viewport.screen_position())
        out += ansi.CURSOR_SHOW
        return bytes(out)


__all__ = [
    "FrameInfo",
    "StatusMessage",
    "compose_frame",
    "draw_rows",
    "draw_status_bar",
    "draw_message_bar",
    "welcome_banner",
]
