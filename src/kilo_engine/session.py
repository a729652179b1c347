"""The editor session: the one object that owns all mutable editor state."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from kilo_engine.buffer import Document, clamp_cursor, line_length, load_document, save_document
from kilo_engine.runtime import telemetry
from kilo_engine.runtime.config import EditorConfig
from kilo_engine.view import FrameInfo, StatusMessage, Viewport, compose_frame

Clock = Callable[[], float]


@dataclass
class EditorSession:
    """Document, viewport, and the bits of UI state around them.

    Components receive the session explicitly; nothing here is global.
    """

    viewport: Viewport
    config: EditorConfig = field(default_factory=EditorConfig)
    document: Document = field(default_factory=Document)
    filename: Optional[str] = None
    message: Optional[StatusMessage] = None
    quit_remaining: int = -1
    clock: Clock = time.time

    def __post_init__(self) -> None:
        if self.document.tab_stop != self.config.tab_stop:
            dirty = self.document.dirty
            self.document = Document(self.document.snapshot(), tab_stop=self.config.tab_stop)
            self.document.dirty = dirty
        if self.quit_remaining < 0:
            self.quit_remaining = self.config.quit_times

    @property
    def cursor(self) -> tuple[int, int]:
        return self.viewport.cursor

    @property
    def dirty(self) -> bool:
        return self.document.dirty != 0

    def current_line_length(self) -> int:
        return line_length(self.document, self.viewport.cursor_row)

    def clamp_cursor(self) -> None:
        self.viewport.set_cursor(*clamp_cursor(self.document, self.viewport.cursor))

    def set_message(self, text: str, *, pinned: bool = False) -> None:
        """Show ``text`` in the message bar; a pinned message never times out."""

        self.message = StatusMessage(text=text, timestamp=self.clock(), pinned=pinned)

    def reset_quit_confirmation(self) -> None:
        self.quit_remaining = self.config.quit_times

    def open_file(self, path: str) -> None:
        """Load ``path`` into a fresh document.

        A file that cannot be read leaves an empty document under that name and
        reports the system error in the message bar; saving creates the file.
        """

        self.filename = path
        try:
            self.document = load_document(path, tab_stop=self.config.tab_stop)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            self.document = Document(tab_stop=self.config.tab_stop)
            self.set_message(f"Can't open! I/O error: {reason}")
            telemetry.record_event(
                "file.open_failed",
                level="warning",
                data={"path": path, "error": reason},
            )
        self.viewport.set_cursor(0, 0)
        self.viewport.row_offset = 0
        self.viewport.col_offset = 0
        telemetry.record_event(
            "file.open",
            data={"path": path, "lines": len(self.document)},
        )

    def save(self) -> bool:
        """Write the document to ``filename``; report the outcome as a message."""

        if not self.filename:
            return False
        try:
            written = save_document(self.document, self.filename)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            self.set_message(f"Can't save! I/O error: {reason}")
            telemetry.record_event(
                "file.save_failed",
                level="warning",
                data={"path": self.filename, "error": reason},
            )
            return False
        self.set_message(f"{written} bytes written to disk")
        telemetry.record_event(
            "file.save", data={"path": self.filename, "bytes": written}
        )
        return True

    def frame_info(self) -> FrameInfo:
        return FrameInfo(
            filename=self.filename,
            message=self.message,
            now=self.clock(),
            message_timeout=self.config.message_timeout,
            name_width=self.config.status_name_width,
        )

    def render(self) -> bytes:
        return compose_frame(self.document, self.viewport, self.frame_info())


__all__ = ["EditorSession"]
