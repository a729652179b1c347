"""Incremental, directional, wrap-around search over rendered lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from kilo_engine.buffer import Document
from kilo_engine.terminal.keys import KeyEvent, SpecialKey
from kilo_engine.view import Viewport, ViewportSnapshot

FORWARD = 1
BACKWARD = -1

_FORWARD_KEYS = {SpecialKey.ARROW_RIGHT.value, SpecialKey.ARROW_DOWN.value}
_BACKWARD_KEYS = {SpecialKey.ARROW_LEFT.value, SpecialKey.ARROW_UP.value}


class SearchAction(str, Enum):
    CONTINUE = "continue"
    COMMIT = "commit"
    CANCEL = "cancel"


@dataclass(frozen=True, slots=True)
class SearchMatch:
    row: int
    render_offset: int
    raw_column: int


@dataclass(slots=True)
class SearchSession:
    """State of one find session.

    ``advance`` is called once per key with the query as it stands after that
    key. Arrow keys step from the last match; any other key restarts the scan
    from the cursor line, so an edited query is searched afresh.
    """

    saved: Optional[ViewportSnapshot] = None
    last_match: Optional[int] = None
    direction: int = FORWARD

    @classmethod
    def start(cls, viewport: Viewport) -> "SearchSession":
        return cls(saved=viewport.snapshot())

    def reset(self) -> None:
        self.last_match = None
        self.direction = FORWARD

    def advance(
        self, document: Document, viewport: Viewport, query: str, key: KeyEvent
    ) -> SearchAction:
        if key.key == "ENTER":
            self.reset()
            return SearchAction.COMMIT
        if key.key == "ESC":
            self.reset()
            return SearchAction.CANCEL

        if key.key in _FORWARD_KEYS:
            self.direction = FORWARD
        elif key.key in _BACKWARD_KEYS:
            self.direction = BACKWARD
        else:
            self.reset()

        match = self.find_next(document, viewport.cursor_row, query)
        if match is not None:
            self.last_match = match.row
            viewport.set_cursor(match.row, match.raw_column)
            viewport.row_offset = len(document)
        return SearchAction.CONTINUE

    def restore(self, viewport: Viewport) -> None:
        """Put the cursor and scroll back where they were at ``start``."""

        if self.saved is not None:
            viewport.restore(self.saved)

    def find_next(
        self, document: Document, cursor_row: int, query: str
    ) -> Optional[SearchMatch]:
        """Scan at most one full lap of the document in ``direction``.

        Without a previous match the cursor line itself is the first candidate.
        """

        total = len(document)
        if total == 0 or not query:
            return None

        needle = query.encode("latin-1", errors="replace")
        if self.last_match is not None:
            current = self.last_match
        else:
            current = min(max(cursor_row, 0), total - 1) - self.direction

        for _ in range(total):
            current += self.direction
            if current < 0:
                current = total - 1
            elif current >= total:
                current = 0

            line = document.get_line(current)
            offset = line.render.find(needle)
            if offset != -1:
                return SearchMatch(
                    row=current,
                    render_offset=offset,
                    raw_column=line.raw_column_for_render(offset),
                )
        return None


__all__ = ["SearchSession", "SearchAction", "SearchMatch", "FORWARD", "BACKWARD"]
