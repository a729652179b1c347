"""Viewport state and the keep-the-cursor-visible scroll policy."""

from __future__ import annotations

from dataclasses import dataclass

from kilo_engine.buffer import Cursor, Document


@dataclass(frozen=True, slots=True)
class ViewportSnapshot:
    cursor_row: int
    cursor_col: int
    row_offset: int
    col_offset: int


@dataclass(slots=True)
class Viewport:
    """Cursor (buffer coordinates) plus scroll offsets (render coordinates).

    ``rows``/``cols`` are the text area only; the status and message bars are
    already subtracted.
    """

    rows: int
    cols: int
    cursor_row: int = 0
    cursor_col: int = 0
    render_col: int = 0
    row_offset: int = 0
    col_offset: int = 0

    @classmethod
    def for_screen(cls, screen_rows: int, screen_cols: int, *, reserved_rows: int = 2) -> "Viewport":
        return cls(rows=max(screen_rows - reserved_rows, 1), cols=max(screen_cols, 1))

    @property
    def cursor(self) -> Cursor:
        return (self.cursor_row, self.cursor_col)

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor_row = row
        self.cursor_col = col

    def snapshot(self) -> ViewportSnapshot:
        return ViewportSnapshot(
            cursor_row=self.cursor_row,
            cursor_col=self.cursor_col,
            row_offset=self.row_offset,
            col_offset=self.col_offset,
        )

    def restore(self, snapshot: ViewportSnapshot) -> None:
        self.cursor_row = snapshot.cursor_row
        self.cursor_col = snapshot.cursor_col
        self.row_offset = snapshot.row_offset
        self.col_offset = snapshot.col_offset

    def scroll(self, document: Document) -> None:
        """Move the window by the minimum needed to contain the cursor."""

        if document.has_line(self.cursor_row):
            line = document.get_line(self.cursor_row)
            self.render_col = line.render_column(self.cursor_col)
        else:
            self.render_col = 0

        if self.cursor_row < self.row_offset:
            self.row_offset = self.cursor_row
        if self.cursor_row >= self.row_offset + self.rows:
            self.row_offset = self.cursor_row - self.rows + 1
        if self.render_col < self.col_offset:
            self.col_offset = self.render_col
        if self.render_col >= self.col_offset + self.cols:
            self.col_offset = self.render_col - self.cols + 1

    def screen_position(self) -> tuple[int, int]:
        """1-based terminal coordinates of the cursor after :meth:`scroll`."""

        return (
            self.cursor_row - self.row_offset + 1,
            self.render_col - self.col_offset + 1,
        )


__all__ = ["Viewport", "ViewportSnapshot"]
