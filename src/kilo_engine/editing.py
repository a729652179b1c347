"""Edit Engine: cursor motion and key-level edits on an :class:`EditorSession`.

Every function here mutates the session in place and leaves clamping of the
cursor column to the caller, which does it once per key.
"""

from __future__ import annotations

from kilo_engine.session import EditorSession


def cursor_left(session: EditorSession) -> None:
    viewport = session.viewport
    if viewport.cursor_col > 0:
        viewport.cursor_col -= 1
    elif viewport.cursor_row > 0:
        viewport.cursor_row -= 1
        viewport.cursor_col = session.current_line_length()


def cursor_right(session: EditorSession) -> None:
    viewport = session.viewport
    if not session.document.has_line(viewport.cursor_row):
        return
    if viewport.cursor_col < session.current_line_length():
        viewport.cursor_col += 1
    else:
        viewport.set_cursor(viewport.cursor_row + 1, 0)


def cursor_up(session: EditorSession) -> None:
    if session.viewport.cursor_row > 0:
        session.viewport.cursor_row -= 1


def cursor_down(session: EditorSession) -> None:
    if session.viewport.cursor_row < len(session.document):
        session.viewport.cursor_row += 1


def cursor_home(session: EditorSession) -> None:
    session.viewport.cursor_col = 0


def cursor_end(session: EditorSession) -> None:
    session.viewport.cursor_col = session.current_line_length()


def cursor_page_up(session: EditorSession) -> None:
    """Jump to the first visible row."""

    session.viewport.cursor_row = session.viewport.row_offset


def cursor_page_down(session: EditorSession) -> None:
    """Jump to the last visible row, or the end of the document."""

    viewport = session.viewport
    viewport.cursor_row = min(viewport.row_offset + viewport.rows - 1, len(session.document))


def insert_byte(session: EditorSession, byte: int) -> None:
    """Insert ``byte`` at the cursor, growing the document on the trailing line."""

    document, viewport = session.document, session.viewport
    if viewport.cursor_row == len(document):
        document.insert_line(b"", len(document))
    document.insert_char(viewport.cursor_row, viewport.cursor_col, byte)
    viewport.cursor_col += 1


def insert_newline(session: EditorSession) -> None:
    """Split the current line at the cursor and move to the start of the new one."""

    document, viewport = session.document, session.viewport
    row, col = viewport.cursor
    if col == 0 or not document.has_line(row):
        document.insert_line(b"", row)
    else:
        tail = bytes(document.get_line(row).raw[col:])
        document.insert_line(tail, row + 1)
        document.truncate_line(row, col)
    viewport.set_cursor(row + 1, 0)


def delete_backward(session: EditorSession) -> None:
    """Remove the byte before the cursor, joining lines at column 0."""

    document, viewport = session.document, session.viewport
    row, col = viewport.cursor
    if not document.has_line(row):
        return
    if row == 0 and col == 0:
        return
    if col > 0:
        document.delete_char(row, col - 1)
        viewport.cursor_col = col - 1
        return
    previous_length = len(document.get_line(row - 1))
    document.append_content(row - 1, bytes(document.get_line(row).raw))
    document.delete_line(row)
    viewport.set_cursor(row - 1, previous_length)


def delete_forward(session: EditorSession) -> None:
    """Delete under the cursor: a right move followed by a backspace."""

    cursor_right(session)
    delete_backward(session)


__all__ = [
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "cursor_down",
    "cursor_home",
    "cursor_end",
    "cursor_page_up",
    "cursor_page_down",
    "insert_byte",
    "insert_newline",
    "delete_backward",
    "delete_forward",
]
