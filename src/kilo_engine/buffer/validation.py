"""Bounds helpers shared across buffer consumers."""

from __future__ import annotations

from .document import Document
from .state import Cursor


def line_length(document: Document, row: int) -> int:
    """Raw length of ``row``; the virtual trailing line has length 0."""

    if document.has_line(row):
        return len(document.get_line(row))
    return 0


def clamp_cursor(document: Document, cursor: Cursor) -> Cursor:
    """Pull ``cursor`` back into ``[0, len(document)] x [0, line length]``."""

    row, col = cursor
    row = min(max(row, 0), len(document))
    col = min(max(col, 0), line_length(document, row))
    return (row, col)
