"""Line Store, Render Cache, and document file I/O."""

from .document import Document, Line
from .io import load_document, save_document
from .render import expand_tabs, raw_column_for_render, render_column
from .state import Cursor
from .validation import clamp_cursor, line_length

__all__ = [
    "Document",
    "Line",
    "Cursor",
    "clamp_cursor",
    "line_length",
    "expand_tabs",
    "render_column",
    "raw_column_for_render",
    "load_document",
    "save_document",
]
