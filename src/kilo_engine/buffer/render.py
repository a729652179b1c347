"""Tab expansion and raw <-> rendered column mapping.

A tab always occupies ``tab_stop`` columns; it is not aligned to an absolute
tab column.
"""

from __future__ import annotations

TAB = 0x09


def expand_tabs(raw: bytes, tab_stop: int) -> bytes:
    """Return the display form of ``raw``."""

    if TAB not in raw:
        return bytes(raw)
    return bytes(raw).replace(b"\t", b" " * tab_stop)


def render_column(raw: bytes, raw_column: int, tab_stop: int) -> int:
    """Width of ``raw[:raw_column]`` once tabs are expanded."""

    width = 0
    for byte in raw[: max(raw_column, 0)]:
        width += tab_stop if byte == TAB else 1
    return width


def raw_column_for_render(raw: bytes, render_col: int, tab_stop: int) -> int:
    """Raw index of the byte whose rendered span covers ``render_col``.

    A column at or past the last glyph maps to the last raw byte rather than
    one past the end, so an empty line yields ``-1``.
    """

    width = 0
    for index, byte in enumerate(raw):
        width += tab_stop if byte == TAB else 1
        if width > render_col:
            return index
    return len(raw) - 1


__all__ = ["expand_tabs", "render_column", "raw_column_for_render"]
