"""Line Store: the ordered, mutable sequence of document lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence

from .render import expand_tabs, raw_column_for_render, render_column


@dataclass(slots=True)
class Line:
    """Raw bytes of one line plus the cached tab-expanded form."""

    raw: bytearray = field(default_factory=bytearray)
    tab_stop: int = 4
    render: bytes = b""

    def __post_init__(self) -> None:
        self.raw = bytearray(self.raw)
        self.refresh()

    def refresh(self) -> None:
        self.render = expand_tabs(self.raw, self.tab_stop)

    def __len__(self) -> int:
        return len(self.raw)

    def render_column(self, raw_column: int) -> int:
        return render_column(self.raw, raw_column, self.tab_stop)

    def raw_column_for_render(self, render_col: int) -> int:
        return raw_column_for_render(self.raw, render_col, self.tab_stop)


class Document:
    """Owns the lines of the open file and the modification counter.

    Index arguments are checked here rather than trusted: out-of-range line
    indices turn the call into a no-op, and column arguments are clamped or
    ignored the same way. ``dirty`` grows by one on every mutation and is only
    reset by :meth:`mark_saved`.
    """

    def __init__(self, lines: Iterable[bytes] = (), *, tab_stop: int = 4) -> None:
        self.tab_stop = tab_stop
        self._lines: List[Line] = [Line(bytearray(raw), tab_stop) for raw in lines]
        self.dirty = 0

    @classmethod
    def from_bytes(cls, data: bytes, *, tab_stop: int = 4) -> "Document":
        """Build a document from file content, stripping ``\\n``/``\\r`` line ends."""

        document = cls(tab_stop=tab_stop)
        if data:
            chunks = data.split(b"\n")
            if data.endswith(b"\n"):
                chunks.pop()
            for chunk in chunks:
                document._lines.append(Line(bytearray(chunk.rstrip(b"\r\n")), tab_stop))
        return document

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> Line:
        return self._lines[index]

    def has_line(self, index: int) -> bool:
        return 0 <= index < len(self._lines)

    def snapshot(self) -> Sequence[bytes]:
        """Raw content of every line, detached from the store."""

        return tuple(bytes(line.raw) for line in self._lines)

    def insert_line(self, content: bytes, at: int) -> None:
        if at < 0 or at > len(self._lines):
            return
        self._lines.insert(at, Line(bytearray(content), self.tab_stop))
        self.dirty += 1

    def delete_line(self, at: int) -> None:
        if not self.has_line(at):
            return
        del self._lines[at]
        self.dirty += 1

    def insert_char(self, row: int, at: int, byte: int) -> None:
        if not self.has_line(row):
            return
        line = self._lines[row]
        if at < 0 or at > len(line.raw):
            at = len(line.raw)
        line.raw.insert(at, byte)
        line.refresh()
        self.dirty += 1

    def delete_char(self, row: int, at: int) -> None:
        if not self.has_line(row):
            return
        line = self._lines[row]
        if at < 0 or at >= len(line.raw):
            return
        del line.raw[at]
        line.refresh()
        self.dirty += 1

    def append_content(self, row: int, content: bytes) -> None:
        if not self.has_line(row):
            return
        line = self._lines[row]
        line.raw.extend(content)
        line.refresh()
        self.dirty += 1

    def truncate_line(self, row: int, length: int) -> None:
        if not self.has_line(row):
            return
        line = self._lines[row]
        if length < 0 or length >= len(line.raw):
            return
        del line.raw[length:]
        line.refresh()
        self.dirty += 1

    def to_document_bytes(self) -> bytes:
        """On-disk form: every raw line followed by exactly one newline."""

        return b"".join(bytes(line.raw) + b"\n" for line in self._lines)

    def mark_saved(self) -> None:
        self.dirty = 0


__all__ = ["Document", "Line"]
