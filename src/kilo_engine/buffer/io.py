"""Reading and writing documents as plain newline-terminated text."""

from __future__ import annotations

import os

from .document import Document

FILE_MODE = 0o644


def load_document(path: str | os.PathLike[str], *, tab_stop: int = 4) -> Document:
    """Read ``path`` into a fresh, clean document. ``OSError`` propagates."""

    with open(path, "rb") as handle:
        data = handle.read()
    return Document.from_bytes(data, tab_stop=tab_stop)


def save_document(document: Document, path: str | os.PathLike[str]) -> int:
    """Write ``document`` to ``path`` and return the number of bytes written.

    The file is created if needed, truncated to the new length and written in
    full; a short write raises ``OSError``. The in-memory document is left
    untouched apart from the dirty counter, which is reset on success only.
    """

    payload = document.to_document_bytes()
    fd = os.open(path, os.O_RDWR | os.O_CREAT, FILE_MODE)
    try:
        os.ftruncate(fd, len(payload))
        view = memoryview(payload)
        written = 0
        while written < len(payload):
            count = os.write(fd, view[written:])
            if count <= 0:
                raise OSError(f"short write ({written} of {len(payload)} bytes)")
            written += count
    finally:
        os.close(fd)
    document.mark_saved()
    return len(payload)


__all__ = ["load_document", "save_document"]
