from __future__ import annotations

import os
from pathlib import Path

from kilo_engine.buffer import Document, load_document, save_document


def test_load_missing_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"first\r\nsecond")

    document = load_document(path)

    assert document.snapshot() == (b"first", b"second")
    assert document.dirty == 0


def test_zero_byte_file_loads_as_empty_document(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")

    assert len(load_document(path)) == 0


def test_save_truncates_longer_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"a much longer previous content\n" * 10)
    document = Document([b"short"])
    document.insert_char(0, 5, ord("!"))

    written = save_document(document, path)

    assert written == len(b"short!\n")
    assert path.read_bytes() == b"short!\n"
    assert document.dirty == 0


def test_save_creates_file_with_default_permissions(tmp_path: Path) -> None:
    path = tmp_path / "new.txt"
    umask = os.umask(0)
    os.umask(umask)

    save_document(Document([b"x"]), path)

    assert path.stat().st_mode & 0o777 == 0o644 & ~umask


def test_save_then_load_preserves_lines(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    lines = (b"\tindented", b"", b"trailing space ")

    save_document(Document(lines), path)

    assert load_document(path).snapshot() == lines
