from __future__ import annotations

from kilo_engine.buffer import Document, clamp_cursor, line_length


def make_document(*lines: bytes, tab_stop: int = 4) -> Document:
    return Document(lines, tab_stop=tab_stop)


def test_from_bytes_strips_line_endings() -> None:
    document = Document.from_bytes(b"one\r\ntwo\n\nthree")

    assert document.snapshot() == (b"one", b"two", b"", b"three")
    assert document.dirty == 0


def test_from_bytes_empty_file_has_no_lines() -> None:
    assert len(Document.from_bytes(b"")) == 0
    assert Document.from_bytes(b"\n").snapshot() == (b"",)


def test_insert_line_bounds() -> None:
    document = make_document(b"a")

    document.insert_line(b"b", 1)
    document.insert_line(b"zero", 0)
    document.insert_line(b"ignored", 5)
    document.insert_line(b"ignored", -1)

    assert document.snapshot() == (b"zero", b"a", b"b")
    assert document.dirty == 2


def test_delete_line_out_of_range_is_noop() -> None:
    document = make_document(b"a", b"b")

    document.delete_line(2)
    document.delete_line(0)

    assert document.snapshot() == (b"b",)
    assert document.dirty == 1


def test_insert_char_clamps_column_to_line_end() -> None:
    document = make_document(b"ab")

    document.insert_char(0, 99, ord("c"))
    document.insert_char(0, 0, ord(">"))

    assert document.snapshot() == (b">abc",)


def test_delete_char_ignores_bad_column() -> None:
    document = make_document(b"abc")

    document.delete_char(0, 3)
    document.delete_char(0, 1)

    assert document.snapshot() == (b"ac",)
    assert document.dirty == 1


def test_render_cache_follows_every_mutation() -> None:
    document = make_document(b"a\tb")
    line = document.get_line(0)
    assert line.render == b"a    b"

    document.insert_char(0, 0, ord("\t"))
    assert line.render == b"    a    b"

    document.truncate_line(0, 2)
    assert line.render == b"    a"

    document.append_content(0, b"\tz")
    assert line.render == b"    a    z"


def test_truncate_and_append_bump_dirty() -> None:
    document = make_document(b"hello")

    document.truncate_line(0, 2)
    document.append_content(0, b"!")

    assert document.snapshot() == (b"he!",)
    assert document.dirty == 2


def test_to_document_bytes_terminates_every_line() -> None:
    document = make_document(b"a", b"", b"c")

    assert document.to_document_bytes() == b"a\n\nc\n"
    assert make_document().to_document_bytes() == b""


def test_mark_saved_resets_dirty() -> None:
    document = make_document()
    document.insert_line(b"x", 0)

    document.mark_saved()

    assert document.dirty == 0


def test_clamp_cursor_allows_virtual_trailing_line() -> None:
    document = make_document(b"abc", b"de")

    assert clamp_cursor(document, (5, 7)) == (2, 0)
    assert clamp_cursor(document, (1, 9)) == (1, 2)
    assert clamp_cursor(document, (-1, -1)) == (0, 0)
    assert line_length(document, 2) == 0
