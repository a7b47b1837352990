from __future__ import annotations

from pathlib import Path

import pytest

from bed.buffer import (
    Buffer,
    EditorState,
    LineDocument,
    ensure_range,
    read_buffer,
    write_buffer,
)
from bed.errors import AddressError, FileError


def test_trailing_newline_does_not_open_a_line() -> None:
    assert LineDocument.from_text("a\nb\n").line_count == 2
    assert LineDocument.from_text("a\nb").line_count == 2
    assert LineDocument.from_text("").line_count == 0
    assert LineDocument.from_text("\n").line_count == 1
    assert LineDocument.from_text("a\n\n").line_count == 2


def test_lines_exclude_newlines() -> None:
    document = LineDocument.from_text("alpha\n\ngamma\n")

    assert list(document.lines()) == ["alpha", "", "gamma"]


def test_byte_offsets_count_utf8_bytes() -> None:
    document = LineDocument.from_text("héllo\nwörld\n")

    assert document.byte_of_line(0) == 0
    assert document.byte_len_of_line(0) == 6
    assert document.byte_of_line(1) == 7
    assert document.byte_len_of_line(1) == 6
    assert document.get_line(1) == "wörld"


def test_line_of_byte_uses_line_starts() -> None:
    document = LineDocument.from_text("ab\ncd\nef")

    assert document.line_of_byte(0) == 0
    assert document.line_of_byte(2) == 0
    assert document.line_of_byte(3) == 1
    assert document.line_of_byte(7) == 2


def test_out_of_range_line_raises_address_error() -> None:
    document = LineDocument.from_text("a\nb\n")

    with pytest.raises(AddressError):
        document.get_line(2)
    with pytest.raises(AddressError):
        document.byte_of_line(-1)


def test_edits_return_new_documents_with_fresh_offsets() -> None:
    original = LineDocument.from_text("one\ntwo\nthree\n")

    edited = original.delete(4, 7).insert(4, "2a\n2b")

    assert list(original.lines()) == ["one", "two", "three"]
    assert list(edited.lines()) == ["one", "2a", "2b", "three"]
    assert edited.byte_of_line(3) == len("one\n2a\n2b\n")
    assert edited.version == original.version + 2


def test_buffer_replace_line_keeps_newline() -> None:
    buffer = Buffer.from_text("a\nb\nc\nd\ne\n")

    delta = buffer.replace_line(2, "x\ny")

    assert list(buffer.lines()) == ["a", "b", "x", "y", "d", "e"]
    assert delta.line_count == 6
    assert buffer.text() == "a\nb\nx\ny\nd\ne\n"


def test_buffer_replace_is_all_or_nothing() -> None:
    buffer = Buffer.from_text("abc\n")
    before = buffer.document

    with pytest.raises(AddressError):
        buffer.replace(2, 99, "zz", label="bad")

    assert buffer.document is before


def test_buffer_from_bytes_rejects_invalid_utf8() -> None:
    with pytest.raises(UnicodeDecodeError):
        Buffer.from_bytes(b"\xff\xfe\n")


def test_ensure_range_accepts_degenerate_ranges() -> None:
    document = LineDocument.from_text("a\nb\n")

    assert ensure_range(document, 5, 3) == (5, 3)
    with pytest.raises(AddressError):
        ensure_range(document, 1, 3)
    with pytest.raises(AddressError):
        ensure_range(document, 0, 1)


def test_editor_state_clamp() -> None:
    state = EditorState(current_line=9)

    state.clamp(4)
    assert state.current_line == 4

    state.clamp(0)
    assert state.current_line == 0


def test_read_and_write_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_bytes("first\nsecond ünïcode\nno newline".encode("utf-8"))

    buffer = read_buffer(target)
    buffer.replace_line(0, "FIRST")
    written = write_buffer(buffer, target)

    assert target.read_bytes() == buffer.to_bytes()
    assert written == len(buffer.to_bytes())
    assert read_buffer(target).text() == buffer.text()


def test_read_missing_file_raises_file_error(tmp_path: Path) -> None:
    with pytest.raises(FileError) as excinfo:
        read_buffer(tmp_path / "missing.txt")

    assert excinfo.value.path == tmp_path / "missing.txt"


def test_read_non_utf8_file_raises_file_error(tmp_path: Path) -> None:
    target = tmp_path / "binary.dat"
    target.write_bytes(b"\x80\x81\x82")

    with pytest.raises(FileError, match="not valid UTF-8"):
        read_buffer(target)


def test_write_failure_raises_file_error(tmp_path: Path) -> None:
    buffer = Buffer.from_text("a\n")

    with pytest.raises(FileError):
        write_buffer(buffer, tmp_path / "missing-dir" / "out.txt")
