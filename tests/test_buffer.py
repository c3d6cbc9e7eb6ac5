from __future__ import annotations

import pytest

from text_extensions.buffer import (
    Buffer,
    BufferDocument,
    BufferState,
    BufferValidationError,
    RegisterBank,
    UndoTimeline,
)
from text_extensions.lineset import TextRegion


def test_from_text_normalises_line_breaks() -> None:
    buffer = Buffer.from_text("a\r\nb\rc")

    assert buffer.lines() == ["a", "b", "c"]
    assert buffer.text == "a\nb\nc"


def test_offsets_and_cursors_round_trip() -> None:
    buffer = Buffer.from_text("ab\ncde")

    assert buffer.offset_of((1, 2)) == 5
    assert buffer.cursor_at(3) == (1, 0)
    assert buffer.cursor_at(2) == (0, 2)


def test_line_bounds_and_next_line() -> None:
    buffer = Buffer.from_text("ab\ncde")

    assert buffer.line_bounds(4) == (3, 6)
    assert buffer.line_bounds(2) == (0, 2)
    assert buffer.next_line_start(1) == 3
    assert buffer.next_line_start(4) is None


def test_caret_only_selection_is_single_empty_region() -> None:
    buffer = Buffer.from_text("abc\ndef")
    buffer.set_caret((1, 2))

    assert buffer.selection_regions() == (TextRegion(6, 6),)


def test_stream_selection_yields_one_region_per_line() -> None:
    buffer = Buffer.from_text("abc\ndef\nghi")

    regions = buffer.select((0, 1), (2, 1))

    assert regions == (TextRegion(1, 3), TextRegion(4, 7), TextRegion(8, 9))


def test_block_selection_clamps_short_lines() -> None:
    buffer = Buffer.from_text("abcd\nx\nefgh")

    regions = buffer.select_block((2, 3), (0, 1))

    assert regions == (TextRegion(1, 3), TextRegion(6, 6), TextRegion(8, 10))


def test_select_lines_covers_full_lines() -> None:
    buffer = Buffer.from_text("ab\ncd\nef")

    assert buffer.select_lines(0, 1) == (TextRegion(0, 2), TextRegion(3, 5))


def test_select_regions_keeps_given_order() -> None:
    buffer = Buffer.from_text("ab\ncd")
    regions = [TextRegion(3, 5), TextRegion(0, 1)]

    assert buffer.select_regions(regions) == tuple(regions)
    assert buffer.select_regions([]) == (TextRegion.caret(1),)


def test_edits_mark_document_dirty() -> None:
    buffer = Buffer.from_text("abc")

    assert buffer.document.dirty is False
    buffer.replace_text(0, 1, "z")
    assert buffer.document.dirty is True
    assert buffer.document.version == 1


def test_out_of_range_positions_raise() -> None:
    buffer = Buffer.from_text("abc")

    with pytest.raises(BufferValidationError):
        buffer.get_text(0, 10)
    with pytest.raises(BufferValidationError):
        buffer.set_caret((3, 0))
    with pytest.raises(BufferValidationError):
        buffer.select_regions([TextRegion(2, 9)])


def test_read_only_buffer_rejects_edits() -> None:
    buffer = Buffer.from_text("abc", read_only=True)

    with pytest.raises(PermissionError):
        buffer.insert_text(0, "x")
    assert buffer.text == "abc"


def test_edits_outside_scope_are_separate_undo_steps() -> None:
    buffer = Buffer.from_text("abc")

    buffer.insert_text(0, "x")
    buffer.delete_text(1, 2)

    assert buffer.text == "xbc"
    assert buffer.undo.labels() == ["insert_text", "delete_text"]


def test_undo_scope_groups_edits_into_one_entry() -> None:
    buffer = Buffer.from_text("abc")

    with buffer.undo_scope("Group"):
        buffer.insert_text(0, "x")
        buffer.insert_text(0, "y")

    assert buffer.text == "yxabc"
    assert buffer.undo.labels() == ["Group"]

    assert buffer.undo_last() is True
    assert buffer.text == "abc"
    assert buffer.redo_last() is True
    assert buffer.text == "yxabc"


def test_nested_scope_joins_outer_scope() -> None:
    buffer = Buffer.from_text("abc")

    with buffer.undo_scope("Outer"):
        buffer.replace_text(0, 1, "A")
        with buffer.undo_scope("Inner"):
            buffer.replace_text(1, 2, "B")

    assert buffer.text == "ABc"
    assert buffer.undo.labels() == ["Outer"]


def test_scope_records_partial_edits_when_block_raises() -> None:
    buffer = Buffer.from_text("abc")

    with pytest.raises(RuntimeError):
        with buffer.undo_scope("Boom"):
            buffer.insert_text(0, "x")
            raise RuntimeError("host failure")

    assert buffer.text == "xabc"
    assert buffer.undo.labels() == ["Boom"]

    buffer.insert_text(0, "y")
    assert buffer.undo.labels() == ["Boom", "insert_text"]

    buffer.undo_last()
    buffer.undo_last()
    assert buffer.text == "abc"


def test_scope_without_changes_records_nothing() -> None:
    buffer = Buffer.from_text("abc")

    with buffer.undo_scope("Nothing"):
        buffer.replace_text(0, 1, "a")

    assert buffer.undo.labels() == []
    assert buffer.undo_last() is False


def test_selection_follows_edits() -> None:
    buffer = Buffer.from_text("ab\ncd")
    buffer.select_lines(1, 1)

    buffer.insert_text(0, "xx")

    (region,) = buffer.selection_regions()
    assert buffer.get_text(region.start, region.end) == "cd"


def test_clipboard_register() -> None:
    buffer = Buffer.from_text("")

    assert buffer.clipboard_text() is None
    buffer.set_clipboard("one\ntwo")
    assert buffer.clipboard_text() == "one\ntwo"
    assert buffer.registers.get("+").text == "one\ntwo"
    assert buffer.registers.get('"').text == "one\ntwo"
    buffer.set_clipboard("")
    assert buffer.clipboard_text() is None


def test_injected_empty_parts_are_kept() -> None:
    document = BufferDocument()
    state = BufferState()
    registers = RegisterBank()
    timeline = UndoTimeline()
    buffer = Buffer(
        document=document, state=state, registers=registers, undo=timeline
    )

    assert buffer.document is document
    assert buffer.state is state
    assert buffer.registers is registers
    assert buffer.undo is timeline

    buffer.insert_text(0, "abc")

    assert buffer.undo is timeline
    assert timeline.labels() == ["insert_text"]
