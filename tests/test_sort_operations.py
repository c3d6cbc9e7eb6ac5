from __future__ import annotations

from text_extensions.buffer import Buffer
from text_extensions.lineset import sort_lines, sort_selection


def lines_selected(text: str) -> Buffer:
    buffer = Buffer.from_text(text)
    buffer.select_lines(0, buffer.document.line_count - 1)
    return buffer


def test_sort_lines_drops_blank_line_and_strips() -> None:
    buffer = lines_selected("banana\n  apple\n")

    assert sort_lines(buffer) is True

    assert buffer.lines() == ["apple", "banana"]


def test_sort_lines_removes_inner_blank_lines() -> None:
    buffer = Buffer.from_text("banana\n  apple\n\ntail")
    buffer.select_lines(0, 2)

    sort_lines(buffer)

    assert buffer.lines() == ["apple", "banana", "tail"]


def test_sort_lines_reuses_first_line_indentation() -> None:
    buffer = lines_selected("    zeta\n  alpha\n\tmu")

    sort_lines(buffer)

    assert buffer.lines() == ["    alpha", "    mu", "    zeta"]


def test_sort_lines_is_ordinal() -> None:
    buffer = lines_selected("b\nB\na\nA")

    sort_lines(buffer)

    assert buffer.lines() == ["A", "B", "a", "b"]


def test_sort_lines_expands_partial_selection() -> None:
    buffer = Buffer.from_text("pear tree\napple pie")
    buffer.select((0, 5), (1, 3))

    sort_lines(buffer)

    assert buffer.lines() == ["apple pie", "pear tree"]


def test_sort_lines_twice_is_a_noop() -> None:
    buffer = lines_selected("c\na\nb")

    sort_lines(buffer)
    first = buffer.lines()
    buffer.select_lines(0, 2)
    sort_lines(buffer)

    assert buffer.lines() == first == ["a", "b", "c"]
    assert buffer.undo.labels() == ["SortLines"]


def test_sort_needs_more_than_one_region() -> None:
    buffer = Buffer.from_text("b\na")
    buffer.set_caret((0, 0))

    assert sort_lines(buffer) is False
    assert sort_selection(buffer) is False
    assert buffer.text == "b\na"


def test_sort_lines_is_one_undo_step() -> None:
    buffer = lines_selected("b\n\na")

    sort_lines(buffer)

    assert buffer.lines() == ["a", "b"]
    assert buffer.undo.labels() == ["SortLines"]
    buffer.undo_last()
    assert buffer.text == "b\n\na"


def test_sort_selection_sorts_spans() -> None:
    buffer = lines_selected("zeta\nalpha\nmu")

    assert sort_selection(buffer) is True

    assert buffer.lines() == ["alpha", "mu", "zeta"]


def test_sort_selection_keeps_text_outside_block() -> None:
    buffer = Buffer.from_text("x zeta \ny alpha\nz mu   ")
    buffer.select_block((0, 2), (2, 7))

    sort_selection(buffer)

    assert buffer.lines() == ["x alpha", "y mu", "z zeta"]


def test_sort_selection_does_not_reindent() -> None:
    buffer = Buffer.from_text("  b\n    a")
    buffer.select_lines(0, 1)

    sort_selection(buffer)

    assert buffer.lines() == ["a", "b"]


def test_sort_selection_blank_span_joins_next_line() -> None:
    buffer = Buffer.from_text("k zed\nk    \nk abc")
    buffer.select_block((0, 2), (2, 5))

    sort_selection(buffer)

    assert buffer.lines() == ["k abc", "k k zed"]


def test_sort_selection_twice_is_a_noop() -> None:
    buffer = lines_selected("mu\nalpha")

    sort_selection(buffer)
    buffer.select_lines(0, 1)
    sort_selection(buffer)

    assert buffer.lines() == ["alpha", "mu"]
    assert buffer.undo.labels() == ["SortSelection"]


def test_sort_selection_blank_span_on_last_line_keeps_line_prefix() -> None:
    buffer = Buffer.from_text("k zed\nk abc\nk    ")
    buffer.select_block((0, 2), (2, 5))

    assert sort_selection(buffer) is True

    assert buffer.lines() == ["k abc", "k zed", "k "]


def test_sort_lines_drops_whitespace_only_last_line() -> None:
    buffer = lines_selected("b\na\n   ")

    assert sort_lines(buffer) is True

    assert buffer.lines() == ["a", "b"]
    assert buffer.text == "a\nb"
