from __future__ import annotations

import pytest

from text_extensions.lineset import ReplacementSource, split_lines


def test_split_lines_handles_every_line_break() -> None:
    assert split_lines("a\r\nb\rc\n\nd\n") == ("a", "b", "c", "d")


def test_split_lines_keeps_whitespace_only_lines() -> None:
    assert split_lines("  \n") == ("  ",)


@pytest.mark.parametrize("text", [None, "", "\n", "\r\n\r\n"])
def test_from_text_without_lines_is_none(text) -> None:
    assert ReplacementSource.from_text(text) is None


def test_source_cycles_when_shorter_than_selection() -> None:
    source = ReplacementSource.of(["x", "y"])

    assert list(source.cycle(5)) == ["x", "y", "x", "y", "x"]


def test_source_index_wraps() -> None:
    source = ReplacementSource.from_text("one\ntwo\nthree")

    assert source is not None
    assert len(source) == 3
    assert source[7] == "two"


def test_empty_source_is_rejected() -> None:
    with pytest.raises(ValueError):
        ReplacementSource(())


@pytest.mark.parametrize("line", ["x\r\ny", "x\ry", "x\ny", "\n"])
def test_lines_with_breaks_are_rejected(line) -> None:
    with pytest.raises(ValueError):
        ReplacementSource.of(["ok", line])
