"""Immutable offset spans and the edits that move them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Edit:
    """Replacement of ``[start, end)`` with ``text``."""

    start: int
    end: int
    text: str = ""

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid edit span ({self.start}, {self.end})")

    @property
    def delta(self) -> int:
        return len(self.text) - (self.end - self.start)

    def map_offset(self, offset: int) -> int:
        """Return where ``offset`` lands once the edit is applied.

        Offsets before the edit are untouched, offsets at or past its end
        move by :attr:`delta`, offsets inside the replaced span collapse to
        its start.
        """

        if offset < self.start:
            return offset
        if offset >= self.end:
            return offset + self.delta
        return self.start


@dataclass(frozen=True, slots=True, order=True)
class TextRegion:
    """One addressable span of host text, as absolute character offsets."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid region ({self.start}, {self.end})")

    @classmethod
    def caret(cls, offset: int) -> "TextRegion":
        return cls(offset, offset)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def width(self) -> int:
        return self.end - self.start

    def with_bounds(self, *, start: int | None = None, end: int | None = None) -> "TextRegion":
        return TextRegion(
            self.start if start is None else start,
            self.end if end is None else end,
        )

    def remap(self, edit: Edit) -> "TextRegion":
        start = edit.map_offset(self.start)
        end = max(start, edit.map_offset(self.end))
        return TextRegion(start, end)


def remap_all(regions: Iterable[TextRegion], edit: Edit) -> list[TextRegion]:
    return [region.remap(edit) for region in regions]


__all__ = ["Edit", "TextRegion", "remap_all"]
