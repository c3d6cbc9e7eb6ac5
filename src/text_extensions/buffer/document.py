"""Core document storage for in-memory buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from text_extensions.lineset.source import LINE_BREAK

from .state import Cursor


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text storage addressed by absolute offsets.

    Line breaks are normalised to ``\\n`` on load, so every break counts as
    exactly one character when converting between offsets and cursors.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_lines=LINE_BREAK.split(text), version=version, dirty=False)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def length(self) -> int:
        return sum(len(line) for line in self._lines) + len(self._lines) - 1

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def offset_of(self, cursor: Cursor) -> int:
        row, col = cursor
        return sum(len(self._lines[i]) + 1 for i in range(row)) + col

    def cursor_at(self, offset: int) -> Cursor:
        running = 0
        for row, line in enumerate(self._lines):
            if offset <= running + len(line):
                return (row, offset - running)
            running += len(line) + 1
        last = len(self._lines) - 1
        return (last, len(self._lines[last]))

    def line_bounds(self, offset: int) -> Tuple[int, int]:
        row, col = self.cursor_at(offset)
        start = offset - col
        return start, start + len(self._lines[row])

    def next_line_start(self, offset: int) -> Optional[int]:
        row, _ = self.cursor_at(offset)
        if row + 1 >= len(self._lines):
            return None
        return self.offset_of((row + 1, 0))

    def splice(self, start: int, end: int, text: str) -> "BufferDocument":
        """Return a document with ``[start, end)`` replaced by ``text``."""

        current = self.text
        updated = BufferDocument.from_text(
            current[:start] + text + current[end:], version=self.version + 1
        )
        updated.dirty = True
        return updated


__all__ = ["BufferDocument"]
