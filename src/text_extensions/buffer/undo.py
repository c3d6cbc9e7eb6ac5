"""Undo/redo history for buffer transactions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(slots=True)
class UndoEntry:
    label: str
    before_text: str
    after_text: str
    caret_before: int
    caret_after: int


class UndoTimeline:
    """Linear undo/redo history; one entry per closed transaction."""

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []
        self._index: int = -1

    def push(self, entry: UndoEntry) -> None:
        if self._index < len(self._entries) - 1:
            self._entries = self._entries[: self._index + 1]
        self._entries.append(entry)
        self._index = len(self._entries) - 1

    def labels(self) -> List[str]:
        return [entry.label for entry in self._entries[: self._index + 1]]

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[UndoEntry]:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]


__all__ = ["UndoEntry", "UndoTimeline"]
