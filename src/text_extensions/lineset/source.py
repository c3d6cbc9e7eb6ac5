"""Replacement lines pasted into a line set."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: Optional[str]) -> tuple[str, ...]:
    """Split ``text`` on any line break, dropping empty entries."""

    if not text:
        return ()
    return tuple(part for part in LINE_BREAK.split(text) if part)


@dataclass(frozen=True, slots=True)
class ReplacementSource:
    """Ordered literal lines handed out cyclically, one per region."""

    lines: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.lines:
            raise ValueError("ReplacementSource requires at least one line")
        object.__setattr__(self, "lines", tuple(self.lines))
        if any(LINE_BREAK.search(line) for line in self.lines):
            raise ValueError("ReplacementSource lines must not contain line breaks")

    @classmethod
    def from_text(cls, text: Optional[str]) -> Optional["ReplacementSource"]:
        """Parse clipboard text; ``None`` when no usable line remains."""

        lines = split_lines(text)
        if not lines:
            return None
        return cls(lines)

    @classmethod
    def of(cls, lines: Iterable[str]) -> "ReplacementSource":
        return cls(tuple(lines))

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index % len(self.lines)]

    def cycle(self, count: int) -> Iterator[str]:
        for index in range(count):
            yield self[index]


__all__ = ["LINE_BREAK", "ReplacementSource", "split_lines"]
