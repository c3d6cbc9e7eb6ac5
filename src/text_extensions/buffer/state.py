"""Caret and selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from text_extensions.lineset.regions import Edit, TextRegion

Cursor = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class BufferState:
    """Mutable caret and selection info for one buffer.

    ``caret`` is an absolute offset; ``regions`` is the selection in
    selection order, empty when only the caret is set.
    """

    caret: int = 0
    regions: Tuple[TextRegion, ...] = ()
    read_only: bool = False

    def set_caret(self, offset: int) -> None:
        self.caret = offset

    def clear_selection(self) -> None:
        self.regions = ()

    def set_selection(self, regions: Iterable[TextRegion]) -> None:
        self.regions = tuple(regions)

    def track(self, edit: Edit) -> None:
        """Keep caret and selection attached to their text across ``edit``."""

        self.caret = edit.map_offset(self.caret)
        self.regions = tuple(region.remap(edit) for region in self.regions)


__all__ = ["BufferState", "Cursor"]
