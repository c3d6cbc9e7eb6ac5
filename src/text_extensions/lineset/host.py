"""Protocol describing the editor capabilities line-set operations rely on."""

from __future__ import annotations

from typing import ContextManager, Optional, Protocol, Sequence, Tuple

from .regions import TextRegion


class TextHost(Protocol):
    """What an editor adapter exposes to :mod:`text_extensions.lineset`.

    Offsets are absolute character positions in the host document. Line
    bounds exclude the line break.
    """

    @property
    def read_only(self) -> bool:
        ...

    def selection_regions(self) -> Sequence[TextRegion]:
        """Return the current selection, one region per line, in selection order."""
        ...

    def clipboard_text(self) -> Optional[str]:
        ...

    def get_text(self, start: int, end: int) -> str:
        ...

    def line_bounds(self, offset: int) -> Tuple[int, int]:
        """Return ``(line_start, line_end)`` of the line containing ``offset``."""
        ...

    def next_line_start(self, offset: int) -> Optional[int]:
        """Return the first offset of the following line, ``None`` on the last line."""
        ...

    def insert_text(self, offset: int, text: str) -> None:
        ...

    def replace_text(self, start: int, end: int, text: str) -> None:
        ...

    def delete_text(self, start: int, end: int) -> None:
        ...

    def undo_scope(self, label: str) -> ContextManager[object]:
        """Group every edit made inside the block into one undo step."""
        ...


__all__ = ["TextHost"]
