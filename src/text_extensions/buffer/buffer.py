"""In-memory editor host combining document, state, registers, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Iterable, List, Optional, Tuple

from text_extensions.lineset.regions import Edit, TextRegion
from text_extensions.runtime import telemetry

from .document import BufferDocument
from .registers import RegisterBank
from .state import BufferState, Cursor
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_cursor, ensure_offset, ensure_span


class Buffer:
    """Satisfies :class:`text_extensions.lineset.TextHost` without a real editor."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        registers: Optional[RegisterBank] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document if document is not None else BufferDocument()
        self.state = state if state is not None else BufferState()
        self.registers = registers if registers is not None else RegisterBank()
        self.undo = undo if undo is not None else UndoTimeline()
        self._transaction: Optional[Transaction] = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        read_only: bool = False,
        clipboard: Optional[str] = None,
    ) -> "Buffer":
        buffer = cls(
            name=name,
            document=BufferDocument.from_text(text),
            state=BufferState(read_only=read_only),
        )
        if clipboard is not None:
            buffer.set_clipboard(clipboard)
        return buffer

    # -- content -----------------------------------------------------------

    @property
    def text(self) -> str:
        return self.document.text

    def lines(self) -> List[str]:
        return list(self.document.snapshot())

    def offset_of(self, cursor: Cursor) -> int:
        return self.document.offset_of(ensure_cursor(self.document, cursor))

    def cursor_at(self, offset: int) -> Cursor:
        return self.document.cursor_at(ensure_offset(self.document, offset))

    # -- TextHost ----------------------------------------------------------

    @property
    def read_only(self) -> bool:
        return self.state.read_only

    @read_only.setter
    def read_only(self, value: bool) -> None:
        self.state.read_only = bool(value)

    def selection_regions(self) -> Tuple[TextRegion, ...]:
        if self.state.regions:
            return self.state.regions
        return (TextRegion.caret(self.state.caret),)

    def clipboard_text(self) -> Optional[str]:
        return self.registers.clipboard_get()

    def set_clipboard(self, text: str) -> None:
        self.registers.clipboard_set(text)

    def get_text(self, start: int, end: int) -> str:
        start, end = ensure_span(self.document, start, end)
        return self.document.text[start:end]

    def line_bounds(self, offset: int) -> Tuple[int, int]:
        return self.document.line_bounds(ensure_offset(self.document, offset))

    def next_line_start(self, offset: int) -> Optional[int]:
        return self.document.next_line_start(ensure_offset(self.document, offset))

    def insert_text(self, offset: int, text: str) -> None:
        self._apply(offset, offset, text, label="insert_text")

    def replace_text(self, start: int, end: int, text: str) -> None:
        self._apply(start, end, text, label="replace_text")

    def delete_text(self, start: int, end: int) -> None:
        self._apply(start, end, "", label="delete_text")

    def undo_scope(self, label: str) -> ContextManager["Transaction"]:
        return Transaction(self, label)

    # -- selection ---------------------------------------------------------

    def set_caret(self, cursor: Cursor) -> None:
        """Drop the selection; commands then act on the caret line only."""

        self.state.set_caret(self.offset_of(cursor))
        self.state.clear_selection()

    def select(self, start: Cursor, end: Cursor) -> Tuple[TextRegion, ...]:
        """Stream selection from ``start`` to ``end``: one region per line."""

        ensure_cursor(self.document, start)
        ensure_cursor(self.document, end)
        first, last = sorted((start, end))
        if first == last:
            self.set_caret(last)
            return self.selection_regions()
        regions = []
        for row in range(first[0], last[0] + 1):
            line = self.document.get_line(row)
            begin = first[1] if row == first[0] else 0
            stop = last[1] if row == last[0] else len(line)
            regions.append(self._row_region(row, begin, stop))
        return self._set_regions(regions, caret=self.document.offset_of(end))

    def select_block(
        self, anchor: Cursor, active: Cursor
    ) -> Tuple[TextRegion, ...]:
        """Rectangular selection; columns are clamped to each line's length."""

        ensure_cursor(self.document, anchor)
        ensure_cursor(self.document, active)
        top, bottom = sorted((anchor[0], active[0]))
        left, right = sorted((anchor[1], active[1]))
        regions = []
        for row in range(top, bottom + 1):
            width = len(self.document.get_line(row))
            regions.append(
                self._row_region(row, min(left, width), min(right, width))
            )
        return self._set_regions(regions, caret=regions[-1].end)

    def select_lines(self, first_row: int, last_row: int) -> Tuple[TextRegion, ...]:
        first_row, last_row = sorted((first_row, last_row))
        regions = []
        for row in range(first_row, last_row + 1):
            ensure_cursor(self.document, (row, 0))
            width = len(self.document.get_line(row))
            regions.append(self._row_region(row, 0, width))
        return self._set_regions(regions, caret=regions[-1].end)

    def select_regions(
        self, regions: Iterable[TextRegion]
    ) -> Tuple[TextRegion, ...]:
        checked = []
        for region in regions:
            ensure_span(self.document, region.start, region.end)
            checked.append(region)
        if not checked:
            self.state.clear_selection()
            return self.selection_regions()
        return self._set_regions(checked, caret=checked[-1].end)

    def _row_region(self, row: int, begin: int, stop: int) -> TextRegion:
        offset = self.document.offset_of((row, 0))
        return TextRegion(offset + begin, offset + stop)

    def _set_regions(
        self, regions: List[TextRegion], *, caret: int
    ) -> Tuple[TextRegion, ...]:
        self.state.set_selection(regions)
        self.state.set_caret(caret)
        return self.state.regions

    # -- history -----------------------------------------------------------

    def undo_last(self) -> bool:
        entry = self.undo.undo()
        if entry is None:
            return False
        self._restore(entry.before_text, entry.caret_before)
        return True

    def redo_last(self) -> bool:
        entry = self.undo.redo()
        if entry is None:
            return False
        self._restore(entry.after_text, entry.caret_after)
        return True

    def _restore(self, text: str, caret: int) -> None:
        self.document = BufferDocument.from_text(
            text, version=self.document.version + 1
        )
        self.state.clear_selection()
        self.state.set_caret(min(caret, self.document.length))

    # -- mutation ----------------------------------------------------------

    def _apply(self, start: int, end: int, text: str, *, label: str) -> None:
        if self.state.read_only:
            raise PermissionError(f"Buffer '{self.name}' is read-only")
        start, end = ensure_span(self.document, start, end)
        if self._transaction is None:
            with Transaction(self, label):
                self._splice(start, end, text)
        else:
            self._splice(start, end, text)

    def _splice(self, start: int, end: int, text: str) -> None:
        self.document = self.document.splice(start, end, text)
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        self.state.track(Edit(start, end, normalized))


class Transaction(AbstractContextManager["Transaction"]):
    """Undo scope: every edit made while open becomes one undo entry.

    The entry is recorded when the scope closes, even if the block raised,
    so a failed command stays undoable. A scope opened while another is
    active joins the outer one.
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._joined = False
        self._before_text = ""
        self._before_caret = 0

    def __enter__(self) -> "Transaction":
        if self.buffer._transaction is not None:
            self._joined = True
            return self
        self.buffer._transaction = self
        self._before_text = self.buffer.text
        self._before_caret = self.buffer.state.caret
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self) -> Optional[UndoEntry]:
        after_text = self.buffer.text
        if after_text == self._before_text:
            return None
        entry = UndoEntry(
            label=self.label,
            before_text=self._before_text,
            after_text=after_text,
            caret_before=self._before_caret,
            caret_after=self.buffer.state.caret,
        )
        self.buffer.undo.push(entry)
        return entry

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._joined:
            return False
        self.buffer._transaction = None
        try:
            self.commit()
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "Transaction"]
