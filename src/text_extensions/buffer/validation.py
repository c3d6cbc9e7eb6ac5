"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .state import Cursor


class BufferValidationError(RuntimeError):
    """Raised when callers hand the buffer out-of-bounds positions."""

    def __init__(
        self,
        message: str,
        *,
        cursor: Cursor | None = None,
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.cursor = cursor
        self.offset = offset


def ensure_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    line = document.get_line(row)
    if col < 0 or col > len(line):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def ensure_offset(document: BufferDocument, offset: int) -> int:
    if offset < 0 or offset > document.length:
        raise BufferValidationError("Offset out of range", offset=offset)
    return offset


def ensure_span(document: BufferDocument, start: int, end: int) -> tuple[int, int]:
    ensure_offset(document, start)
    ensure_offset(document, end)
    if end < start:
        raise BufferValidationError("Span end precedes start", offset=end)
    return start, end


__all__ = [
    "BufferValidationError",
    "ensure_cursor",
    "ensure_offset",
    "ensure_span",
]
