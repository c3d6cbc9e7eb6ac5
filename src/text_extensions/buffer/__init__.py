"""In-memory editor host: document, selection, registers, and undo."""

from .buffer import Buffer, Transaction
from .document import BufferDocument
from .registers import CLIPBOARD_REGISTER, RegisterBank, RegisterValue
from .state import BufferState, Cursor
from .undo import UndoEntry, UndoTimeline
from .validation import BufferValidationError, ensure_cursor, ensure_offset

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "CLIPBOARD_REGISTER",
    "Cursor",
    "RegisterBank",
    "RegisterValue",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "ensure_cursor",
    "ensure_offset",
]
