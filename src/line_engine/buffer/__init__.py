"""Buffer abstractions and undo/redo data structures."""

from .buffer import Buffer, BufferView, EditResult, EditStatus, Transaction
from .document import BufferDocument, Snapshot
from .state import BufferState, Cursor
from .sync import BufferMirror, BufferSync, BufferValidationError
from .undo import UndoEntry, UndoHistory
from .validation import clamp_cursor, ensure_cursor

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferMirror",
    "BufferState",
    "BufferSync",
    "BufferValidationError",
    "BufferView",
    "Cursor",
    "EditResult",
    "EditStatus",
    "Snapshot",
    "Transaction",
    "UndoEntry",
    "UndoHistory",
    "clamp_cursor",
    "ensure_cursor",
]
