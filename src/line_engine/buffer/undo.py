"""Snapshot-based undo/redo history for buffer operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .document import Snapshot


@dataclass(frozen=True, slots=True)
class UndoEntry:
    label: str
    snapshot: Snapshot


class UndoHistory:
    """Linear undo/redo over whole-document snapshots.

    ``record`` is called before every mutating operation with the state the
    buffer had at that moment. Recording always invalidates the redo chain.
    Depth is unbounded unless ``limit`` is given, in which case the oldest
    undo entries are discarded first.
    """

    def __init__(self, *, limit: Optional[int] = None) -> None:
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive")
        self._limit = limit
        self._undo_stack: List[UndoEntry] = []
        self._redo_stack: List[UndoEntry] = []

    def record(self, label: str, snapshot: Snapshot) -> None:
        self._push_undo(UndoEntry(label=label, snapshot=snapshot))
        self._redo_stack.clear()

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def undo(self, current: Snapshot) -> Optional[UndoEntry]:
        """Pop the newest undo entry, parking ``current`` on the redo stack."""

        if not self._undo_stack:
            return None
        entry = self._undo_stack.pop()
        self._redo_stack.append(UndoEntry(label=entry.label, snapshot=current))
        return entry

    def redo(self, current: Snapshot) -> Optional[UndoEntry]:
        if not self._redo_stack:
            return None
        entry = self._redo_stack.pop()
        self._push_undo(UndoEntry(label=entry.label, snapshot=current))
        return entry

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()

    def _push_undo(self, entry: UndoEntry) -> None:
        self._undo_stack.append(entry)
        if self._limit is not None and len(self._undo_stack) > self._limit:
            del self._undo_stack[0]
