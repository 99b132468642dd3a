"""High-level buffer façade combining document, cursor state, and history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, Literal, Optional, Tuple

from line_engine.runtime import telemetry

from .document import BufferDocument, Snapshot
from .state import BufferState, Cursor
from .sync import BufferMirror
from .undo import UndoEntry, UndoHistory
from .validation import clamp_cursor, ensure_cursor

EditStatus = Literal["ok", "boundary", "empty_history", "nothing_to_delete"]

DEFAULT_CURSOR_MARKER = "|"


@dataclass(slots=True)
class BufferView:
    version: int
    lines: Tuple[str, ...]
    cursor: Cursor


@dataclass(slots=True)
class EditResult:
    label: str
    status: EditStatus
    view: BufferView

    @property
    def nothing_to_delete(self) -> bool:
        return self.status == "nothing_to_delete"


class Buffer:
    """Line buffer with a clamped cursor and snapshot undo/redo.

    Every public operation returns an :class:`EditResult` whose ``view`` holds
    the rendered lines. Mutating operations run inside a :class:`Transaction`
    which records the pre-edit snapshot and drops the redo chain.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        history: Optional[UndoHistory] = None,
        cursor_marker: str = DEFAULT_CURSOR_MARKER,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.history = history or UndoHistory()
        self.cursor_marker = cursor_marker
        ensure_cursor(self.document, self.state.cursor)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        cursor: Cursor = (0, 0),
        name: str = "default",
        cursor_marker: str = DEFAULT_CURSOR_MARKER,
    ) -> "Buffer":
        return cls(
            name=name,
            document=BufferDocument.from_lines(lines),
            state=BufferState(cursor=cursor),
            cursor_marker=cursor_marker,
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        cursor_marker: str = DEFAULT_CURSOR_MARKER,
    ) -> "Buffer":
        return cls(
            name=name,
            document=BufferDocument.from_text(text),
            cursor_marker=cursor_marker,
        )

    @property
    def lines(self) -> Snapshot:
        return self.document.snapshot()

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    def snapshot(self) -> Snapshot:
        return self.document.snapshot()

    def render(self) -> Tuple[str, ...]:
        row, col = self.state.cursor
        rendered = list(self.document.snapshot())
        line = rendered[row]
        rendered[row] = line[:col] + self.cursor_marker + line[col:]
        return tuple(rendered)

    def view(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            lines=self.render(),
            cursor=self.state.cursor,
        )

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            lines=self.document.snapshot(),
            rendered=self.render(),
            cursor=self.state.cursor,
            attributes=dict(attributes or {}),
        )

    # navigation -----------------------------------------------------------

    def move_left(self) -> EditResult:
        row, col = self.state.cursor
        if col > 0:
            return self._move("move_left", row, col - 1)
        if row > 0:
            return self._move("move_left", row - 1, self.document.line_length(row - 1))
        return self._result("move_left", "boundary")

    def move_right(self) -> EditResult:
        row, col = self.state.cursor
        if col < self.document.line_length(row):
            return self._move("move_right", row, col + 1)
        if row < self.document.last_row:
            return self._move("move_right", row + 1, 0)
        return self._result("move_right", "boundary")

    def move_up(self) -> EditResult:
        row, col = self.state.cursor
        if row == 0:
            return self._result("move_up", "boundary")
        target_col = min(col, self.document.line_length(row - 1))
        return self._move("move_up", row - 1, target_col)

    def move_down(self) -> EditResult:
        row, col = self.state.cursor
        if row >= self.document.last_row:
            return self._result("move_down", "boundary")
        target_col = min(col, self.document.line_length(row + 1))
        return self._move("move_down", row + 1, target_col)

    # editing --------------------------------------------------------------

    def insert_text(self, text: str) -> EditResult:
        with Transaction(self, "insert_text"):
            row, col = self.state.cursor
            line = self.document.get_line(row)
            self.document = self.document.set_line(row, line[:col] + text + line[col:])
            self.state.set_cursor(row, col + len(text))
        return self._result("insert_text")

    def insert_lines(self, texts: Iterable[str]) -> EditResult:
        inserted = list(texts)
        with Transaction(self, "insert_lines") as tx:
            tx.note(count=len(inserted))
            row, col = self.state.cursor
            self.document = self.document.split_line(row, col, inserted)
            self.state.set_cursor(row + len(inserted) + 1, 0)
        return self._result("insert_lines")

    def delete_char_at_cursor(self) -> EditResult:
        row, col = self.state.cursor
        line = self.document.get_line(row)
        if col >= len(line):
            telemetry.record_event(
                "buffer.nothing_to_delete",
                level="debug",
                data={"buffer": self.name, "cursor": self.state.cursor},
            )
            return self._result("delete_char", "nothing_to_delete")
        with Transaction(self, "delete_char"):
            self.document = self.document.set_line(row, line[:col] + line[col + 1 :])
        return self._result("delete_char")

    def new_line(self) -> EditResult:
        with Transaction(self, "new_line"):
            row, col = self.state.cursor
            self.document = self.document.split_line(row, col)
            self.state.set_cursor(row + 1, 0)
        return self._result("new_line")

    # history --------------------------------------------------------------

    def undo(self) -> EditResult:
        entry = self.history.undo(self.document.snapshot())
        return self._restore("undo", entry)

    def redo(self) -> EditResult:
        entry = self.history.redo(self.document.snapshot())
        return self._restore("redo", entry)

    def _restore(self, label: str, entry: Optional[UndoEntry]) -> EditResult:
        if entry is None:
            return self._result(label, "empty_history")
        self.document = self.document.replace(entry.snapshot)
        self.state.set_cursor(*clamp_cursor(self.document, *self.state.cursor))
        self.state.last_change_tick = self.document.version
        telemetry.record_event(
            f"history.{label}",
            level="debug",
            data={
                "buffer": self.name,
                "operation": entry.label,
                "undo_depth": self.history.undo_depth,
                "redo_depth": self.history.redo_depth,
            },
        )
        return self._result(label)

    def _move(self, label: str, row: int, col: int) -> EditResult:
        self.state.set_cursor(row, col)
        return self._result(label)

    def _result(self, label: str, status: EditStatus = "ok") -> EditResult:
        return EditResult(label=label, status=status, view=self.view())


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one mutating operation.

    The pre-edit snapshot is taken on entry but only pushed onto the undo
    history once the block finishes without raising. A failed edit puts the
    document and cursor back and leaves the history untouched.
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._before: Optional[BufferDocument] = None
        self._cursor: Cursor = buffer.state.cursor
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._handle = self._span_cm.__enter__()
        self._before = self.buffer.document
        self._cursor = self.buffer.state.cursor
        return self

    def note(self, **fields: object) -> None:
        if self._handle is not None:
            for key, value in fields.items():
                self._handle.add_metadata(key, value)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None and self._before is not None:
            self.buffer.history.record(self.label, self._before.snapshot())
            self.buffer.state.last_change_tick = self.buffer.document.version
        elif self._before is not None:
            self.buffer.document = self._before
            self.buffer.state.set_cursor(*self._cursor)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
