"""Minimal Textual adapter that maps key events onto buffer operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from line_engine.buffer import Buffer, BufferMirror, EditResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


KEY_OPERATIONS: Dict[str, str] = {
    "left": "move_left",
    "right": "move_right",
    "up": "move_up",
    "down": "move_down",
    "enter": "new_line",
    "delete": "delete_char_at_cursor",
    "ctrl+z": "undo",
    "ctrl+y": "redo",
}


class TextualEditorAdapter:
    """Bridges Textual key and paste events to a :class:`Buffer`."""

    def __init__(self, buffer: Buffer, hooks: TextualUIHooks) -> None:
        self.buffer = buffer
        self.hooks = hooks
        self._refresh_buffer()

    def handle_textual_key(
        self, key: str, *, text: Optional[str] = None
    ) -> Optional[EditResult]:
        """Apply the operation bound to ``key``; ``None`` if nothing matched."""

        self._log_state("key ->", key=key, text=text)
        operation = KEY_OPERATIONS.get(key)
        if operation is not None:
            edit = getattr(self.buffer, operation)()
        elif text and len(text) == 1 and text.isprintable():
            edit = self.buffer.insert_text(text)
        else:
            return None
        self._after_edit(edit)
        return edit

    def handle_paste(self, text: str) -> Optional[EditResult]:
        """Insert pasted text; pastes with line breaks become one ``insert_lines``.

        A single trailing newline terminates the last pasted line, so
        ``"a\\n"`` inserts the line ``a`` and a lone ``"\\n"`` splits the
        current line like ``new_line``.
        """

        text = text.replace("\r\n", "\n")
        if not text:
            return None
        if "\n" not in text:
            edit = self.buffer.insert_text(text)
        else:
            body = text[:-1] if text.endswith("\n") else text
            edit = self.buffer.insert_lines(body.split("\n") if body else [])
        self._after_edit(edit)
        return edit

    def _after_edit(self, edit: EditResult) -> None:
        if edit.nothing_to_delete:
            self.hooks.update_status("Nothing to delete at this position!")
        else:
            self.hooks.update_status(f"{edit.label}:{edit.status}")
        self._refresh_buffer()
        self._log_state("result <-", label=edit.label, status=edit.status)

    def pull_buffer(self) -> BufferMirror:
        history = self.buffer.history
        return self.buffer.mirror(
            attributes={
                "undo": str(history.undo_depth),
                "redo": str(history.redo_depth),
            }
        )

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.pull_buffer())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "cursor": self.buffer.cursor,
            "lines": self.buffer.document.line_count,
            "version": self.buffer.document.version,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "KEY_OPERATIONS"]
