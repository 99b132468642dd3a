"""Executable Textual app that hosts a line buffer."""

from __future__ import annotations

from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from line_engine.buffer import Buffer, BufferMirror
from line_engine.config import ShellSettings
from line_engine.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks


class EditorApp(App[None]):
    """Minimal Textual UI around a single :class:`Buffer`."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        buffer: Optional[Buffer] = None,
        settings: Optional[ShellSettings] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or ShellSettings()
        if buffer is not None and settings is not None:
            buffer.cursor_marker = settings.cursor_marker
        self.buffer = buffer or Buffer(cursor_marker=self.settings.cursor_marker)
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("line_engine.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.buffer, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if self.adapter.handle_textual_key(event.key, text=event.character):
            event.stop()

    def on_paste(self, event: events.Paste) -> None:
        if self.adapter and self.adapter.handle_paste(event.text):
            event.stop()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(mirror.text)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


__all__ = ["EditorApp"]
