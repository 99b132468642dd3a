"""Interactive session that dispatches command tokens to buffer actions."""

from __future__ import annotations

from typing import Optional, Sequence

from line_engine.buffer import Buffer
from line_engine.commands import CommandRegistry, load_default_commands
from line_engine.config import ShellSettings
from line_engine.runtime import telemetry

from .base import ShellBus, ShellContext, ShellResult
from .io import ShellIO, StreamIO

INVALID_COMMAND = "Invalid command!"


class ShellSession:
    """Owns the shell context, resolves command tokens, and prints views.

    The session is the only place that writes rendered buffers to the IO;
    actions return a :class:`ShellResult` and never print the view
    themselves.
    """

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        io: Optional[ShellIO] = None,
        registry: Optional[CommandRegistry] = None,
        settings: Optional[ShellSettings] = None,
        bus: Optional[ShellBus] = None,
        load_defaults: bool = True,
    ) -> None:
        self.settings = settings or ShellSettings()
        if buffer is not None and settings is not None:
            buffer.cursor_marker = settings.cursor_marker
        self.context = ShellContext(
            buffer=buffer or Buffer(cursor_marker=self.settings.cursor_marker),
            io=io or StreamIO(),
            bus=bus or ShellBus(),
            settings=self.settings,
        )
        self.registry = registry or CommandRegistry(logger_name="line_engine.commands")
        if load_defaults and registry is None:
            load_default_commands(self.registry)

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def command_prompt(self) -> str:
        labels = ", ".join(
            f"{binding.token}: {binding.description or binding.id}"
            for binding in self.registry.iter_bindings()
        )
        return f"Enter command ({labels}): "

    def handle_command(self, token: str) -> ShellResult:
        match = self.registry.resolve(token)
        if match is None:
            result = self._invalid(token)
        else:
            with telemetry.span(
                name=f"shell::{match.action.telemetry_name}",
                component=True,
                metadata={"token": match.binding.token},
            ) as handle:
                outcome = match.action(self.context, match)
                if isinstance(outcome, ShellResult):
                    handle.add_metadata("status", outcome.status)
            if not isinstance(outcome, ShellResult):
                outcome = ShellResult(consumed=True)
            result = outcome
        self._present(result)
        return result

    def run(self) -> int:
        """Read and execute commands until quit or end of input.

        Returns the number of commands that were dispatched.
        """

        executed = 0
        while True:
            token = self.context.io.read_line(self.command_prompt)
            if token is None:
                break
            result = self.handle_command(token)
            executed += 1
            if result.quit:
                break
        telemetry.record_event(
            "shell.exit", data={"commands": executed, "buffer": self.buffer.name}
        )
        return executed

    def frame(self, lines: Sequence[str]) -> str:
        body = [self.settings.header, *lines, self.settings.footer]
        return "\n".join(body) + "\n"

    def _invalid(self, token: str) -> ShellResult:
        self.context.bus.emit("command.invalid", token)
        telemetry.record_event(
            "shell.invalid_command", level="debug", data={"token": token}
        )
        return ShellResult(
            consumed=False, status="invalid_command", message=INVALID_COMMAND
        )

    def _present(self, result: ShellResult) -> None:
        if result.should_render and result.edit is not None:
            self.context.io.write(self.frame(result.edit.view.lines))
        if result.message:
            self.context.io.write(f"{result.message}\n")


__all__ = ["ShellSession", "INVALID_COMMAND"]
