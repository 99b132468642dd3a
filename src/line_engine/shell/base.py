"""Base types shared by the command shell and its actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from line_engine.buffer import Buffer, EditResult
from line_engine.config import ShellSettings

from .io import ShellIO


@dataclass(slots=True)
class ShellResult:
    """Result returned from a command action."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    edit: Optional[EditResult] = None
    quit: bool = False

    @property
    def should_render(self) -> bool:
        return self.edit is not None and not self.edit.nothing_to_delete


@dataclass(slots=True)
class ShellContext:
    """Services every command action can access."""

    buffer: Buffer
    io: ShellIO
    bus: "ShellBus"
    settings: ShellSettings = field(default_factory=ShellSettings)


class ShellBus:
    """Minimal event bus letting hosts observe shell activity."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)
