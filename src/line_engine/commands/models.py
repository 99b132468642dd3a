"""Dataclasses describing shell command bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


def normalize_token(token: str) -> str:
    return token.strip()


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during command execution."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class CommandBinding:
    """Associates a command token typed at the shell with an action."""

    id: str
    token: str
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        token = normalize_token(self.token)
        if not token:
            raise ValueError("binding token cannot be empty")
        object.__setattr__(self, "token", token)


__all__ = ["ActionRef", "CommandBinding", "normalize_token"]
