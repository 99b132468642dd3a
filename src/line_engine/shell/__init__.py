"""Command shell types: IO, context, results, and event bus."""

from .io import ShellIO, StreamIO
from .base import ShellBus, ShellContext, ShellResult

__all__ = [
    "ShellBus",
    "ShellContext",
    "ShellIO",
    "ShellResult",
    "StreamIO",
]
