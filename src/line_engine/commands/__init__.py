"""Command registry and default shell bindings."""

from .models import ActionRef, CommandBinding
from .registry import (
    CommandConflictError,
    CommandRegistry,
    RegistryStats,
    ResolutionMatch,
)
from .defaults import load_default_commands

__all__ = [
    "ActionRef",
    "CommandBinding",
    "CommandConflictError",
    "CommandRegistry",
    "RegistryStats",
    "ResolutionMatch",
    "load_default_commands",
]
