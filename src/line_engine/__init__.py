"""Line-oriented text buffer with cursor navigation and undo/redo."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "commands",
    "runtime",
    "shell",
]

__version__ = "0.1.0"
