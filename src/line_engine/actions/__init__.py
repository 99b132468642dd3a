"""Shell command handlers wired to buffer operations."""

from .core import move_down, move_left, move_right, move_up, quit_shell, redo, undo
from .editing import delete_char, insert_lines, insert_text, new_line

__all__ = [
    "insert_text",
    "insert_lines",
    "delete_char",
    "new_line",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "undo",
    "redo",
    "quit_shell",
]
