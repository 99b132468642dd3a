"""Built-in command tokens for the line editor shell."""

from __future__ import annotations

from typing import Iterable, Sequence

from line_engine.actions import core as core_actions
from line_engine.actions import editing as editing_actions

from .models import ActionRef, CommandBinding
from .registry import CommandRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.insert_text",
        handler=editing_actions.insert_text,
        description="Insert text at the cursor",
    ),
    ActionRef(
        id="edit.insert_lines",
        handler=editing_actions.insert_lines,
        description="Insert several lines at the cursor",
    ),
    ActionRef(
        id="edit.delete_char",
        handler=editing_actions.delete_char,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="edit.new_line",
        handler=editing_actions.new_line,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="cursor.move_left",
        handler=core_actions.move_left,
        description="Move the cursor left",
    ),
    ActionRef(
        id="cursor.move_right",
        handler=core_actions.move_right,
        description="Move the cursor right",
    ),
    ActionRef(
        id="cursor.move_up",
        handler=core_actions.move_up,
        description="Move the cursor up",
    ),
    ActionRef(
        id="cursor.move_down",
        handler=core_actions.move_down,
        description="Move the cursor down",
    ),
    ActionRef(
        id="history.undo",
        handler=core_actions.undo,
        description="Undo the last edit",
    ),
    ActionRef(
        id="history.redo",
        handler=core_actions.redo,
        description="Redo the last undone edit",
    ),
    ActionRef(
        id="shell.quit",
        handler=core_actions.quit_shell,
        description="Leave the shell",
    ),
)

DEFAULT_BINDINGS: tuple[CommandBinding, ...] = (
    CommandBinding(
        id="insert", token="I", action_id="edit.insert_text", description="Insert"
    ),
    CommandBinding(
        id="multiline_insert",
        token="M",
        action_id="edit.insert_lines",
        description="Multiline Insert",
    ),
    CommandBinding(
        id="delete", token="D", action_id="edit.delete_char", description="Delete"
    ),
    CommandBinding(
        id="left", token="L", action_id="cursor.move_left", description="Left"
    ),
    CommandBinding(
        id="right", token="R", action_id="cursor.move_right", description="Right"
    ),
    CommandBinding(id="undo", token="U", action_id="history.undo", description="Undo"),
    CommandBinding(id="redo", token="Y", action_id="history.redo", description="Redo"),
    CommandBinding(
        id="new_line", token="N", action_id="edit.new_line", description="New Line"
    ),
    CommandBinding(id="up", token="W", action_id="cursor.move_up", description="Up"),
    CommandBinding(
        id="down", token="S", action_id="cursor.move_down", description="Down"
    ),
    CommandBinding(id="quit", token="Q", action_id="shell.quit", description="Quit"),
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[CommandBinding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and their command tokens."""

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["load_default_commands", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
