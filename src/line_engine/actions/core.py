"""Cursor, history, and session actions that need no extra input."""

from __future__ import annotations

from typing import TYPE_CHECKING

from line_engine.buffer import EditResult
from line_engine.shell.base import ShellContext, ShellResult

if TYPE_CHECKING:
    from line_engine.commands.registry import ResolutionMatch


def rendered(context: ShellContext, edit: EditResult) -> ShellResult:
    context.bus.emit("editor.render", edit)
    return ShellResult(consumed=True, status=edit.status, edit=edit)


def move_left(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    del match
    return rendered(context, context.buffer.move_left())


def move_right(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    del match
    return rendered(context, context.buffer.move_right())


def move_up(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    del match
    return rendered(context, context.buffer.move_up())


def move_down(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    del match
    return rendered(context, context.buffer.move_down())


def undo(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    del match
    return rendered(context, context.buffer.undo())


def redo(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    del match
    return rendered(context, context.buffer.redo())


def quit_shell(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    del match
    context.bus.emit("shell.quit", None)
    return ShellResult(consumed=True, status="quit", quit=True)


__all__ = [
    "rendered",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "undo",
    "redo",
    "quit_shell",
]
