"""Actions that collect free-form input before mutating the buffer."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from line_engine.shell.base import ShellContext, ShellResult

from .core import rendered

if TYPE_CHECKING:
    from line_engine.commands.registry import ResolutionMatch

INSERT_PROMPT = "Enter text to insert: "
MULTILINE_PROMPT = "Enter multiple lines (Enter empty line to finish): \n"
DELETE_PROMPT = "Press '{token}' to confirm deletion or other key to cancel: "
NOTHING_TO_DELETE = "Nothing to delete at this position!"


def _cancelled(
    context: ShellContext, match: ResolutionMatch, reason: str
) -> ShellResult:
    context.bus.emit("command.cancelled", {"action": match.action.id, "reason": reason})
    return ShellResult(consumed=True, status="cancelled")


def insert_text(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    text = context.io.read_line(INSERT_PROMPT)
    if text is None:
        return _cancelled(context, match, "eof")
    return rendered(context, context.buffer.insert_text(text))


def _collect_lines(context: ShellContext) -> Optional[List[str]]:
    """Read lines until an empty one; ``None`` if input ends first."""

    context.io.write(MULTILINE_PROMPT)
    collected: List[str] = []
    while True:
        line = context.io.read_line()
        if line is None:
            return None
        if not line:
            return collected
        collected.append(line)


def insert_lines(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    texts = _collect_lines(context)
    if texts is None:
        return _cancelled(context, match, "eof")
    return rendered(context, context.buffer.insert_lines(texts))


def delete_char(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    token = context.settings.delete_confirm_token
    answer = context.io.read_line(DELETE_PROMPT.format(token=token))
    if answer is None:
        return _cancelled(context, match, "eof")
    if answer != token:
        return _cancelled(context, match, "declined")

    edit = context.buffer.delete_char_at_cursor()
    if edit.nothing_to_delete:
        context.bus.emit("editor.nothing_to_delete", edit)
        return ShellResult(
            consumed=True,
            status=edit.status,
            message=NOTHING_TO_DELETE,
            edit=edit,
        )
    return rendered(context, edit)


def new_line(context: ShellContext, match: ResolutionMatch) -> ShellResult:
    del match
    return rendered(context, context.buffer.new_line())


__all__ = [
    "insert_text",
    "insert_lines",
    "delete_char",
    "new_line",
]
