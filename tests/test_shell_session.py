from __future__ import annotations

import io
from typing import Any, List, Optional

from line_engine.buffer import Buffer
from line_engine.config import ShellSettings
from line_engine.shell import ShellBus, StreamIO
from line_engine.shell.session import INVALID_COMMAND, ShellSession

HEADER = "------ Text Editor ------"
FOOTER = "---------------------------"


def make_session(
    script: str = "",
    *,
    buffer: Optional[Buffer] = None,
    settings: Optional[ShellSettings] = None,
    bus: Optional[ShellBus] = None,
) -> tuple[ShellSession, io.StringIO]:
    output = io.StringIO()
    session = ShellSession(
        buffer,
        io=StreamIO(io.StringIO(script), output),
        settings=settings,
        bus=bus,
    )
    return session, output


def frame(*lines: str) -> str:
    return "\n".join([HEADER, *lines, FOOTER]) + "\n"


def test_insert_command_prompts_and_renders() -> None:
    session, output = make_session("hello\n")

    result = session.handle_command("I")

    assert result.status == "ok"
    assert session.buffer.lines == ("hello",)
    assert output.getvalue() == "Enter text to insert: " + frame("hello|")


def test_navigation_command_renders_view() -> None:
    session, output = make_session(buffer=Buffer.from_lines(["ab"], cursor=(0, 1)))

    session.handle_command("L")

    assert output.getvalue() == frame("|ab")


def test_multiline_insert_collects_until_empty_line() -> None:
    buffer = Buffer.from_lines(["abcdef"], cursor=(0, 3))
    session, output = make_session("X\nY\n\n", buffer=buffer)

    session.handle_command("M")

    assert buffer.lines == ("abc", "X", "Y", "def")
    assert buffer.cursor == (3, 0)
    assert output.getvalue().endswith(frame("abc", "X", "Y", "|def"))


def test_multiline_insert_with_immediate_empty_line_splits() -> None:
    buffer = Buffer.from_lines(["abcdef"], cursor=(0, 3))
    session, _ = make_session("\n", buffer=buffer)

    session.handle_command("M")

    assert buffer.lines == ("abc", "def")


def test_multiline_insert_aborted_by_end_of_input() -> None:
    buffer = Buffer.from_lines(["abc"])
    session, _ = make_session("X\n", buffer=buffer)
    cancelled: List[object] = []
    session.context.bus.subscribe("command.cancelled", cancelled.append)

    result = session.handle_command("M")

    assert result.status == "cancelled"
    assert buffer.lines == ("abc",)
    assert not buffer.history.can_undo()
    assert cancelled == [{"action": "edit.insert_lines", "reason": "eof"}]


def test_delete_requires_confirmation() -> None:
    buffer = Buffer.from_lines(["abc"])
    session, output = make_session("n\n", buffer=buffer)

    result = session.handle_command("D")

    assert result.status == "cancelled"
    assert buffer.lines == ("abc",)
    assert HEADER not in output.getvalue()


def test_confirmed_delete_removes_character() -> None:
    buffer = Buffer.from_lines(["abc"])
    session, output = make_session("D\n", buffer=buffer)

    session.handle_command("D")

    assert buffer.lines == ("bc",)
    assert output.getvalue().endswith(frame("|bc"))


def test_delete_at_end_of_line_reports_nothing_to_delete() -> None:
    buffer = Buffer.from_lines(["ab"], cursor=(0, 2))
    session, output = make_session("D\n", buffer=buffer)
    events: List[object] = []
    session.context.bus.subscribe("editor.nothing_to_delete", events.append)

    result = session.handle_command("D")

    assert result.status == "nothing_to_delete"
    assert output.getvalue().endswith("Nothing to delete at this position!\n")
    assert HEADER not in output.getvalue()
    assert not buffer.history.can_undo()
    assert len(events) == 1


def test_invalid_command_leaves_buffer_untouched() -> None:
    session, output = make_session(buffer=Buffer.from_lines(["abc"]))
    invalid: List[object] = []
    session.context.bus.subscribe("command.invalid", invalid.append)

    result = session.handle_command("Z")

    assert result.consumed is False
    assert result.status == "invalid_command"
    assert output.getvalue() == INVALID_COMMAND + "\n"
    assert session.buffer.lines == ("abc",)
    assert invalid == ["Z"]


def test_command_prompt_lists_bindings_in_order() -> None:
    session, _ = make_session()

    assert session.command_prompt == (
        "Enter command (I: Insert, M: Multiline Insert, D: Delete, L: Left, "
        "R: Right, U: Undo, Y: Redo, N: New Line, W: Up, S: Down, Q: Quit): "
    )


def test_run_executes_script_until_end_of_input() -> None:
    session, output = make_session("I\nhello\nN\nI\nworld\nU\nU\nY\n")

    executed = session.run()

    assert executed == 6
    assert session.buffer.lines == ("hello", "")
    assert output.getvalue().endswith(frame("|hello", "") + session.command_prompt)


def test_run_stops_at_quit() -> None:
    session, _ = make_session("I\nab\nQ\nI\nignored\n")
    quits: List[object] = []
    session.context.bus.subscribe("shell.quit", quits.append)

    executed = session.run()

    assert executed == 2
    assert session.buffer.lines == ("ab",)
    assert quits == [None]


def test_render_events_are_published_on_bus() -> None:
    bus = ShellBus()
    rendered: List[Any] = []
    bus.subscribe("editor.render", rendered.append)
    session, _ = make_session("x\n", bus=bus)

    session.handle_command("I")
    session.handle_command("U")

    assert [edit.label for edit in rendered] == ["insert_text", "undo"]


def test_settings_control_marker_and_frame() -> None:
    settings = ShellSettings(cursor_marker="_", header="[top]", footer="[end]")
    session, output = make_session("ab\n", settings=settings)

    session.handle_command("I")

    assert output.getvalue().endswith("[top]\nab_\n[end]\n")


def test_custom_confirm_token() -> None:
    settings = ShellSettings(delete_confirm_token="yes")
    buffer = Buffer.from_lines(["abc"])
    session, output = make_session("yes\n", buffer=buffer, settings=settings)

    session.handle_command("D")

    assert buffer.lines == ("bc",)
    assert output.getvalue().startswith("Press 'yes' to confirm deletion")


def test_settings_marker_applies_to_supplied_buffer() -> None:
    settings = ShellSettings(cursor_marker="^")
    buffer = Buffer.from_lines(["ab"], cursor=(0, 1))
    session, output = make_session(buffer=buffer, settings=settings)

    session.handle_command("L")

    assert buffer.render() == ("^ab",)
    assert output.getvalue() == frame("^ab")
