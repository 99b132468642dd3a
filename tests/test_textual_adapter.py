from __future__ import annotations

from typing import List

from line_engine.adapters.textual import TextualEditorAdapter, TextualUIHooks
from line_engine.buffer import Buffer, BufferMirror


def make_adapter(
    buffer: Buffer | None = None,
) -> tuple[TextualEditorAdapter, List[BufferMirror], List[str]]:
    mirrors: List[BufferMirror] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=mirrors.append,
        update_status=statuses.append,
    )
    adapter = TextualEditorAdapter(buffer or Buffer(), hooks)
    return adapter, mirrors, statuses


def test_adapter_pushes_initial_mirror() -> None:
    _, mirrors, _ = make_adapter(Buffer.from_lines(["abc"]))

    assert mirrors[-1].text == "|abc"
    assert mirrors[-1].attributes == {"undo": "0", "redo": "0"}


def test_printable_keys_insert_text() -> None:
    adapter, mirrors, statuses = make_adapter()

    adapter.handle_textual_key("h", text="h")
    adapter.handle_textual_key("i", text="i")

    assert adapter.buffer.lines == ("hi",)
    assert mirrors[-1].text == "hi|"
    assert mirrors[-1].attributes["undo"] == "2"
    assert statuses[-1] == "insert_text:ok"


def test_named_keys_map_to_buffer_operations() -> None:
    adapter, mirrors, _ = make_adapter(Buffer.from_lines(["abc"], cursor=(0, 1)))

    adapter.handle_textual_key("enter")
    adapter.handle_textual_key("up")
    adapter.handle_textual_key("ctrl+z")

    assert adapter.buffer.lines == ("abc",)
    assert mirrors[-1].attributes == {"undo": "0", "redo": "1"}

    adapter.handle_textual_key("ctrl+y")

    assert adapter.buffer.lines == ("a", "bc")


def test_unhandled_keys_return_none() -> None:
    adapter, mirrors, _ = make_adapter()
    before = len(mirrors)

    assert adapter.handle_textual_key("f5") is None
    assert adapter.handle_textual_key("tab", text="\t") is None
    assert len(mirrors) == before


def test_delete_at_end_of_line_surfaces_message() -> None:
    adapter, _, statuses = make_adapter(Buffer.from_lines(["ab"], cursor=(0, 2)))

    result = adapter.handle_textual_key("delete")

    assert result is not None and result.nothing_to_delete
    assert statuses[-1] == "Nothing to delete at this position!"


def test_single_line_paste_inserts_text() -> None:
    adapter, _, _ = make_adapter(Buffer.from_lines(["ad"], cursor=(0, 1)))

    adapter.handle_paste("bc")

    assert adapter.buffer.lines == ("abcd",)
    assert adapter.buffer.cursor == (0, 3)


def test_multiline_paste_is_one_undoable_edit() -> None:
    adapter, _, statuses = make_adapter(Buffer.from_lines(["abcdef"], cursor=(0, 3)))

    adapter.handle_paste("X\r\nY\n")

    assert adapter.buffer.lines == ("abc", "X", "Y", "def")
    assert statuses[-1] == "insert_lines:ok"
    adapter.buffer.undo()
    assert adapter.buffer.lines == ("abcdef",)


def test_lone_newline_paste_splits_like_new_line() -> None:
    adapter, _, statuses = make_adapter(Buffer.from_lines(["abc"], cursor=(0, 1)))

    adapter.handle_paste("\n")

    assert adapter.buffer.lines == ("a", "bc")
    assert adapter.buffer.cursor == (1, 0)
    assert statuses[-1] == "insert_lines:ok"
    assert adapter.buffer.history.undo_depth == 1


def test_trailing_newline_paste_keeps_line_break() -> None:
    adapter, _, _ = make_adapter(Buffer.from_lines(["abc"], cursor=(0, 1)))

    adapter.handle_paste("x\n")

    assert adapter.buffer.lines == ("a", "x", "bc")
    assert adapter.buffer.cursor == (2, 0)


def test_paste_without_trailing_newline_inserts_every_piece() -> None:
    adapter, _, _ = make_adapter(Buffer.from_lines(["ab"], cursor=(0, 1)))

    adapter.handle_paste("X\nY")

    assert adapter.buffer.lines == ("a", "X", "Y", "b")


def test_empty_paste_is_ignored() -> None:
    adapter, _, _ = make_adapter()

    assert adapter.handle_paste("") is None
    assert not adapter.buffer.history.can_undo()


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(update_buffer=lambda mirror: None, log=logs.append)
    adapter = TextualEditorAdapter(Buffer(), hooks)

    adapter.handle_textual_key("x", text="x")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)
