from __future__ import annotations

import pytest

from line_engine.commands import (
    ActionRef,
    CommandBinding,
    CommandConflictError,
    CommandRegistry,
    load_default_commands,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *, binding_id: str, token: str = "X", action_id: str = "core.test"
) -> CommandBinding:
    return CommandBinding(id=binding_id, token=token, action_id=action_id)


def test_register_binding_success() -> None:
    registry = CommandRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="x")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = CommandRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="x"))

    with pytest.raises(CommandConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="x.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["x"]


def test_register_binding_replace_drops_conflicts() -> None:
    registry = CommandRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="x"))

    registry.register_binding(make_binding(binding_id="x.new"), replace=True)

    match = registry.resolve("X")
    assert match is not None
    assert match.binding.id == "x.new"
    assert registry.stats().binding_count == 1


def test_register_binding_requires_known_action() -> None:
    registry = CommandRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="x", action_id="missing"))


def test_register_action_rejects_duplicates() -> None:
    registry = CommandRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_duplicate_binding_id_rejected() -> None:
    registry = CommandRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="x"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="x", token="Z"))


def test_unregister_binding_frees_token() -> None:
    registry = CommandRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="x"))

    removed = registry.unregister_binding("x")

    assert removed is not None
    assert registry.resolve("X") is None
    assert registry.unregister_binding("x") is None


def test_resolve_strips_whitespace_and_is_case_sensitive() -> None:
    registry = CommandRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="x"))

    assert registry.resolve("  X ") is not None
    assert registry.resolve("x") is None


def test_binding_rejects_blank_token() -> None:
    with pytest.raises(ValueError):
        CommandBinding(id="blank", token="  ", action_id="core.test")


def test_action_ref_requires_callable_handler() -> None:
    with pytest.raises(TypeError):
        ActionRef(id="core.bad", handler="not callable")  # type: ignore[arg-type]


def test_load_default_commands_registers_every_token() -> None:
    registry = CommandRegistry()

    load_default_commands(registry)

    stats = registry.stats()
    assert stats.action_count == 11
    assert stats.tokens == ("I", "M", "D", "L", "R", "U", "Y", "N", "W", "S", "Q")
    match = registry.resolve("M")
    assert match is not None
    assert match.action.id == "edit.insert_lines"


def test_load_default_commands_filters_bindings() -> None:
    registry = CommandRegistry()

    load_default_commands(registry, exclude_bindings=["quit", "delete"])

    assert registry.resolve("Q") is None
    assert registry.resolve("D") is None
    assert registry.resolve("I") is not None
