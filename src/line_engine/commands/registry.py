"""Command registry responsible for storing actions and token bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from line_engine.runtime.telemetry import span

from .models import ActionRef, CommandBinding, normalize_token


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int
    tokens: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: CommandBinding
    action: ActionRef


class CommandConflictError(RuntimeError):
    """Raised when a new binding claims a token that is already bound."""

    def __init__(self, binding: CommandBinding, conflicts: Iterable[CommandBinding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class CommandRegistry:
    """Owns action references and the token -> binding index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, CommandBinding] = {}
        self._token_index: Dict[str, str] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "commands::register_action",
            logger_name=self._logger_name,
            component="commands",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(
        self, binding: CommandBinding, *, replace: bool = False
    ) -> CommandBinding:
        with span(
            "commands::register_binding",
            logger_name=self._logger_name,
            component="commands",
            metadata={"binding_id": binding.id, "token": binding.token},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action "
                    f"'{binding.action_id}'"
                )

            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise CommandConflictError(binding, conflicts)

            if replace:
                for conflict in conflicts:
                    self._drop(conflict)
                existing = self._bindings.get(binding.id)
                if existing:
                    self._drop(existing)
            elif binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._token_index[binding.token] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[CommandBinding]:
        with span(
            "commands::unregister_binding",
            logger_name=self._logger_name,
            component="commands",
            metadata={"binding_id": binding_id},
        ):
            binding = self._bindings.get(binding_id)
            if binding is None:
                return None
            self._drop(binding)
            return binding

    def iter_bindings(self) -> Iterator[CommandBinding]:
        yield from self._bindings.values()

    def detect_conflicts(self, binding: CommandBinding) -> list[CommandBinding]:
        bound_id = self._token_index.get(binding.token)
        if bound_id is None or bound_id == binding.id:
            return []
        return [self._bindings[bound_id]]

    def resolve(self, token: str) -> Optional[ResolutionMatch]:
        """Return the binding and action for ``token``, or ``None`` on a miss."""

        binding_id = self._token_index.get(normalize_token(token))
        if binding_id is None:
            return None
        binding = self._bindings[binding_id]
        action = self.get_action(binding.action_id)
        return ResolutionMatch(binding=binding, action=action)

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            tokens=tuple(self._token_index),
        )

    def _drop(self, binding: CommandBinding) -> None:
        self._bindings.pop(binding.id, None)
        if self._token_index.get(binding.token) == binding.id:
            self._token_index.pop(binding.token, None)


__all__ = [
    "CommandConflictError",
    "CommandRegistry",
    "RegistryStats",
    "ResolutionMatch",
]
