"""Registry of wizard actions and the single-key bindings that trigger them."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from image_wizard.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a key is already bound in the same interaction state."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Binding '{binding.id}' reuses {binding.key_signature!r} in "
            f"'{binding.state}', already bound by '{existing.id}'"
        )
        self.binding = binding
        self.conflicts = (existing,)


class KeymapRegistry:
    """Actions by id plus at most one binding per (state, key).

    Every registered binding bumps :meth:`revision` so resolvers know when
    their lookup tables went stale.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_key: Dict[Tuple[str, str], str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def register_action(self, action: ActionRef) -> ActionRef:
        if action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "state": binding.state},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )
            if binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            existing = self.find_conflict(binding)
            if existing is not None:
                handle.add_metadata("conflict", existing.id)
                raise KeymapConflictError(binding, existing)

            self._bindings[binding.id] = binding
            self._by_key[(binding.state, binding.key_signature)] = binding.id
            self._revision += 1
            return binding

    def find_conflict(self, binding: Binding) -> Optional[Binding]:
        bound_id = self._by_key.get((binding.state, binding.key_signature))
        if bound_id is None or bound_id == binding.id:
            return None
        return self._bindings[bound_id]

    def iter_bindings(self, state: Optional[str] = None) -> Iterator[Binding]:
        for binding in self._bindings.values():
            if state is None or binding.state == state:
                yield binding


__all__ = ["KeymapRegistry", "KeymapConflictError"]
