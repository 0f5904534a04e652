"""Key resolution against the registry, cached per interaction state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from image_wizard.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Builds per-state lookup tables and resolves key tokens."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Dict[str, tuple[int, Dict[str, ResolutionMatch]]] = {}

    def resolve(self, state: str, token: str) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"state": state, "token": token},
        ) as handle:
            match = self._ensure_table(state).get(token)
            if match is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", match.binding.id)
            return ResolutionResult(status="match", match=match)

    def _ensure_table(self, state: str) -> Dict[str, ResolutionMatch]:
        revision = self._registry.revision()
        cached = self._cache.get(state)
        if cached and cached[0] == revision:
            return cached[1]

        table = {
            binding.key_signature: ResolutionMatch(
                binding=binding, action=self._registry.get_action(binding.action_id)
            )
            for binding in self._registry.iter_bindings(state)
        }
        self._cache[state] = (revision, table)
        return table


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
