"""Base classes and shared utilities for interaction modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Literal, Optional, Tuple

from image_wizard.wizard.modes import InteractionState
from image_wizard.wizard.state import WizardState

if TYPE_CHECKING:
    from image_wizard.wizard.controller import ModeController

KeyKind = Literal["press", "release"]


@dataclass(slots=True)
class KeyInput:
    """Normalized key event.

    ``key`` is the character itself for printable keys and an upper-case name
    (``ENTER``, ``ESC``, ``BACKSPACE``, ``LEFT``, ``RIGHT``) otherwise.
    """

    key: str
    text: Optional[str] = None
    modifiers: Tuple[str, ...] = ()
    kind: KeyKind = "press"

    @classmethod
    def char(cls, value: str) -> "KeyInput":
        return cls(key=value, text=value)


@dataclass(slots=True)
class InteractionResult:
    """Result returned from ``InteractionMode.handle_key``."""

    consumed: bool
    switch_to: Optional[InteractionState] = None
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


@dataclass(slots=True)
class InteractionContext:
    """Services every interaction mode and key action can reach."""

    state: WizardState
    controller: "ModeController"
    bus: "EventBus"
    extras: Dict[str, object] = field(default_factory=dict)


class EventBus:
    """Minimal event bus letting hosts observe what the loop does."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class InteractionMode:
    """Base class for the Normal and Editing key handlers."""

    name: InteractionState

    def __init__(self, context: InteractionContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[InteractionState]) -> None:
        del previous

    def on_exit(self, next_state: Optional[InteractionState]) -> None:
        del next_state

    def handle_key(
        self, key: KeyInput
    ) -> InteractionResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = [
    "KeyKind",
    "KeyInput",
    "InteractionResult",
    "InteractionContext",
    "EventBus",
    "InteractionMode",
]
