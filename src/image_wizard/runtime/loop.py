"""The wizard's control loop: redraw, wait for one key, dispatch."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol

from image_wizard.imaging import ImageOperations, PillowImageOperations
from image_wizard.interaction.base import (
    EventBus,
    InteractionContext,
    InteractionResult,
    KeyInput,
)
from image_wizard.interaction.manager import InteractionManager
from image_wizard.keymaps import KeymapRegistry
from image_wizard.wizard.controller import ModeController
from image_wizard.wizard.state import WizardState

from . import telemetry


class LoopSignal(Enum):
    CONTINUE = "continue"
    QUIT = "quit"


class KeySource(Protocol):
    def next_event(self) -> KeyInput:
        """Block until the next key event is available."""
        ...


class Renderer(Protocol):
    def render(self, state: WizardState) -> None:
        """Draw one frame for ``state``."""
        ...


class EventLoop:
    """Single owner of the ``WizardState`` for the lifetime of a session.

    ``dispatch`` handles exactly one key event; ``run`` drives a blocking
    ``KeySource`` and redraws before every wait, so a frame never shows a
    half-applied event. Hosts with their own event loop (Textual) call
    ``dispatch`` directly and redraw afterwards.
    """

    def __init__(
        self,
        state: WizardState,
        controller: ModeController,
        *,
        bus: EventBus | None = None,
        keymap_registry: KeymapRegistry | None = None,
    ) -> None:
        self.state = state
        self.controller = controller
        self.context = InteractionContext(
            state=state, controller=controller, bus=bus or EventBus()
        )
        self.manager = InteractionManager.with_default_modes(
            self.context, keymap_registry=keymap_registry
        )
        self.logger = telemetry.get_logger("image_wizard.loop")
        self.last_result: Optional[InteractionResult] = None

    @property
    def bus(self) -> EventBus:
        return self.context.bus

    def dispatch(self, event: KeyInput) -> LoopSignal:
        result = self.manager.handle_key(event)
        self.last_result = result
        if result.quit:
            telemetry.record_event("loop.quit", logger_name="image_wizard.loop")
            return LoopSignal.QUIT
        return LoopSignal.CONTINUE

    def run(self, source: KeySource, renderer: Renderer) -> int:
        """Run until the quit shortcut; returns the process exit code."""

        telemetry.record_event("loop.start", logger_name="image_wizard.loop")
        while True:
            renderer.render(self.state)
            event = source.next_event()
            if self.dispatch(event) is LoopSignal.QUIT:
                return 0


def create_default_loop(
    operations: ImageOperations | None = None,
    *,
    state: WizardState | None = None,
) -> EventLoop:
    """Build an ``EventLoop`` with a fresh state and the Pillow backend."""

    controller = ModeController(operations or PillowImageOperations())
    return EventLoop(state or WizardState(), controller)


__all__ = [
    "EventLoop",
    "KeySource",
    "LoopSignal",
    "Renderer",
    "create_default_loop",
]
