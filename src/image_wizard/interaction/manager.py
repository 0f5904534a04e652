"""Interaction manager coordinating the Normal and Editing modes."""

from __future__ import annotations

from typing import Dict, Optional, Type

from image_wizard.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from image_wizard.runtime import telemetry
from image_wizard.wizard.modes import InteractionState

from .base import InteractionContext, InteractionMode, InteractionResult, KeyInput
from .editing_mode import EditingMode
from .normal_mode import NormalMode


class InteractionManager:
    """Owns the active interaction mode, handles switches, dispatches keys.

    The active mode is mirrored into ``context.state.interaction`` so that
    renderers only need the wizard state.
    """

    def __init__(
        self,
        context: InteractionContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[InteractionState, InteractionMode] = {}
        self._active: Optional[InteractionState] = None
        self.logger = telemetry.get_logger("image_wizard.interaction")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="image_wizard.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="image_wizard.keymaps"
        )
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)

    @classmethod
    def with_default_modes(
        cls, context: InteractionContext, **kwargs: object
    ) -> "InteractionManager":
        manager = cls(context, **kwargs)  # type: ignore[arg-type]
        manager.register_mode(NormalMode)
        manager.register_mode(EditingMode)
        return manager

    @property
    def active_mode(self) -> Optional[InteractionMode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(self, mode_cls: Type[InteractionMode]) -> InteractionMode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Interaction mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            self.context.state.interaction = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: InteractionState) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown interaction mode '{name.value}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self.context.state.interaction = name
        self._modes[name].on_enter(previous.name if previous else None)
        self.context.bus.emit("interaction.switch", name)
        telemetry.record_event(
            "interaction.switch",
            data={"state": name.value},
            logger_name="image_wizard.interaction",
        )

    def handle_key(self, key: KeyInput) -> InteractionResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active interaction mode registered")
        with telemetry.span(
            f"interaction::{mode.name.value}",
            logger_name="image_wizard.interaction",
            component=True,
            metadata={"key": key.key, "kind": key.kind},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["InteractionManager"]
