"""Normal interaction: keys are shortcuts, the input line is read-only."""

from __future__ import annotations

from image_wizard.runtime import telemetry
from image_wizard.wizard.modes import InteractionState

from .base import InteractionContext, InteractionMode, InteractionResult, KeyInput
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver


class NormalMode(InteractionMode):
    name = InteractionState.NORMAL

    def __init__(self, context: InteractionContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("image_wizard.interaction.normal")
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> InteractionResult:
        result = self._resolver.resolve(self.name.value, key_to_token(key))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)
        return InteractionResult(consumed=False, status="ignored")
