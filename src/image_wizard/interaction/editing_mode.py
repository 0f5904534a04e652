"""Editing interaction: keys edit the input line or submit it."""

from __future__ import annotations

from typing import Optional

from image_wizard.actions.editing import insert_character
from image_wizard.runtime import telemetry
from image_wizard.wizard.modes import InteractionState

from .base import InteractionContext, InteractionMode, InteractionResult, KeyInput
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver


class EditingMode(InteractionMode):
    name = InteractionState.EDITING

    def __init__(self, context: InteractionContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("image_wizard.interaction.editing")
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> InteractionResult:
        if key.kind != "press":
            return InteractionResult(consumed=False, status="release")

        result = self._resolver.resolve(self.name.value, key_to_token(key))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)

        text = _insertable_text(key)
        if text is not None:
            return insert_character(self.context, text)

        return InteractionResult(consumed=False, status="ignored")


def _insertable_text(key: KeyInput) -> Optional[str]:
    # Modified keys (ctrl+a, ...) are shortcuts, not text.
    if key.modifiers and set(m.lower() for m in key.modifiers) != {"shift"}:
        return None
    if key.text is not None and len(key.text) == 1 and key.text.isprintable():
        return key.text
    return None
