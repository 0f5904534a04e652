"""Built-in keymaps for the Normal and Editing interaction states."""

from __future__ import annotations

from image_wizard.actions import core as core_actions
from image_wizard.actions import editing as editing_actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("interaction.quit", core_actions.quit_wizard),
    ActionRef("interaction.start_editing", core_actions.start_editing),
    ActionRef("interaction.stop_editing", core_actions.stop_editing),
    ActionRef("editing.submit", editing_actions.submit_buffer),
    ActionRef("editing.delete_before_cursor", editing_actions.delete_before_cursor),
    ActionRef("editing.cursor_left", editing_actions.move_cursor_left),
    ActionRef("editing.cursor_right", editing_actions.move_cursor_right),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding.for_key("normal.quit", "normal", "q", "interaction.quit"),
    Binding.for_key("normal.edit", "normal", "e", "interaction.start_editing"),
    Binding.for_key("editing.submit", "editing", "ENTER", "editing.submit"),
    Binding.for_key(
        "editing.backspace", "editing", "BACKSPACE", "editing.delete_before_cursor"
    ),
    Binding.for_key("editing.left", "editing", "LEFT", "editing.cursor_left"),
    Binding.for_key("editing.right", "editing", "RIGHT", "editing.cursor_right"),
    Binding.for_key("editing.escape", "editing", "ESC", "interaction.stop_editing"),
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register built-in actions and bindings for both interaction states."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
