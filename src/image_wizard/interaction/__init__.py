"""Shared types for the Normal/Editing interaction modes.

The modes themselves live in ``normal_mode`` and ``editing_mode`` and are
wired together by ``image_wizard.interaction.manager``.
"""

from .base import (
    EventBus,
    InteractionContext,
    InteractionMode,
    InteractionResult,
    KeyInput,
    KeyKind,
)

__all__ = [
    "KeyInput",
    "KeyKind",
    "EventBus",
    "InteractionContext",
    "InteractionMode",
    "InteractionResult",
]
