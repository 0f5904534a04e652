"""Actions that move between interaction states or end the session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from image_wizard.interaction.base import InteractionContext, InteractionResult
from image_wizard.wizard.modes import InteractionState

if TYPE_CHECKING:
    from image_wizard.keymaps.resolver import ResolutionMatch


def quit_wizard(context: InteractionContext, match: ResolutionMatch) -> InteractionResult:
    del match
    context.bus.emit("interaction.quit", None)
    return InteractionResult(consumed=True, status="quit", message="quit", quit=True)


def start_editing(
    context: InteractionContext, match: ResolutionMatch
) -> InteractionResult:
    del context, match
    return InteractionResult(
        consumed=True, switch_to=InteractionState.EDITING, message="start_editing"
    )


def stop_editing(context: InteractionContext, match: ResolutionMatch) -> InteractionResult:
    # The buffer is left as typed so editing can resume where it stopped.
    del context, match
    return InteractionResult(
        consumed=True, switch_to=InteractionState.NORMAL, message="stop_editing"
    )


__all__ = ["quit_wizard", "start_editing", "stop_editing"]
