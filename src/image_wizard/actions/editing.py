"""Actions that edit the input line or submit it to the mode controller."""

from __future__ import annotations

from typing import TYPE_CHECKING

from image_wizard.interaction.base import InteractionContext, InteractionResult

if TYPE_CHECKING:
    from image_wizard.keymaps.resolver import ResolutionMatch


def submit_buffer(context: InteractionContext, match: ResolutionMatch) -> InteractionResult:
    del match
    state = context.state
    text = state.buffer.contents()
    context.bus.emit("wizard.submit", text)
    try:
        result = context.controller.submit(state, text)
    finally:
        state.buffer.clear()
    context.bus.emit("wizard.result", result)
    return InteractionResult(
        consumed=True, status=f"submit_{result.status}", message=result.message
    )


def insert_character(context: InteractionContext, char: str) -> InteractionResult:
    context.state.buffer.insert_at_cursor(char)
    return InteractionResult(consumed=True, status="editing")


def delete_before_cursor(
    context: InteractionContext, match: ResolutionMatch
) -> InteractionResult:
    del match
    context.state.buffer.delete_before_cursor()
    return InteractionResult(consumed=True, status="editing")


def move_cursor_left(
    context: InteractionContext, match: ResolutionMatch
) -> InteractionResult:
    del match
    context.state.buffer.move_left()
    return InteractionResult(consumed=True, status="editing")


def move_cursor_right(
    context: InteractionContext, match: ResolutionMatch
) -> InteractionResult:
    del match
    context.state.buffer.move_right()
    return InteractionResult(consumed=True, status="editing")


__all__ = [
    "submit_buffer",
    "insert_character",
    "delete_before_cursor",
    "move_cursor_left",
    "move_cursor_right",
]
