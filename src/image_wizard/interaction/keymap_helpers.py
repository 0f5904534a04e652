"""Helper utilities for keymap-driven interaction modes."""

from __future__ import annotations

from image_wizard.keymaps.resolver import KeymapResolver, ResolutionMatch
from image_wizard.runtime import telemetry

from .base import InteractionContext, InteractionResult, KeyInput


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifier = "+".join(sorted(m.lower() for m in key.modifiers))
        return f"{modifier}+{key.key}"
    return key.key


def require_keymap_resolver(context: InteractionContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("InteractionContext.extras missing 'keymap_resolver'")
    return resolver


def execute_match(
    context: InteractionContext, match: ResolutionMatch
) -> InteractionResult:
    with telemetry.span(
        "keymaps::execute",
        logger_name="image_wizard.interaction",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, InteractionResult):
        return outcome
    return InteractionResult(consumed=True)


__all__ = ["key_to_token", "require_keymap_resolver", "execute_match"]
