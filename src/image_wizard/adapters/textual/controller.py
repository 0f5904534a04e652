"""Adapter that feeds Textual key events through the wizard's event loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from image_wizard.interaction.base import KeyInput
from image_wizard.runtime.loop import EventLoop, LoopSignal
from image_wizard.wizard.controller import SubmissionResult
from image_wizard.wizard.state import WizardState


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key names -> wizard key names.
_NAMED_KEYS: Dict[str, str] = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
}


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    render: Callable[[WizardState], None]
    request_exit: Callable[[int], None] = _noop
    log: Callable[[str], None] = _noop


def normalize_key(
    key: str,
    *,
    character: Optional[str] = None,
    modifiers: Iterable[str] = (),
) -> Optional[KeyInput]:
    """Translate a Textual key name into a ``KeyInput``.

    Returns ``None`` for keys the wizard has no use for.
    """

    *prefix, base = key.split("+")
    mods = tuple(dict.fromkeys([*prefix, *(str(m).lower() for m in modifiers)]))
    named = _NAMED_KEYS.get(base)
    if named is not None:
        return KeyInput(key=named, modifiers=mods)
    if character and len(character) == 1 and character.isprintable():
        text_mods = tuple(m for m in mods if m != "shift")
        return KeyInput(key=character, text=character, modifiers=text_mods)
    return None


class TextualWizardAdapter:
    """Bridges Textual's push-style key events to ``EventLoop.dispatch``.

    Textual owns the terminal and its own loop, so the adapter redraws after
    every dispatched key instead of before every blocking wait.
    """

    def __init__(self, loop: EventLoop, hooks: TextualUIHooks) -> None:
        self.loop = loop
        self.hooks = hooks
        self._subscribe_events()
        self.hooks.render(self.loop.state)

    def handle_textual_key(
        self,
        key: str,
        *,
        character: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> LoopSignal:
        event = normalize_key(key, character=character, modifiers=modifiers)
        if event is None:
            self._log_state("key ignored", key=key)
            return LoopSignal.CONTINUE

        self._log_state("key ->", key=event.key, mods=event.modifiers)
        signal = self.loop.dispatch(event)
        if signal is LoopSignal.QUIT:
            self.hooks.request_exit(0)
            return signal

        self.hooks.render(self.loop.state)
        result = self.loop.last_result
        if result is not None:
            self._log_state("result <-", status=result.status, message=result.message)
        return signal

    def _subscribe_events(self) -> None:
        bus = self.loop.bus
        for event in (
            "interaction.switch",
            "interaction.quit",
            "wizard.submit",
            "wizard.result",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        if isinstance(payload, SubmissionResult):
            self._log_state("event ->", event=name, status=payload.status)
        else:
            self._log_state("event ->", event=name, payload=payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        state = self.loop.state
        snapshot: Dict[str, object] = {
            "mode": state.mode.value,
            "interaction": state.interaction.value,
            "cursor": state.buffer.cursor,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = ["TextualWizardAdapter", "TextualUIHooks", "normalize_key"]
