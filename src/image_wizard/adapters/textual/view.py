"""Pure state -> frame rendering used by the Textual host."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from image_wizard.wizard.modes import InteractionState
from image_wizard.wizard.prompts import HELP_LINES, prompt_for
from image_wizard.wizard.state import WizardState

HISTORY_LINES = 5


@dataclass(frozen=True, slots=True)
class Frame:
    help_line: Text
    input_line: Text
    messages: Text
    cursor_column: int | None


def build_frame(state: WizardState) -> Frame:
    editing = state.interaction is InteractionState.EDITING
    view = state.buffer.snapshot()
    return Frame(
        help_line=_help_line(state.interaction),
        input_line=_input_line(view.text, view.cursor, editing=editing),
        messages=_messages(state),
        cursor_column=view.cursor if editing else None,
    )


def _help_line(interaction: InteractionState) -> Text:
    text = Text("Press ")
    pairs = HELP_LINES[interaction]
    for index, (key, description) in enumerate(pairs):
        text.append(key, style="bold")
        separator = ", " if index < len(pairs) - 1 else "."
        text.append(f" {description}{separator}")
    if interaction is InteractionState.NORMAL:
        text.stylize("blink")
    return text


def _input_line(value: str, cursor: int, *, editing: bool) -> Text:
    style = "yellow" if editing else ""
    text = Text(value, style=style)
    if editing:
        if cursor == len(value):
            text.append(" ")
        text.stylize("reverse", cursor, cursor + 1)
    return text


def _messages(state: WizardState) -> Text:
    text = Text("\n".join(prompt_for(state.mode)))
    target = state.to_edit_image or "none"
    text.append(f"\n\nImage: {target}", style="dim")
    if state.status:
        style = "bold red" if state.status_level == "error" else "green"
        text.append(f"\n{state.status}", style=style)
    earlier = state.history[:-1][-HISTORY_LINES:]
    if earlier:
        text.append("\n\nEarlier:", style="dim")
        for line in reversed(earlier):
            text.append(f"\n  {line}", style="dim")
    return text


__all__ = ["Frame", "build_frame"]
