"""User-facing instruction lines for each mode and interaction state."""

from __future__ import annotations

from typing import Dict, Tuple

from .modes import InteractionState, WizardMode

MODE_PROMPTS: Dict[WizardMode, Tuple[str, ...]] = {
    WizardMode.SELECT_MODE: (
        "Please select one of the following modes.",
        "Enter the number only.",
        "1. Image Picker",
        "2. Re-Size the image",
        "3. Grayscale the image",
        "4. Blur the image",
    ),
    WizardMode.IMAGE_PICKER: (
        "Enter the path of the image you wish to edit",
        "Example: /home/user/Pictures/meow.jpg",
    ),
    WizardMode.RESIZE: (
        "Enter the Width and Height of the wanted re-size",
        "In the format of WidthxHeight using whole numbers",
        "For example 600x777",
    ),
    WizardMode.GRAYSCALE: ("Press Enter to confirm",),
    WizardMode.BLUR: (
        "Choose a Blur intensity",
        "Must be a floating point number",
        "For example 1432.12",
    ),
}

# (key, description) pairs, rendered with the keys emphasised.
HELP_LINES: Dict[InteractionState, Tuple[Tuple[str, str], ...]] = {
    InteractionState.NORMAL: (("q", "to exit"), ("e", "to start editing")),
    InteractionState.EDITING: (
        ("Esc", "to stop editing"),
        ("Enter", "to record the message"),
    ),
}


def prompt_for(mode: WizardMode) -> Tuple[str, ...]:
    return MODE_PROMPTS[mode]


__all__ = ["MODE_PROMPTS", "HELP_LINES", "prompt_for"]
