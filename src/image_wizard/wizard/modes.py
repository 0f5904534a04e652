"""Named wizard stages and interaction states."""

from __future__ import annotations

from enum import Enum


class WizardMode(str, Enum):
    SELECT_MODE = "select_mode"
    IMAGE_PICKER = "image_picker"
    RESIZE = "resize"
    GRAYSCALE = "grayscale"
    BLUR = "blur"


# Menu numbers shown in SELECT_MODE.
MENU_CHOICES: dict[int, WizardMode] = {
    1: WizardMode.IMAGE_PICKER,
    2: WizardMode.RESIZE,
    3: WizardMode.GRAYSCALE,
    4: WizardMode.BLUR,
}


class InteractionState(str, Enum):
    """Whether keys are shortcuts (normal) or edit the input line (editing)."""

    NORMAL = "normal"
    EDITING = "editing"


__all__ = ["WizardMode", "InteractionState", "MENU_CHOICES"]
