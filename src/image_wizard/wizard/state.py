"""Aggregate state owned by the event loop for the whole run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from image_wizard.buffer import TextBuffer

from .modes import InteractionState, WizardMode

HISTORY_LIMIT = 200

StatusLevel = Literal["info", "error"]


@dataclass
class WizardState:
    """Everything the renderer needs to draw one frame."""

    mode: WizardMode = WizardMode.SELECT_MODE
    buffer: TextBuffer = field(default_factory=TextBuffer)
    interaction: InteractionState = InteractionState.NORMAL
    message: str = ""
    to_edit_image: Optional[str] = None
    status: str = ""
    status_level: StatusLevel = "info"
    history: List[str] = field(default_factory=list)

    def set_status(self, text: str, *, level: StatusLevel = "info") -> None:
        self.status = text
        self.status_level = level
        self.history.append(text)
        if len(self.history) > HISTORY_LIMIT:
            del self.history[: len(self.history) - HISTORY_LIMIT]


__all__ = ["WizardState", "StatusLevel", "HISTORY_LIMIT"]
