"""Wizard modes, state aggregate, and the submission controller."""

from .controller import ModeController, SubmissionResult
from .modes import MENU_CHOICES, InteractionState, WizardMode
from .parsing import parse_blur_strength, parse_dimensions, parse_menu_choice
from .prompts import prompt_for
from .state import WizardState

__all__ = [
    "ModeController",
    "SubmissionResult",
    "WizardMode",
    "InteractionState",
    "MENU_CHOICES",
    "WizardState",
    "parse_menu_choice",
    "parse_dimensions",
    "parse_blur_strength",
    "prompt_for",
]
