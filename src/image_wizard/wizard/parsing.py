"""Interpret submitted lines for each wizard mode."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from image_wizard.errors import InvalidSubmissionError

from .modes import MENU_CHOICES, WizardMode

MAX_DIMENSION = 65535


def parse_menu_choice(text: str) -> Optional[WizardMode]:
    """Return the mode for a menu number, or ``None`` for anything else."""

    raw = text.strip()
    if not raw.isdecimal() or not raw.isascii():
        return None
    return MENU_CHOICES.get(int(raw))


def parse_dimensions(text: str) -> Tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` into two positive integers."""

    raw = text.strip()
    separator = raw.lower().find("x")
    if separator < 0:
        raise InvalidSubmissionError(
            f"Expected WidthxHeight such as 600x777, got {raw!r}", text=text
        )
    width = _parse_dimension(raw[:separator], "width", text)
    height = _parse_dimension(raw[separator + 1 :], "height", text)
    return width, height


def _parse_dimension(value: str, label: str, text: str) -> int:
    cleaned = value.strip()
    # isdecimal() also rejects signs, so "-5" never reaches int().
    if not cleaned.isdecimal() or not cleaned.isascii():
        raise InvalidSubmissionError(
            f"The {label} must be a whole number, got {cleaned!r}", text=text
        )
    number = int(cleaned)
    if not 1 <= number <= MAX_DIMENSION:
        raise InvalidSubmissionError(
            f"The {label} must be between 1 and {MAX_DIMENSION}, got {number}",
            text=text,
        )
    return number


def parse_blur_strength(text: str) -> float:
    raw = text.strip()
    try:
        strength = float(raw)
    except ValueError as exc:
        raise InvalidSubmissionError(
            f"Blur strength must be a number such as 1432.12, got {raw!r}",
            text=text,
        ) from exc
    if not math.isfinite(strength) or strength < 0:
        raise InvalidSubmissionError(
            f"Blur strength must be a finite number >= 0, got {raw!r}", text=text
        )
    return strength


__all__ = [
    "MAX_DIMENSION",
    "parse_menu_choice",
    "parse_dimensions",
    "parse_blur_strength",
]
