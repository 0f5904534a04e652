"""Textual host: adapter, pure view builder, and the application.

``ImageWizardApp`` is imported from ``image_wizard.adapters.textual.app``.
"""

from .controller import TextualUIHooks, TextualWizardAdapter, normalize_key
from .view import Frame, build_frame

__all__ = [
    "TextualUIHooks",
    "TextualWizardAdapter",
    "normalize_key",
    "Frame",
    "build_frame",
]
