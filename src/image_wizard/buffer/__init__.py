"""Single-line text buffer with a character-indexed cursor."""

from .errors import BufferValidationError
from .text_buffer import BufferView, TextBuffer
from .validation import ensure_cursor

__all__ = [
    "TextBuffer",
    "BufferView",
    "BufferValidationError",
    "ensure_cursor",
]
