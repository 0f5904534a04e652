"""Actions bound to keys in the default keymaps."""

from .core import quit_wizard, start_editing, stop_editing
from .editing import (
    delete_before_cursor,
    insert_character,
    move_cursor_left,
    move_cursor_right,
    submit_buffer,
)

__all__ = [
    "quit_wizard",
    "start_editing",
    "stop_editing",
    "submit_buffer",
    "insert_character",
    "delete_before_cursor",
    "move_cursor_left",
    "move_cursor_right",
]
