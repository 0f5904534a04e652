"""Validation helpers shared across buffer operations."""

from __future__ import annotations

from .errors import BufferValidationError


def ensure_cursor(text: str, cursor: int) -> int:
    if cursor < 0 or cursor > len(text):
        raise BufferValidationError("Cursor out of range", cursor=cursor)
    return cursor


def ensure_single_char(value: str) -> str:
    if len(value) != 1:
        raise BufferValidationError(
            f"Expected exactly one character, got {len(value)}"
        )
    return value
