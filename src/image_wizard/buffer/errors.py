"""Errors raised by the buffer layer."""

from __future__ import annotations


class BufferValidationError(RuntimeError):
    """Raised when an edit or a host provides an out-of-bounds cursor."""

    def __init__(self, message: str, *, cursor: int | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
