"""Editable single-line buffer used for free-text entry."""

from __future__ import annotations

from dataclasses import dataclass

from .validation import ensure_cursor, ensure_single_char


@dataclass(frozen=True, slots=True)
class BufferView:
    """Immutable snapshot handed to renderers.

    ``cursor`` is a character index into ``text``; hosts add it to the input
    box origin to place the terminal cursor.
    """

    text: str
    cursor: int
    version: int


class TextBuffer:
    """Text plus a cursor measured in characters, never in encoded bytes.

    Python strings index by code point, so slicing at ``cursor`` can never
    split a multi-byte character.
    """

    def __init__(self, text: str = "", *, cursor: int | None = None) -> None:
        self._text = text
        self._cursor = ensure_cursor(text, len(text) if cursor is None else cursor)
        self._version = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._text)

    def contents(self) -> str:
        return self._text

    def snapshot(self) -> BufferView:
        return BufferView(text=self._text, cursor=self._cursor, version=self._version)

    def insert_at_cursor(self, char: str) -> None:
        ensure_single_char(char)
        index = self._cursor
        self._apply(self._text[:index] + char + self._text[index:], index + 1)

    def delete_before_cursor(self) -> None:
        if self._cursor == 0:
            return
        index = self._cursor
        self._apply(self._text[: index - 1] + self._text[index:], index - 1)

    def move_left(self) -> None:
        self._move_to(self._cursor - 1)

    def move_right(self) -> None:
        self._move_to(self._cursor + 1)

    def clear(self) -> None:
        if not self._text and self._cursor == 0:
            return
        self._apply("", 0)

    def _move_to(self, position: int) -> None:
        clamped = self._clamp(position)
        if clamped != self._cursor:
            self._apply(self._text, clamped)

    def _clamp(self, position: int) -> int:
        return max(0, min(position, len(self._text)))

    def _apply(self, text: str, cursor: int) -> None:
        self._cursor = ensure_cursor(text, cursor)
        self._text = text
        self._version += 1

    def __repr__(self) -> str:
        return f"TextBuffer(text={self._text!r}, cursor={self._cursor})"


__all__ = ["TextBuffer", "BufferView"]
