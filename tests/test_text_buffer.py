from __future__ import annotations

import random

import pytest

from image_wizard.buffer import BufferValidationError, TextBuffer, ensure_cursor


def test_insert_advances_cursor() -> None:
    buffer = TextBuffer()

    buffer.insert_at_cursor("a")
    buffer.insert_at_cursor("b")

    assert buffer.contents() == "ab"
    assert buffer.cursor == 2


def test_insert_in_middle_uses_character_index() -> None:
    buffer = TextBuffer("héllo")
    buffer.move_left()
    buffer.move_left()
    buffer.move_left()

    buffer.insert_at_cursor("ß")

    assert buffer.contents() == "héßllo"
    assert buffer.cursor == 3


def test_multibyte_round_trip_keeps_cursor_and_content() -> None:
    buffer = TextBuffer("ab")
    buffer.move_left()
    buffer.insert_at_cursor("🐱")
    before = (buffer.contents(), buffer.cursor)

    buffer.move_right()
    buffer.move_left()

    assert (buffer.contents(), buffer.cursor) == before
    assert buffer.contents() == "a🐱b"


def test_delete_before_cursor_removes_multibyte_character() -> None:
    buffer = TextBuffer("日本語")
    buffer.move_left()

    buffer.delete_before_cursor()

    assert buffer.contents() == "日語"
    assert buffer.cursor == 1


def test_delete_on_empty_buffer_is_noop() -> None:
    buffer = TextBuffer()

    buffer.delete_before_cursor()

    assert buffer.contents() == ""
    assert buffer.cursor == 0


def test_delete_at_start_is_noop() -> None:
    buffer = TextBuffer("600x777", cursor=0)
    version = buffer.version

    buffer.delete_before_cursor()

    assert buffer.contents() == "600x777"
    assert buffer.cursor == 0
    assert buffer.version == version


def test_moves_are_clamped() -> None:
    buffer = TextBuffer("ab")

    buffer.move_right()
    assert buffer.cursor == 2

    for _ in range(5):
        buffer.move_left()
    assert buffer.cursor == 0


def test_clear_resets_content_and_cursor() -> None:
    buffer = TextBuffer("/tmp/cat.png")
    buffer.move_left()

    buffer.clear()

    assert buffer.contents() == ""
    assert buffer.cursor == 0


def test_snapshot_is_immutable_view() -> None:
    buffer = TextBuffer("ab")
    view = buffer.snapshot()

    buffer.insert_at_cursor("c")

    assert view.text == "ab"
    assert view.cursor == 2
    assert buffer.snapshot().version == view.version + 1


def test_insert_rejects_more_than_one_character() -> None:
    buffer = TextBuffer()

    with pytest.raises(BufferValidationError):
        buffer.insert_at_cursor("ab")
    with pytest.raises(BufferValidationError):
        buffer.insert_at_cursor("")

    assert buffer.contents() == ""


def test_constructor_rejects_out_of_range_cursor() -> None:
    with pytest.raises(BufferValidationError) as info:
        TextBuffer("ab", cursor=3)

    assert info.value.cursor == 3


def test_ensure_cursor_bounds() -> None:
    assert ensure_cursor("abc", 0) == 0
    assert ensure_cursor("abc", 3) == 3
    with pytest.raises(BufferValidationError):
        ensure_cursor("abc", -1)


def test_cursor_stays_in_bounds_for_random_edits() -> None:
    rng = random.Random(1234)
    alphabet = ["a", "é", "日", "🐱", "x", "9"]
    buffer = TextBuffer()
    model: list[str] = []
    cursor = 0

    for _ in range(2000):
        op = rng.choice(["insert", "delete", "left", "right", "clear"])
        if op == "insert":
            char = rng.choice(alphabet)
            buffer.insert_at_cursor(char)
            model.insert(cursor, char)
            cursor += 1
        elif op == "delete":
            buffer.delete_before_cursor()
            if cursor:
                del model[cursor - 1]
                cursor -= 1
        elif op == "left":
            buffer.move_left()
            cursor = max(0, cursor - 1)
        elif op == "right":
            buffer.move_right()
            cursor = min(len(model), cursor + 1)
        elif rng.random() < 0.05:
            buffer.clear()
            model.clear()
            cursor = 0

        assert 0 <= buffer.cursor <= len(buffer.contents())
        assert buffer.contents() == "".join(model)
        assert buffer.cursor == cursor
