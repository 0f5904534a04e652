from __future__ import annotations

from typing import List

import pytest

from fakes import RecordingImageOperations, typed

from image_wizard.interaction import EventBus, InteractionContext, KeyInput
from image_wizard.interaction.editing_mode import EditingMode
from image_wizard.interaction.manager import InteractionManager
from image_wizard.interaction.normal_mode import NormalMode
from image_wizard.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from image_wizard.wizard import InteractionState, ModeController, WizardMode, WizardState


def make_context(state: WizardState | None = None) -> InteractionContext:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return InteractionContext(
        state=state or WizardState(),
        controller=ModeController(RecordingImageOperations()),
        bus=EventBus(),
        extras={"keymap_resolver": KeymapResolver(registry)},
    )


def make_manager(state: WizardState | None = None) -> InteractionManager:
    context = InteractionContext(
        state=state or WizardState(),
        controller=ModeController(RecordingImageOperations()),
        bus=EventBus(),
    )
    return InteractionManager.with_default_modes(context)


def test_normal_mode_e_switches_to_editing() -> None:
    mode = NormalMode(make_context())

    result = mode.handle_key(KeyInput.char("e"))

    assert result.switch_to is InteractionState.EDITING
    assert result.consumed is True


def test_normal_mode_q_requests_quit() -> None:
    mode = NormalMode(make_context())

    result = mode.handle_key(KeyInput.char("q"))

    assert result.quit is True


def test_normal_mode_ignores_other_keys() -> None:
    context = make_context()
    mode = NormalMode(context)

    for key in (KeyInput.char("2"), KeyInput(key="ENTER"), KeyInput(key="BACKSPACE")):
        result = mode.handle_key(key)
        assert result.consumed is False
        assert result.quit is False

    assert context.state.buffer.contents() == ""


def test_modes_require_keymap_resolver() -> None:
    context = make_context()
    context.extras.clear()

    with pytest.raises(RuntimeError):
        EditingMode(context)


def test_editing_mode_inserts_printable_characters() -> None:
    context = make_context()
    mode = EditingMode(context)

    for key in typed("q é"):
        mode.handle_key(key)

    assert context.state.buffer.contents() == "q é"
    assert context.state.buffer.cursor == 3


def test_editing_mode_ignores_release_events() -> None:
    context = make_context()
    mode = EditingMode(context)

    result = mode.handle_key(KeyInput(key="a", text="a", kind="release"))
    mode.handle_key(KeyInput(key="ENTER", kind="release"))

    assert result.consumed is False
    assert context.state.buffer.contents() == ""
    assert context.state.message == ""


def test_editing_mode_ignores_modified_and_control_keys() -> None:
    context = make_context()
    mode = EditingMode(context)

    mode.handle_key(KeyInput(key="a", text="a", modifiers=("ctrl",)))
    mode.handle_key(KeyInput(key="TAB", text="\t"))

    assert context.state.buffer.contents() == ""


def test_editing_mode_cursor_keys_and_backspace() -> None:
    context = make_context()
    mode = EditingMode(context)
    for key in typed("6000x777"):
        mode.handle_key(key)

    for _ in range(4):
        mode.handle_key(KeyInput(key="LEFT"))
    mode.handle_key(KeyInput(key="BACKSPACE"))
    mode.handle_key(KeyInput(key="RIGHT"))

    assert context.state.buffer.contents() == "600x777"
    assert context.state.buffer.cursor == 4


def test_editing_mode_escape_keeps_buffer() -> None:
    context = make_context()
    mode = EditingMode(context)
    for key in typed("60"):
        mode.handle_key(key)

    result = mode.handle_key(KeyInput(key="ESC"))

    assert result.switch_to is InteractionState.NORMAL
    assert context.state.buffer.contents() == "60"
    assert context.state.message == ""


def test_submit_clears_buffer_even_when_controller_raises() -> None:
    context = make_context()

    class ExplodingController:
        def submit(self, state: WizardState, text: str) -> None:
            raise OSError("terminal lost")

    context.controller = ExplodingController()  # type: ignore[assignment]
    mode = EditingMode(context)
    for key in typed("2"):
        mode.handle_key(key)

    with pytest.raises(OSError):
        mode.handle_key(KeyInput(key="ENTER"))

    assert context.state.buffer.contents() == ""
    assert context.state.buffer.cursor == 0


def test_submit_emits_bus_events() -> None:
    context = make_context()
    seen: List[str] = []
    context.bus.subscribe("wizard.submit", lambda payload: seen.append(f"submit:{payload}"))
    context.bus.subscribe(
        "wizard.result", lambda payload: seen.append(f"result:{payload.status}")
    )
    mode = EditingMode(context)
    for key in typed("4"):
        mode.handle_key(key)

    mode.handle_key(KeyInput(key="ENTER"))

    assert seen == ["submit:4", "result:selected"]
    assert context.state.mode is WizardMode.BLUR


def test_manager_starts_in_normal_and_mirrors_state() -> None:
    manager = make_manager()

    assert manager.active_mode is not None
    assert manager.active_mode.name is InteractionState.NORMAL
    assert manager.context.state.interaction is InteractionState.NORMAL

    manager.handle_key(KeyInput.char("e"))

    assert manager.context.state.interaction is InteractionState.EDITING

    manager.handle_key(KeyInput(key="ESC"))

    assert manager.context.state.interaction is InteractionState.NORMAL


def test_manager_rejects_duplicate_and_unknown_modes() -> None:
    manager = make_manager()

    with pytest.raises(ValueError):
        manager.register_mode(NormalMode)

    empty = InteractionManager(manager.context)
    with pytest.raises(KeyError):
        empty.switch_mode(InteractionState.EDITING)
    with pytest.raises(RuntimeError):
        empty.handle_key(KeyInput.char("e"))


def test_manager_emits_switch_events() -> None:
    manager = make_manager()
    switches: List[object] = []
    manager.context.bus.subscribe("interaction.switch", switches.append)

    manager.handle_key(KeyInput.char("e"))
    manager.handle_key(KeyInput.char("x"))
    manager.handle_key(KeyInput(key="ESC"))

    assert switches == [InteractionState.EDITING, InteractionState.NORMAL]
