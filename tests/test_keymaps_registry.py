import pytest

from image_wizard.keymaps import (
    ActionRef,
    Binding,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    state: str = "normal",
    key: str = "x",
    action_id: str = "core.test",
) -> Binding:
    return Binding.for_key(binding_id, state, key, action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.x")

    registry.register_binding(binding)

    assert registry.revision() == 1
    assert list(registry.iter_bindings(state="normal")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.x"))

    with pytest.raises(KeymapConflictError) as info:
        registry.register_binding(make_binding(binding_id="normal.x.duplicate"))

    assert [b.id for b in info.value.conflicts] == ["normal.x"]


def test_same_key_in_other_state_does_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.x"))
    registry.register_binding(make_binding(binding_id="editing.x", state="editing"))

    assert [b.id for b in registry.iter_bindings("editing")] == ["editing.x"]
    assert [b.id for b in registry.iter_bindings("normal")] == ["normal.x"]


def test_register_binding_requires_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.x"))


def test_duplicate_action_and_binding_ids_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.x"))

    with pytest.raises(ValueError):
        registry.register_action(make_action())
    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="normal.x", key="y"))

    assert [b.id for b in registry.iter_bindings()] == ["normal.x"]


def test_rejected_binding_leaves_revision_unchanged() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.x"))
    revision = registry.revision()

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="normal.x.again"))

    assert registry.revision() == revision
    assert registry.find_conflict(make_binding(binding_id="normal.y", key="y")) is None


def test_key_stroke_parse_and_token() -> None:
    stroke = KeyStroke.parse("Ctrl+ENTER")

    assert stroke.key == "ENTER"
    assert stroke.modifiers == ("ctrl",)
    assert stroke.token == "ctrl+ENTER"
    assert KeyStroke.parse("q").token == "q"


def test_key_stroke_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")


def test_default_keymaps_cover_both_states() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    normal_keys = {b.key_signature for b in registry.iter_bindings("normal")}
    editing_keys = {b.key_signature for b in registry.iter_bindings("editing")}
    assert normal_keys == {"q", "e"}
    assert editing_keys == {"ENTER", "BACKSPACE", "LEFT", "RIGHT", "ESC"}
