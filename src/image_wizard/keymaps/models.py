"""Key strokes, actions, and the bindings that join them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press a binding listens for."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join((*self.modifiers, self.key))
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+ENTER"`` style tokens."""

        *modifiers, key = token.split("+") if token != "+" else ["+"]
        return cls(key=key, modifiers=tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named handler a binding runs; called as ``handler(context, match)``."""

    id: str
    handler: Callable[..., object]

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """One key in one interaction state, mapped to an action id."""

    id: str
    state: str
    stroke: KeyStroke
    action_id: str

    def __post_init__(self) -> None:
        for label in ("id", "state", "action_id"):
            if not getattr(self, label):
                raise ValueError(f"binding {label} cannot be empty")

    @classmethod
    def for_key(cls, id: str, state: str, key: str, action_id: str) -> "Binding":
        return cls(id=id, state=state, stroke=KeyStroke.parse(key), action_id=action_id)

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = ["KeyStroke", "ActionRef", "Binding"]
