"""Binding data: keystrokes, key sequences, actions, and the links between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


def _require(value: str, what: str) -> None:
    if not value:
        raise ValueError(f"{what} cannot be empty")


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """One key press as written in a binding: ``q`` with ``("ctrl",)`` is ``ctrl+q``.

    Modifiers are lower-cased, de-duplicated and sorted so equal chords
    compare equal however they were spelled.
    """

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _require(self.key, "key")
        cleaned = sorted({m.strip().lower() for m in self.modifiers if m.strip()})
        object.__setattr__(self, "modifiers", tuple(cleaned))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Read ``"ctrl+q"`` style tokens; a lone ``+`` is the plus key."""

        head, sep, key = token.rpartition("+")
        if sep and head and key:
            return cls(key, tuple(head.split("+")))
        return cls(token)


@dataclass(frozen=True, slots=True)
class KeySequence:
    strokes: tuple[KeyStroke, ...]

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("KeySequence requires at least one stroke")

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.strokes)

    @classmethod
    def from_strings(cls, *keys: str) -> "KeySequence":
        return cls(tuple(KeyStroke.parse(key) for key in keys if key))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """A named verb; ``handler(context, match)`` does the work."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        _require(self.id, "ActionRef id")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Keys that trigger an action while a given mode is active."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        _require(self.id, "binding id")
        _require(self.mode, "binding mode")
        _require(self.action_id, "binding action_id")

    @property
    def key_signature(self) -> str:
        return " ".join(self.sequence.tokens)


__all__ = ["KeyStroke", "KeySequence", "ActionRef", "Binding"]
