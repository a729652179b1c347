"""Shared factories for driving an editor session key by key."""

from __future__ import annotations

from typing import Union

from kilo_engine.buffer import Document
from kilo_engine.modes import ModeResult
from kilo_engine.modes.mode_manager import ModeManager
from kilo_engine.runtime.config import EditorConfig
from kilo_engine.session import EditorSession
from kilo_engine.terminal import KeyEvent, SpecialKey, ctrl_key
from kilo_engine.view import Viewport

KeyLike = Union[str, KeyEvent, SpecialKey]

_NAMED = {"ENTER": 0x0D, "ESC": 0x1B, "BACKSPACE": 0x7F, "TAB": 0x09}


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


def make_session(
    *lines: bytes,
    rows: int = 10,
    cols: int = 40,
    filename: str | None = None,
    config: EditorConfig | None = None,
) -> EditorSession:
    return EditorSession(
        viewport=Viewport(rows=rows, cols=cols),
        config=config or EditorConfig(),
        document=Document(lines),
        filename=filename,
        clock=FakeClock(),
    )


def to_event(key: KeyLike) -> KeyEvent:
    if isinstance(key, KeyEvent):
        return key
    if isinstance(key, SpecialKey):
        return KeyEvent.special(key)
    if key.startswith("ctrl+"):
        return KeyEvent.from_byte(ctrl_key(key[len("ctrl+") :]))
    if key in _NAMED:
        return KeyEvent.from_byte(_NAMED[key])
    return KeyEvent.from_byte(ord(key))


def press(manager: ModeManager, *keys: KeyLike) -> ModeResult:
    result = ModeResult(consumed=False)
    for key in keys:
        result = manager.handle_key(to_event(key))
    return result


def type_text(manager: ModeManager, text: str) -> ModeResult:
    return press(manager, *text)


def lines_of(session: EditorSession) -> list[bytes]:
    return list(session.document.snapshot())
