"""Logical key events produced by the input decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

ESC = 0x1B
ENTER = 0x0D
TAB = 0x09
BACKSPACE = 0x7F


def ctrl_key(letter: str) -> int:
    """Byte produced by Ctrl+``letter``."""

    return ord(letter) & 0x1F


class SpecialKey(str, Enum):
    """Named keys that only arrive as escape sequences."""

    ARROW_LEFT = "ARROW_LEFT"
    ARROW_RIGHT = "ARROW_RIGHT"
    ARROW_UP = "ARROW_UP"
    ARROW_DOWN = "ARROW_DOWN"
    DELETE = "DELETE"
    HOME = "HOME"
    END = "END"
    PAGE_UP = "PAGE_UP"
    PAGE_DOWN = "PAGE_DOWN"


_NAMED_BYTES = {
    ESC: "ESC",
    ENTER: "ENTER",
    TAB: "TAB",
    BACKSPACE: "BACKSPACE",
}

# Control bytes outside 0x01-0x1A have no letter; name the key typed with Ctrl.
_CTRL_SYMBOLS = {
    0x00: "@",
    0x1C: "backslash",
    0x1D: "bracketright",
    0x1E: "caret",
    0x1F: "underscore",
}


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Normalized key press.

    ``byte`` carries the literal input byte for character and control keys and
    is ``None`` for special keys decoded from an escape sequence.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    byte: Optional[int] = None

    @classmethod
    def from_byte(cls, byte: int) -> "KeyEvent":
        name = _NAMED_BYTES.get(byte)
        if name is not None:
            return cls(key=name, byte=byte)
        symbol = _CTRL_SYMBOLS.get(byte)
        if symbol is not None:
            return cls(key=symbol, modifiers=("ctrl",), byte=byte)
        if byte < 0x20:
            return cls(key=chr(byte | 0x60), modifiers=("ctrl",), byte=byte)
        return cls(key=chr(byte), byte=byte)

    @classmethod
    def special(cls, key: SpecialKey) -> "KeyEvent":
        return cls(key=key.value)

    @property
    def token(self) -> str:
        """Keymap token, e.g. ``ctrl+q``, ``ENTER``, ``ARROW_UP`` or ``a``."""

        if self.modifiers:
            return "+".join(self.modifiers) + "+" + self.key
        return self.key

    @property
    def is_special(self) -> bool:
        return self.byte is None

    @property
    def is_insertable(self) -> bool:
        """True for bytes the edit engine may place in the document."""

        if self.byte is None:
            return False
        return self.byte == TAB or (self.byte >= 0x20 and self.byte != BACKSPACE)

    @property
    def is_prompt_text(self) -> bool:
        """Printable ASCII accepted by single-line prompts."""

        return self.byte is not None and 0x20 <= self.byte < 0x7F

    def is_ctrl(self, letter: str) -> bool:
        return self.byte == ctrl_key(letter)


__all__ = [
    "KeyEvent",
    "SpecialKey",
    "ctrl_key",
    "ESC",
    "ENTER",
    "TAB",
    "BACKSPACE",
]
