"""Terminal I/O: raw mode, window size, and key decoding."""

from .keys import KeyEvent, SpecialKey, ctrl_key
from .raw import RawTerminal, TerminalError, get_window_size
from .input import ByteSource, FileDescriptorSource, InputDecoder

__all__ = [
    "KeyEvent",
    "SpecialKey",
    "ctrl_key",
    "RawTerminal",
    "TerminalError",
    "get_window_size",
    "ByteSource",
    "FileDescriptorSource",
    "InputDecoder",
]
