"""Input Decoder: raw terminal bytes to logical key events."""

from __future__ import annotations

import errno
import os
from typing import Callable, Dict, Optional, Protocol

from .keys import ESC, KeyEvent, SpecialKey
from .raw import TerminalError

CSI_LETTERS: Dict[int, SpecialKey] = {
    ord("A"): SpecialKey.ARROW_UP,
    ord("B"): SpecialKey.ARROW_DOWN,
    ord("C"): SpecialKey.ARROW_RIGHT,
    ord("D"): SpecialKey.ARROW_LEFT,
    ord("H"): SpecialKey.HOME,
    ord("F"): SpecialKey.END,
}
CSI_DIGITS: Dict[int, SpecialKey] = {
    ord("1"): SpecialKey.HOME,
    ord("3"): SpecialKey.DELETE,
    ord("4"): SpecialKey.END,
    ord("5"): SpecialKey.PAGE_UP,
    ord("6"): SpecialKey.PAGE_DOWN,
    ord("7"): SpecialKey.HOME,
    ord("8"): SpecialKey.END,
}
SS3_LETTERS: Dict[int, SpecialKey] = {
    ord("H"): SpecialKey.HOME,
    ord("F"): SpecialKey.END,
}


class ByteSource(Protocol):
    """Anything that yields single bytes, or ``None`` when a read times out."""

    def read_byte(self) -> Optional[int]:
        ...


class FileDescriptorSource:
    """Reads one byte at a time from a raw-mode terminal descriptor.

    With ``VMIN=0``/``VTIME=1`` an empty read means the 100ms timer expired.
    """

    def __init__(
        self, fd: int, *, reader: Callable[[int, int], bytes] = os.read
    ) -> None:
        self.fd = fd
        self._reader = reader

    def read_byte(self) -> Optional[int]:
        try:
            chunk = self._reader(self.fd, 1)
        except BlockingIOError:
            return None
        except InterruptedError:
            return None
        except OSError as exc:
            if exc.errno == errno.EAGAIN:
                return None
            raise TerminalError("read", exc) from exc
        if not chunk:
            return None
        return chunk[0]


class InputDecoder:
    """Reassembles escape sequences into :class:`KeyEvent` objects.

    Anything that does not form a known sequence decodes to a bare ESC; the
    bytes already consumed by the failed match are dropped.
    """

    def __init__(self, source: ByteSource) -> None:
        self.source = source

    def poll_key(self) -> Optional[KeyEvent]:
        """Return the next key, or ``None`` if the read timed out empty."""

        byte = self.source.read_byte()
        if byte is None:
            return None
        if byte != ESC:
            return KeyEvent.from_byte(byte)
        return self._decode_escape()

    def read_key(self) -> KeyEvent:
        """Block until a key arrives, retrying across read timeouts."""

        while True:
            key = self.poll_key()
            if key is not None:
                return key

    def _decode_escape(self) -> KeyEvent:
        bare = KeyEvent.from_byte(ESC)
        first = self.source.read_byte()
        if first is None:
            return bare
        second = self.source.read_byte()
        if second is None:
            return bare

        if first == ord("["):
            if ord("0") <= second <= ord("9"):
                third = self.source.read_byte()
                if third is None or third != ord("~"):
                    return bare
                return _special_or(CSI_DIGITS.get(second), bare)
            return _special_or(CSI_LETTERS.get(second), bare)
        if first == ord("O"):
            return _special_or(SS3_LETTERS.get(second), bare)
        return bare


def _special_or(key: Optional[SpecialKey], fallback: KeyEvent) -> KeyEvent:
    if key is None:
        return fallback
    return KeyEvent.special(key)


__all__ = ["InputDecoder", "ByteSource", "FileDescriptorSource"]
