"""Mode protocol: what a mode receives and what it hands back."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from kilo_engine.session import EditorSession
from kilo_engine.terminal.keys import KeyEvent

Listener = Callable[[object], None]


@dataclass(slots=True)
class ModeResult:
    """Outcome of one key.

    ``status`` is a short machine-readable tag (``"insert"``, ``"quit"``,
    ``"quit_pending"``, ``"saved"``...) the host and tests can branch on.
    """

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    session: EditorSession
    bus: "ModeBus"
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Named events from modes and actions to whoever hosts the editor."""

    def __init__(self) -> None:
        self._listeners: Dict[str, list[Listener]] = {}

    def subscribe(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def emit(self, event: str, payload: object | None = None) -> None:
        for listener in tuple(self._listeners.get(event, ())):
            listener(payload)


class Mode:
    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def session(self) -> EditorSession:
        return self.context.session

    def on_enter(self, previous: Optional[str]) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(self, key: KeyEvent) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = ["ModeResult", "ModeContext", "ModeBus", "Mode"]
