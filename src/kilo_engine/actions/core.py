"""Core action plumbing shared by every bound verb."""

from __future__ import annotations

from functools import wraps
from typing import Callable

from kilo_engine.modes.base_mode import ModeContext, ModeResult
from kilo_engine.session import EditorSession

SessionOperation = Callable[[EditorSession], None]


def session_action(operation: SessionOperation) -> Callable[[ModeContext, object], ModeResult]:
    """Wrap a plain session operation as a keymap action handler."""

    @wraps(operation)
    def handler(context: ModeContext, match: object) -> ModeResult:
        del match
        operation(context.session)
        return ModeResult(consumed=True, message=operation.__name__)

    return handler


def noop_action(context: ModeContext, match: object) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


__all__ = ["session_action", "noop_action", "SessionOperation"]
