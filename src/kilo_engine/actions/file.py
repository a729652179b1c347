"""Save and quit verbs."""

from __future__ import annotations

from kilo_engine.modes.base_mode import ModeContext, ModeResult


def save_file(context: ModeContext, match: object) -> ModeResult:
    del match
    session = context.session
    if not session.filename:
        return ModeResult(consumed=True, switch_to="save_as", status="save_prompt")
    saved = session.save()
    context.bus.emit("file.save", {"path": session.filename, "ok": saved})
    return ModeResult(consumed=True, status="saved" if saved else "save_failed")


def quit_editor(context: ModeContext, match: object) -> ModeResult:
    """Quit, or count down the confirmations while there are unsaved changes."""

    del match
    session = context.session
    if session.dirty and session.quit_remaining > 0:
        remaining = session.quit_remaining
        noun = "time" if remaining == 1 else "times"
        session.set_message(
            "WARNING!!! File has unsaved changes. "
            f"Press Ctrl-Q {remaining} more {noun} to quit."
        )
        session.quit_remaining -= 1
        return ModeResult(consumed=True, status="quit_pending")
    context.bus.emit("editor.quit", {"dirty": session.document.dirty})
    return ModeResult(consumed=True, status="quit")


__all__ = ["save_file", "quit_editor"]
