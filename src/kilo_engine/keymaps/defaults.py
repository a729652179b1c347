"""Built-in bindings: the editor's interactive key surface."""

from __future__ import annotations

from typing import Iterable

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

EDIT_MODE = "edit"


def default_actions() -> tuple[ActionRef, ...]:
    # kilo_engine.actions imports kilo_engine.modes, which imports this package.
    from kilo_engine.actions import core, edit, file, motion, search

    return (
        ActionRef(id="core.noop", handler=core.noop_action, description="Do nothing"),
        ActionRef(id="file.save", handler=file.save_file, description="Save to disk"),
        ActionRef(id="file.quit", handler=file.quit_editor, description="Quit the editor"),
        ActionRef(id="search.start", handler=search.start_search, description="Find text"),
        ActionRef(id="edit.newline", handler=edit.newline, description="Split line"),
        ActionRef(id="edit.backspace", handler=edit.backspace, description="Delete backward"),
        ActionRef(id="edit.delete", handler=edit.delete, description="Delete forward"),
        ActionRef(id="motion.left", handler=motion.move_left, description="Cursor left"),
        ActionRef(id="motion.right", handler=motion.move_right, description="Cursor right"),
        ActionRef(id="motion.up", handler=motion.move_up, description="Cursor up"),
        ActionRef(id="motion.down", handler=motion.move_down, description="Cursor down"),
        ActionRef(id="motion.home", handler=motion.move_home, description="Start of line"),
        ActionRef(id="motion.end", handler=motion.move_end, description="End of line"),
        ActionRef(id="motion.page_up", handler=motion.page_up, description="Top of screen"),
        ActionRef(id="motion.page_down", handler=motion.page_down, description="Bottom of screen"),
    )


def _edit_binding(name: str, key: str, action_id: str, description: str = "") -> Binding:
    return Binding(
        id=f"{EDIT_MODE}.{name}",
        mode=EDIT_MODE,
        sequence=KeySequence.from_strings(key),
        action_id=action_id,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _edit_binding("quit", "ctrl+q", "file.quit", "Quit (repeat to discard changes)"),
    _edit_binding("save", "ctrl+s", "file.save", "Save the file"),
    _edit_binding("find", "ctrl+f", "search.start", "Incremental search"),
    _edit_binding("newline", "ENTER", "edit.newline"),
    _edit_binding("backspace", "BACKSPACE", "edit.backspace"),
    _edit_binding("backspace_ctrl_h", "ctrl+h", "edit.backspace"),
    _edit_binding("delete", "DELETE", "edit.delete"),
    _edit_binding("left", "ARROW_LEFT", "motion.left"),
    _edit_binding("right", "ARROW_RIGHT", "motion.right"),
    _edit_binding("up", "ARROW_UP", "motion.up"),
    _edit_binding("down", "ARROW_DOWN", "motion.down"),
    _edit_binding("home", "HOME", "motion.home"),
    _edit_binding("end", "END", "motion.end"),
    _edit_binding("page_up", "PAGE_UP", "motion.page_up"),
    _edit_binding("page_down", "PAGE_DOWN", "motion.page_down"),
    _edit_binding("refresh", "ctrl+l", "core.noop"),
    _edit_binding("escape", "ESC", "core.noop"),
)


HELP_ACTIONS: tuple[tuple[str, str], ...] = (
    ("file.save", "save"),
    ("file.quit", "quit"),
    ("search.start", "find"),
)


def key_label(token: str) -> str:
    """Human form of a binding token: ``ctrl+s`` becomes ``Ctrl-S``."""

    *modifiers, key = token.split("+") if len(token) > 1 else [token]
    parts = [modifier.capitalize() for modifier in modifiers]
    parts.append(key.upper() if len(key) == 1 else key.replace("_", " ").title())
    return "-".join(parts)


def help_message(registry: KeymapRegistry, *, mode: str = EDIT_MODE) -> str:
    """One-line key summary for the message bar, built from the live bindings."""

    entries = []
    for action_id, verb in HELP_ACTIONS:
        bindings = registry.bindings_for_action(action_id, mode=mode)
        if bindings:
            label = " ".join(key_label(token) for token in bindings[0].sequence.tokens)
            entries.append(f"{label} = {verb}")
    return "HELP: " + " | ".join(entries)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register built-in actions and bindings, then any ``extra_bindings``.

    Extra bindings override defaults that share their key signature.
    """

    for action in default_actions():
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = [
    "load_default_keymaps",
    "default_actions",
    "help_message",
    "key_label",
    "DEFAULT_BINDINGS",
    "EDIT_MODE",
]
