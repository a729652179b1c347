"""Keymap action handlers wrapping the edit engine."""

from .core import noop_action, session_action
from .edit import backspace, delete, newline
from .file import quit_editor, save_file
from .motion import (
    move_down,
    move_end,
    move_home,
    move_left,
    move_right,
    move_up,
    page_down,
    page_up,
)
from .search import start_search

__all__ = [
    "noop_action",
    "session_action",
    "newline",
    "backspace",
    "delete",
    "save_file",
    "quit_editor",
    "start_search",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_home",
    "move_end",
    "page_up",
    "page_down",
]
