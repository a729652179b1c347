"""Cursor motion verbs."""

from __future__ import annotations

from kilo_engine import editing

from .core import session_action

move_left = session_action(editing.cursor_left)
move_right = session_action(editing.cursor_right)
move_up = session_action(editing.cursor_up)
move_down = session_action(editing.cursor_down)
move_home = session_action(editing.cursor_home)
move_end = session_action(editing.cursor_end)
page_up = session_action(editing.cursor_page_up)
page_down = session_action(editing.cursor_page_down)

__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_home",
    "move_end",
    "page_up",
    "page_down",
]
