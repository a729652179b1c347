"""Editing verbs."""

from __future__ import annotations

from kilo_engine import editing

from .core import session_action

newline = session_action(editing.insert_newline)
backspace = session_action(editing.delete_backward)
delete = session_action(editing.delete_forward)

__all__ = ["newline", "backspace", "delete"]
