"""Cursor type shared by the buffer, viewport, and edit engine."""

from __future__ import annotations

from typing import Tuple

Cursor = Tuple[int, int]  # (row, raw column)
