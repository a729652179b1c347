"""Viewport, ANSI output vocabulary, and frame composition."""

from .viewport import Viewport, ViewportSnapshot
from .compositor import FrameInfo, StatusMessage, compose_frame

__all__ = [
    "Viewport",
    "ViewportSnapshot",
    "FrameInfo",
    "StatusMessage",
    "compose_frame",
]
