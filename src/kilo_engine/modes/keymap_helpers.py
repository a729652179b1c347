"""Lookup of the keymap services a ModeManager publishes in the context."""

from __future__ import annotations

from kilo_engine.keymaps import KeymapResolver

from .base_mode import ModeContext


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if isinstance(resolver, KeymapResolver):
        return resolver
    raise RuntimeError(
        "No keymap resolver in the mode context; build modes through a ModeManager"
    )


__all__ = ["require_keymap_resolver"]
