"""Routes keys to the active mode and performs the mode switches they request."""

from __future__ import annotations

from typing import Dict, Optional, Type

from kilo_engine.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from kilo_engine.runtime import telemetry
from kilo_engine.terminal.keys import KeyEvent

from .base_mode import Mode, ModeContext, ModeResult


class ModeManager:
    """Holds every registered mode; exactly one of them receives keys.

    The first mode registered starts active. A ``ModeResult.switch_to`` names
    the mode that gets the next key.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name="kilo_engine.keymaps")
            if load_defaults:
                load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            keymap_registry, logger_name="kilo_engine.keymaps"
        )
        context.extras.setdefault("keymap_registry", self.keymap_registry)
        context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[Mode] = None

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._active

    def register_mode(self, mode_cls: Type[Mode], /, **mode_kwargs: object) -> Mode:
        mode = mode_cls(self.context, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        target = self._modes.get(name)
        if target is None:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self._active
        if previous is target:
            return
        if previous is not None:
            previous.on_exit(name)
        self._active = target
        target.on_enter(previous.name if previous is not None else None)
        telemetry.record_event(
            "mode.switch",
            level="debug",
            data={"from": previous.name if previous else "", "to": name},
        )

    def handle_key(self, key: KeyEvent) -> ModeResult:
        mode = self._active
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            f"mode::{mode.name}",
            component=True,
            metadata={"key": key.token},
        ) as handle:
            result = mode.handle_key(key)
            handle.add_metadata("status", result.status)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager"]
