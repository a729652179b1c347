"""Keymap registry: the actions the editor knows and the keys bound to them."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Tuple

from kilo_engine.runtime.telemetry import span

from .models import ActionRef, Binding

_Slot = Tuple[str, str]


class KeymapConflictError(RuntimeError):
    """A binding tried to take keys another binding already owns in that mode."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        owners = ", ".join(conflict.id for conflict in self.conflicts)
        super().__init__(
            f"Keys '{binding.key_signature}' in mode '{binding.mode}' for "
            f"'{binding.id}' are already bound by {owners}"
        )


class KeymapRegistry:
    """Stores actions by id and bindings by id and by (mode, keys) slot.

    Every change to the bindings bumps :meth:`revision` so resolvers know to
    rebuild their lookup tables.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._slots: Dict[_Slot, set[str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        action = self._actions.get(action_id)
        if action is None:
            raise KeyError(f"Action '{action_id}' is not registered")
        return action

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if action.id in self._actions and not replace:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Add ``binding``; with ``replace`` it evicts whatever holds its slot or id."""

        with span(
            "keymaps::bind",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "keys": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflicts = self.detect_conflicts(binding)
            if not replace:
                if conflicts:
                    raise KeymapConflictError(binding, conflicts)
                if binding.id in self._bindings:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
            else:
                evicted = [*conflicts]
                if binding.id in self._bindings:
                    evicted.append(self._bindings[binding.id])
                for old in evicted:
                    self._remove(old)
                if evicted:
                    handle.add_metadata("replaced", ",".join(old.id for old in evicted))

            self._bindings[binding.id] = binding
            self._slots.setdefault(self._slot(binding), set()).add(binding.id)
            self._revision += 1
            return binding

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for slot in sorted(self._slots):
            if slot[0] == mode:
                for binding_id in sorted(self._slots[slot]):
                    yield self._bindings[binding_id]

    def bindings_for_action(self, action_id: str, *, mode: Optional[str] = None) -> list[Binding]:
        """Bindings that trigger ``action_id``, in registration order."""

        return [
            binding
            for binding in self._bindings.values()
            if binding.action_id == action_id and (mode is None or binding.mode == mode)
        ]

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        owners = self._slots.get(self._slot(binding), set())
        return [self._bindings[owner] for owner in sorted(owners) if owner != binding.id]

    @staticmethod
    def _slot(binding: Binding) -> _Slot:
        return (binding.mode, binding.key_signature)

    def _remove(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        slot = self._slot(binding)
        owners = self._slots.get(slot)
        if owners is None:
            return
        owners.discard(binding.id)
        if not owners:
            del self._slots[slot]


__all__ = ["KeymapRegistry", "KeymapConflictError"]
