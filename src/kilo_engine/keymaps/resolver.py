"""Turns the key tokens typed in a mode into the binding that owns them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Sequence

from kilo_engine.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry

Status = Literal["match", "miss"]
_Table = Dict[str, Binding]


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Status
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Looks keys up in one table per mode, rebuilt when the registry revision moves.

    The registry refuses two bindings on the same keys in a mode, so a key
    signature names at most one binding.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._tables: Dict[str, tuple[int, _Table]] = {}

    def resolve(self, mode: str, tokens: Sequence[str]) -> ResolutionResult:
        signature = " ".join(tokens)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "keys": signature},
        ) as handle:
            binding = self._table(mode).get(signature)
            if binding is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")
            handle.add_metadata("status", "match")
            action = self._registry.get_action(binding.action_id)
            return ResolutionResult(
                status="match", match=ResolutionMatch(binding=binding, action=action)
            )

    def _table(self, mode: str) -> _Table:
        revision = self._registry.revision()
        cached = self._tables.get(mode)
        if cached is not None and cached[0] == revision:
            return cached[1]
        table = {binding.key_signature: binding for binding in self._registry.iter_bindings(mode)}
        self._tables[mode] = (revision, table)
        return table


__all__ = ["KeymapResolver", "ResolutionResult", "ResolutionMatch"]
