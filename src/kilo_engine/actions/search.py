"""Entry point into the incremental search prompt."""

from __future__ import annotations

from kilo_engine.modes.base_mode import ModeContext, ModeResult


def start_search(context: ModeContext, match: object) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="search", status="search_start")


__all__ = ["start_search"]
