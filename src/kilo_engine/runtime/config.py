"""Editor-wide constants and environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "KILO_"

EDITOR_NAME = "Kilo"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables shared by the buffer, compositor, and edit engine."""

    tab_stop: int = 4
    quit_times: int = 3
    message_timeout: float = 5.0
    status_name_width: int = 20
    reserved_rows: int = 2

    def __post_init__(self) -> None:
        if self.tab_stop <= 0:
            raise ValueError("tab_stop must be positive")
        if self.quit_times < 0:
            raise ValueError("quit_times cannot be negative")

    @classmethod
    def from_env(cls, *, base: Optional["EditorConfig"] = None) -> "EditorConfig":
        defaults = base or cls()
        return cls(
            tab_stop=_env_int("TAB_STOP", defaults.tab_stop),
            quit_times=_env_int("QUIT_TIMES", defaults.quit_times),
            message_timeout=_env_float("MESSAGE_TIMEOUT", defaults.message_timeout),
            status_name_width=defaults.status_name_width,
            reserved_rows=defaults.reserved_rows,
        )


__all__ = ["EditorConfig", "EDITOR_NAME"]
