"""Editor telemetry on top of telelog.

The editor paints the whole terminal, so nothing is logged to the console
unless ``KILO_LOG_CONSOLE`` asks for it; a log file is the normal sink.

``configure(...)`` -- rebuild the telelog configuration (env, settings, or a raw config)
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit an ``event::<name>`` line with key/value data
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "KILO_"
ROOT_LOGGER = "kilo_engine"
TRACE_LOG_FILE = "kilo-trace.log"

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _getenv(name: str) -> Optional[str]:
    return os.getenv(ENV_PREFIX + name)


def _flag(name: str) -> bool:
    return (_getenv(name) or "").lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """What to log and where.

    ``trace`` is the profiling setup used when chasing slow refreshes: every
    span is timed at DEBUG level and written as JSON.
    """

    level: str = "INFO"
    log_file: Optional[str] = None
    console: bool = False
    json: bool = False
    trace: bool = False
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        buffered = _getenv("LOG_BUFFER_SIZE")
        return cls(
            level=(_getenv("LOG_LEVEL") or "INFO").upper(),
            log_file=_getenv("LOG_FILE") or None,
            console=_flag("LOG_CONSOLE"),
            json=_flag("LOG_JSON"),
            trace=_flag("TRACE"),
            buffer_size=int(buffered) if buffered and buffered.isdigit() else None,
        )


def build_config(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    if settings.trace:
        config.with_min_level("DEBUG")
        config.with_profiling(True)
        config.with_json_format(True)
        config.with_buffering(True)
        config.with_file_output(settings.log_file or TRACE_LOG_FILE)
    else:
        config.with_min_level(settings.level)
        config.with_json_format(settings.json)
        if settings.log_file:
            config.with_file_output(settings.log_file)
        if settings.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(settings.buffer_size)

    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(not _flag("NO_COLOR"))
    return config


def configure(
    settings: Optional[TelemetrySettings] = None, *, config: Optional[Any] = None
) -> None:
    """Swap the active configuration; cached loggers are rebuilt lazily.

    Pass either ``settings`` or a ready ``tl.Config``; with neither, the
    ``KILO_*`` environment decides.
    """

    global _config
    if settings is not None and config is not None:
        raise ValueError("Provide either `settings` or `config`, not both.")
    if config is None:
        config = build_config(settings or TelemetrySettings.from_env())
    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active configuration."""

    global _config
    if _config is None:
        _config = build_config(TelemetrySettings.from_env())
    key = name or ROOT_LOGGER
    logger = _loggers.get(key)
    if logger is None:
        logger = _loggers[key] = tl.Logger.with_config(key, _config)
    return logger


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


def _level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    """Prefer ``<level>_with`` (structured pairs); fall back to ``<level>``."""

    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: Any, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, _pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str | Any = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach results before the block closes."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block under ``name``.

    ``component=True`` tracks the block as a component called ``name``; a
    string picks another component name. ``metadata`` is pushed as logger
    context while the block runs.
    """

    log = get_logger(logger_name)
    if component is True:
        component_name: Optional[str] = name
    elif isinstance(component, str):
        component_name = component
    else:
        component_name = None

    context = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(
        logger=log, span_name=name, component_name=component_name, metadata=dict(context)
    )
    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


configure()

__all__ = [
    "TelemetrySettings",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
