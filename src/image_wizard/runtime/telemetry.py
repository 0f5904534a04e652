"""Wizard logging on top of telelog.

Settings come from ``IMAGE_WIZARD_*`` environment variables, optionally
overridden by the command line, and are turned into one shared telelog
configuration. Console output stays off unless asked for: the wizard owns
the whole terminal while it runs, so logs normally go to a file.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "IMAGE_WIZARD_"
ROOT_LOGGER = "image_wizard"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _flag(raw: Optional[str]) -> bool:
    return raw is not None and raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class LogSettings:
    """Everything the wizard lets users tune about logging."""

    level: str = "INFO"
    log_file: Optional[str] = None
    console: bool = False
    color: bool = True
    json: bool = False
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "LogSettings":
        def get(name: str) -> Optional[str]:
            return environ.get(f"{ENV_PREFIX}{name}")

        buffer_size = None
        if _flag(get("LOG_BUFFERED")):
            buffer_size = int(get("LOG_BUFFER_SIZE") or "2048")
        return cls(
            level=(get("LOG_LEVEL") or "INFO").upper(),
            log_file=get("LOG_FILE") or None,
            console=_flag(get("LOG_CONSOLE")),
            color=not _flag(get("NO_COLOR")),
            json=_flag(get("LOG_JSON")),
            buffer_size=buffer_size,
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        # Spans rely on profiling being on.
        config.with_profiling(True)
        return config


def configure(settings: Optional[LogSettings] = None) -> None:
    """Rebuild the shared telelog config; ``None`` rereads the environment."""

    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = (settings or LogSettings.from_env()).to_config()
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` sharing the active config."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = LogSettings.from_env().to_config()
    logger_name = name or ROOT_LOGGER
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _log(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    # telelog exposes ``info_with(msg, pairs)``; fall back to plain ``info``.
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` as key/value pairs."""

    _log(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; collects metadata reported on failure."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _log(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracked as a telelog component.

    ``metadata`` is pushed as logger context for the duration of the block.
    ``component=True`` reuses ``name`` as the component id. Exceptions are
    logged through :meth:`SpanHandle.fail` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=cast(Optional[str], component_name),
        metadata=dict(context),
    )

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "LOG_LEVELS",
    "LogSettings",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
