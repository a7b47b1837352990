"""Telemetry services built on the standard ``logging`` package.

The rest of the editor only touches four names:

``configure(...)`` -- pick a preset or rebuild from the environment
``get_logger(name)`` -- fetch a logger under the ``bed`` hierarchy
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- time a block and report failures inside it
"""

from __future__ import annotations

import json
import logging
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

ENV_PREFIX = "BED_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "bed")
PRESETS = ("development", "production")

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_ACTIVE_HANDLERS: list[logging.Handler] = []


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_stringify(value)}" for key, value in data.items())


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with event payloads merged in."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "bed_data", {}))
        return json.dumps(payload, default=str)


@dataclass
class TelemetryConfig:
    level: str = "WARNING"
    console: bool = True
    json_format: bool = False
    log_file: Optional[str] = None

    @classmethod
    def for_preset(cls, preset: str) -> "TelemetryConfig":
        key = preset.lower()
        if key == "development":
            return cls(level="DEBUG", console=True)
        if key == "production":
            return cls(
                level="INFO",
                console=False,
                json_format=True,
                log_file=_env("LOG_FILE") or "bed.log",
            )
        raise ValueError(f"Unknown preset '{preset}'.")

    @classmethod
    def from_env(cls) -> "TelemetryConfig":
        # The REPL shares stderr with its diagnostics, so stay quiet by default.
        return cls(
            level=(_env("LOG_LEVEL") or "WARNING").upper(),
            console=not _env_flag("DISABLE_CONSOLE", False),
            json_format=_env_flag("LOG_JSON", False),
            log_file=_env("LOG_FILE"),
        )


def _make_handlers(config: TelemetryConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if config.console:
        handlers.append(logging.StreamHandler())
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    formatter: logging.Formatter = (
        JsonFormatter() if config.json_format else logging.Formatter(_TEXT_FORMAT)
    )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *, config: Optional[TelemetryConfig] = None, preset: Optional[str] = None
) -> TelemetryConfig:
    """Install handlers on the ``bed`` logger and return the config used.

    ``config`` and ``preset`` are mutually exclusive; with neither, the
    configuration is rebuilt from ``BED_*`` environment variables.
    """

    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = TelemetryConfig.for_preset(preset)
    elif config is None:
        config = TelemetryConfig.from_env()

    root = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in _ACTIVE_HANDLERS:
        root.removeHandler(handler)
        handler.close()
    _ACTIVE_HANDLERS[:] = _make_handlers(config)
    for handler in _ACTIVE_HANDLERS:
        root.addHandler(handler)
    root.setLevel(config.level)
    root.propagate = not _ACTIVE_HANDLERS
    return config


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for ``name``; dotted names nest under ``bed``."""

    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


def _resolve_level(level: Any) -> int:
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    return value


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    log = get_logger(logger_name)
    numeric = _resolve_level(level)
    if not log.isEnabledFor(numeric):
        return
    payload = {"event": name, **(data or {})}
    log.log(
        numeric,
        "event::%s %s",
        name,
        _format_pairs(payload),
        extra={"bed_data": payload},
    )


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for failure reports."""

    logger: logging.Logger
    span_name: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, "reason": reason, **self.metadata}
        self.logger.error(
            "span::fail %s", _format_pairs(payload), extra={"bed_data": payload}
        )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a block of work and log its duration at DEBUG.

    ``component=True`` tags the block with a component named after the
    span; a string names the component explicitly. ``metadata`` is carried
    into the timing record and any failure report.
    """

    log = get_logger(logger_name)
    payload = {key: _stringify(value) for key, value in (metadata or {}).items()}
    if component is True:
        payload["component"] = name
    elif isinstance(component, str):
        payload["component"] = component

    handle = SpanHandle(logger=log, span_name=name, metadata=payload)
    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        if log.isEnabledFor(logging.DEBUG):
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            record = {"span": name, "elapsed_ms": round(elapsed_ms, 3), **payload}
            log.debug(
                "span::%s %s", name, _format_pairs(record), extra={"bed_data": record}
            )


__all__ = [
    "PRESETS",
    "SpanHandle",
    "TelemetryConfig",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
