"""Telemetry services built on the standard ``logging`` package.

The rest of the package only touches four names:

``configure(...)`` -- pick a :class:`TelemetryConfig` or a named preset
``get_logger(name)`` -- fetch a logger below the package logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- time a block and optionally tag it with a component
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

ENV_PREFIX = "LINE_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "line_engine")

CONSOLE_FORMAT = "%(levelname)-8s - %(name)-12s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)-15s - %(message)s"

_INSTALLED_HANDLERS: List[logging.Handler] = []
_ACTIVE_CONFIG: Optional["TelemetryConfig"] = None


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


@dataclass(frozen=True)
class TelemetryConfig:
    """Where log records go and how verbose they are."""

    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 2 * 1024 * 1024
    backup_count: int = 3

    @classmethod
    def from_env(cls) -> "TelemetryConfig":
        return cls(
            level=(_env("LOG_LEVEL") or "WARNING").upper(),
            console=not _env_flag("DISABLE_CONSOLE", False),
            log_file=_env("LOG_FILE") or None,
        )


def _build_preset_config(preset: str) -> TelemetryConfig:
    key = preset.lower()
    if key == "development":
        return TelemetryConfig(level="DEBUG", console=True, log_file=_env("LOG_FILE"))
    if key == "production":
        log_file = _env("LOG_FILE") or "line_engine.log"
        return TelemetryConfig(level="INFO", console=False, log_file=log_file)
    if key == "quiet":
        return TelemetryConfig(level="ERROR", console=False)
    raise ValueError(f"Unknown preset '{preset}'.")


def _install(config: TelemetryConfig) -> None:
    root = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in _INSTALLED_HANDLERS:
        root.removeHandler(handler)
        handler.close()
    _INSTALLED_HANDLERS.clear()

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unsupported log level '{config.level}'.")
    root.setLevel(level)

    if config.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        _INSTALLED_HANDLERS.append(console)
    if config.log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            config.log_file,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        _INSTALLED_HANDLERS.append(file_handler)
    if not _INSTALLED_HANDLERS:
        _INSTALLED_HANDLERS.append(logging.NullHandler())

    for handler in _INSTALLED_HANDLERS:
        root.addHandler(handler)


def configure(
    *, config: Optional[TelemetryConfig] = None, preset: Optional[str] = None
) -> None:
    """Replace the active logging configuration.

    ``preset`` is one of ``"development"``, ``"production"`` or ``"quiet"``.
    Passing neither argument rebuilds the configuration from the
    ``LINE_ENGINE_*`` environment variables.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = TelemetryConfig.from_env()

    _install(config)
    _ACTIVE_CONFIG = config


def active_config() -> Optional[TelemetryConfig]:
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger below the package logger so its handlers apply."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name != DEFAULT_LOGGER_NAME and not logger_name.startswith(
        f"{DEFAULT_LOGGER_NAME}."
    ):
        logger_name = f"{DEFAULT_LOGGER_NAME}.{logger_name}"
    return logging.getLogger(logger_name)


def _level_number(level: str) -> int:
    number = logging.getLevelName(str(level).upper())
    if not isinstance(number, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    return number


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` record."""

    log = get_logger(logger_name)
    levelno = _level_number(level)
    if log.isEnabledFor(levelno):
        log.log(levelno, "event::%s %s", name, _format_pairs(data or {}))


@dataclass
class SpanHandle:
    """Handle returned from ``span`` for optional metadata updates."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def payload(self, **extra: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            data["component"] = self.component_name
        data.update({key: _stringify(val) for key, val in extra.items()})
        return data

    def fail(self, reason: str) -> None:
        self.logger.error("span::fail %s", _format_pairs(self.payload(reason=reason)))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and log it at DEBUG when it finishes.

    ``component=True`` reuses ``name`` as the component id, a string names
    the component explicitly. Metadata added through the handle while the
    block runs is included in the closing record.
    """

    log = get_logger(logger_name)
    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        if log.isEnabledFor(logging.DEBUG):
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            pairs = _format_pairs(handle.payload(elapsed_ms=f"{elapsed_ms:.3f}"))
            log.debug("span::end %s", pairs)


configure()
logger = get_logger()

__all__ = [
    "SpanHandle",
    "TelemetryConfig",
    "active_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
