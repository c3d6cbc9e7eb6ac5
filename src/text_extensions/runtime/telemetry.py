"""Logging and profiling for line-set commands, on top of telelog.

Log output is described by :class:`LogSettings`, read from
``TEXT_EXTENSIONS_*`` environment variables or taken from a named preset,
and turned into a ``telelog.Config`` on first use. Commands log through
:func:`record_event` and wrap their work in :func:`span`.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TEXT_EXTENSIONS_"
_TRUTHY = {"1", "true", "yes", "on"}


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class LogSettings:
    logger: str = "text_extensions"
    level: str = "INFO"
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LogSettings":
        preset = _env("LOG_PRESET")
        if preset:
            return preset_settings(preset)
        return cls(
            logger=_env("LOGGER") or cls.logger,
            level=(_env("LOG_LEVEL") or cls.level).upper(),
            console=not _env_flag("DISABLE_CONSOLE"),
            color=not _env_flag("NO_COLOR"),
            json=_env_flag("LOG_JSON"),
            log_file=_env("LOG_FILE") or None,
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        config.with_profiling(True)
        return config


_PRESETS: Dict[str, LogSettings] = {
    "development": LogSettings(level="DEBUG"),
    "production": LogSettings(
        console=False, log_file="text_extensions.log", json=True
    ),
    "quiet": LogSettings(level="ERROR", console=False),
}


def preset_settings(name: str) -> LogSettings:
    """Settings for ``development``, ``production`` or ``quiet``."""

    settings = _PRESETS.get(name.strip().lower())
    if settings is None:
        raise ValueError(f"Unknown log preset {name!r}")
    log_file = _env("LOG_FILE")
    if log_file and settings.log_file:
        settings = replace(settings, log_file=log_file)
    return settings


_default_logger = LogSettings.logger
_config: Optional[Any] = None
_loggers: Dict[str, Any] = {}


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active configuration and drop cached loggers.

    ``config`` adopts a ready ``telelog.Config``; ``preset`` names one of the
    built-in presets. With neither, settings are re-read from the environment.
    """

    global _default_logger, _config
    if config is not None and preset:
        raise ValueError("configure() takes either config or preset")
    settings = preset_settings(preset) if preset else LogSettings.from_env()
    if config is None:
        config = settings.to_config()
    else:
        config.with_profiling(True)
    _default_logger = settings.logger
    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    if _config is None:
        configure()
    key = name or _default_logger
    logger = _loggers.get(key)
    if logger is None:
        logger = _loggers[key] = tl.Logger.with_config(key, _config)
    return logger


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _log(logger: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    level = level.lower()
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        pairs: List[Tuple[str, str]] = [(k, _text(v)) for k, v in fields.items()]
        structured(message, pairs)
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level {level!r}")
    plain(f"{message} {fields}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    fields = {"event": name, **(data or {})}
    _log(get_logger(logger_name), level, f"event::{name}", fields)


@dataclass
class SpanHandle:
    """What a ``span`` block sees: its logger, names and metadata."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        fields: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            fields["component"] = self.component_name
        fields["reason"] = reason
        _log(self.logger, "error", "span::fail", fields)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``; exceptions are logged, then re-raised.

    ``metadata`` is attached as logger context while the block runs.
    ``component`` tracks the block as a component, under ``name`` when
    ``True``.
    """

    logger = get_logger(logger_name)
    component_name = component if isinstance(component, str) else None
    if component is True:
        component_name = name
    handle = SpanHandle(
        logger=logger,
        span_name=name,
        component_name=component_name,
        metadata={key: _text(value) for key, value in (metadata or {}).items()},
    )
    context = dict(handle.metadata)
    with ExitStack() as stack:
        for key, value in context.items():
            logger.add_context(key, value)
            stack.callback(logger.remove_context, key)
        if handle.component_name:
            stack.enter_context(logger.track_component(handle.component_name))
        stack.enter_context(logger.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "LogSettings",
    "SpanHandle",
    "configure",
    "get_logger",
    "preset_settings",
    "record_event",
    "span",
]
