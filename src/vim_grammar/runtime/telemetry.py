"""Logging and profiling for keystroke sessions, backed by telelog.

Settings come from ``VIM_GRAMMAR_*`` environment variables unless a named
preset or explicit ``TelemetrySettings`` are passed to ``configure``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "VIM_GRAMMAR_"
DEFAULT_LOGGER_NAME = "vim_grammar"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(f"{ENV_PREFIX}{name}", "").strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Everything needed to build a ``telelog.Config``."""

    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: Optional[str] = None
    buffer_size: Optional[int] = None
    profiling: bool = False

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "TelemetrySettings":
        env = os.environ if environ is None else environ
        buffer_size = None
        if _env_flag(env, "LOG_BUFFERED"):
            buffer_size = int(env.get(f"{ENV_PREFIX}LOG_BUFFER_SIZE") or "2048")
        return cls(
            level=(env.get(f"{ENV_PREFIX}LOG_LEVEL") or "INFO").upper(),
            console=not _env_flag(env, "DISABLE_CONSOLE"),
            colored=not _env_flag(env, "NO_COLOR"),
            json=_env_flag(env, "LOG_JSON"),
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE") or None,
            buffer_size=buffer_size,
            profiling=_env_flag(env, "PROFILE"),
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(self.profiling)
        return config


PRESETS: Mapping[str, TelemetrySettings] = MappingProxyType(
    {
        "development": TelemetrySettings(level="DEBUG"),
        "production": TelemetrySettings(
            level="WARNING",
            console=False,
            log_file="vim_grammar.log",
            buffer_size=2048,
        ),
        "performance": TelemetrySettings(
            level="DEBUG",
            console=False,
            json=True,
            log_file="vim_grammar-performance.log",
            buffer_size=2048,
            profiling=True,
        ),
    }
)

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def resolve_preset(name: str) -> TelemetrySettings:
    settings = PRESETS.get(name.strip().lower())
    if settings is None:
        raise ValueError(
            f"Unknown preset '{name}', expected one of {', '.join(PRESETS)}."
        )
    log_file = os.environ.get(f"{ENV_PREFIX}LOG_FILE")
    if log_file and settings.log_file:
        settings = replace(settings, log_file=log_file)
    return settings


def configure(
    *, settings: Optional[TelemetrySettings] = None, preset: Optional[str] = None
) -> TelemetrySettings:
    """Rebuild the telelog config and drop cached loggers.

    With neither argument the settings are read from the environment.
    Returns the settings that were applied.
    """

    global _config
    if settings is not None and preset:
        raise ValueError("Provide either `settings` or `preset`, not both.")
    if preset:
        settings = resolve_preset(preset)
    elif settings is None:
        settings = TelemetrySettings.from_env()

    _config = settings.to_config()
    _loggers.clear()
    return settings


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    global _config
    logger_name = name or os.environ.get(f"{ENV_PREFIX}LOGGER", DEFAULT_LOGGER_NAME)
    if logger_name not in _loggers:
        if _config is None:
            _config = TelemetrySettings.from_env().to_config()
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _loggers[logger_name]


def _emit(log: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    pairs = [(str(key), str(value)) for key, value in fields.items()]
    with_data = getattr(log, f"{level}_with", None)
    if with_data is not None:
        with_data(message, pairs)
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(
        get_logger(logger_name),
        level.lower(),
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[None]:
    """Profile a block; ``metadata`` is logger context while it runs.

    A failing block logs ``span::fail`` at error level and re-raises.
    """

    log = get_logger(logger_name)
    context = {key: str(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)
    try:
        with log.profile(name):
            yield
    except Exception as exc:
        _emit(log, "error", "span::fail", {"span": name, "reason": exc, **context})
        raise
    finally:
        for key in context:
            log.remove_context(key)


configure()

__all__ = [
    "PRESETS",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "resolve_preset",
    "span",
]
