"""telelog wiring for the editing core.

Callers use four entry points: ``configure``, ``get_logger``,
``record_event`` and the ``span`` context manager. Output is described by a
``TelemetrySettings`` value, read from ``DIWAN_*`` environment variables or
taken from one of the named presets.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "DIWAN_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "diwan")
DEFAULT_LOG_PATH = Path.home() / ".cache" / "diwan" / "diwan.log"
TRUTHY = frozenset({"1", "true", "yes", "on"})

LEVEL_ALIASES = {
    "warn": "warning",
    "critical": "error",
}

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def normalize_level(level: Any) -> str:
    """Map ``warn``/``critical`` style names onto telelog level names."""

    name = str(level).strip().lower()
    return LEVEL_ALIASES.get(name, name)


def resolve_log_path(raw: Optional[str] = None) -> Path:
    """Return the log file path, creating its parent directory."""

    path = Path(raw).expanduser() if raw else DEFAULT_LOG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Where log records go and how they look."""

    min_level: str = "info"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: Optional[str] = None
    buffered: bool = False
    buffer_size: int = 2048

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def read(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}")

        def flag(name: str) -> bool:
            return (read(name) or "").lower() in TRUTHY

        return cls(
            min_level=normalize_level(read("LOG_LEVEL") or "info"),
            console=not flag("DISABLE_CONSOLE"),
            colored=not flag("NO_COLOR"),
            json=flag("LOG_JSON"),
            log_file=read("LOG_FILE") or None,
            buffered=flag("LOG_BUFFERED"),
            buffer_size=int(read("LOG_BUFFER_SIZE") or "2048"),
        )


def _development(base: TelemetrySettings) -> TelemetrySettings:
    return replace(base, min_level="debug", console=True, colored=True, json=False)


def _production(base: TelemetrySettings) -> TelemetrySettings:
    return replace(
        base,
        console=False,
        log_file=base.log_file or str(DEFAULT_LOG_PATH),
        buffered=True,
    )


def _performance(base: TelemetrySettings) -> TelemetrySettings:
    return replace(
        base,
        min_level="debug",
        console=False,
        json=True,
        log_file=base.log_file or str(DEFAULT_LOG_PATH.with_name("diwan-performance.log")),
        buffered=True,
    )


PRESETS: Dict[str, Callable[[TelemetrySettings], TelemetrySettings]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
}


def preset_settings(
    name: str, environ: Optional[Mapping[str, str]] = None
) -> TelemetrySettings:
    """Settings for a named preset, layered over the environment."""

    try:
        builder = PRESETS[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown preset '{name}'.") from exc
    return builder(TelemetrySettings.from_env(environ))


def build_config(settings: TelemetrySettings) -> Any:
    """Translate settings into a ``telelog.Config`` with profiling on."""

    config = tl.Config()
    config.with_min_level(settings.min_level.upper())
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    if settings.json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(str(resolve_log_path(settings.log_file)))
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    config.with_profiling(True)
    return config


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[TelemetrySettings] = None,
) -> None:
    """Replace the active configuration and drop cached loggers.

    At most one of ``config`` (a ready ``telelog.Config``), ``preset``
    (``"development"``, ``"production"``, ``"performance"``) and
    ``settings`` may be given. With none, the environment decides.
    """

    global _CONFIG
    if sum(option is not None for option in (config, preset, settings)) > 1:
        raise ValueError("Provide only one of `config`, `preset` or `settings`.")

    if config is not None:
        config.with_profiling(True)
    elif preset is not None:
        config = build_config(preset_settings(preset))
    else:
        config = build_config(settings or TelemetrySettings.from_env())

    _CONFIG = config
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    global _CONFIG
    key = name or DEFAULT_LOGGER_NAME
    if key not in _LOGGERS:
        if _CONFIG is None:
            _CONFIG = build_config(TelemetrySettings.from_env())
        _LOGGERS[key] = tl.Logger.with_config(key, _CONFIG)
    return _LOGGERS[key]


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _emit(log: Any, level: Any, message: str, payload: Dict[str, Any]) -> None:
    # Prefer the structured ``<level>_with`` variant when telelog offers one.
    name = normalize_level(level)
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    plain = getattr(log, name, None)
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
    """Emit ``event::<name>`` carrying ``data`` as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by ``span``; lets the block attach metadata after the fact."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, **extra: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update({key: _stringify(value) for key, value in extra.items()})
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload(reason=reason))


@contextmanager
def _logger_context(log: Any, values: Mapping[str, str]) -> Iterator[None]:
    for key, value in values.items():
        log.add_context(key, value)
    try:
        yield
    finally:
        for key in values:
            log.remove_context(key)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block under ``name``.

    ``component=True`` also tracks the block as a telelog component named
    ``name``; a string picks the component name. ``metadata`` becomes logger
    context while the block runs. Exceptions are logged via
    ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata=dict(context),
    )

    with ExitStack() as stack:
        stack.enter_context(_logger_context(log, context))
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()
logger = get_logger()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "TelemetrySettings",
    "build_config",
    "configure",
    "get_logger",
    "normalize_level",
    "preset_settings",
    "record_event",
    "resolve_log_path",
    "span",
    "logger",
]
