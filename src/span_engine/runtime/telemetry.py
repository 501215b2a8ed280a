"""Telemetry services built directly on telelog.

Public surface used by the rest of the package:

``configure(...)`` -- adopt settings, a preset, or an explicit telelog config
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .settings import TelemetrySettings

tl = cast(Any, telelog)

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None
_ACTIVE_SETTINGS: TelemetrySettings = TelemetrySettings()


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _config_from_settings(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    if settings.json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    return config


def _preset_settings(preset: str, base: TelemetrySettings) -> TelemetrySettings:
    key = preset.lower()
    if key == "development":
        return TelemetrySettings(
            logger_name=base.logger_name, level="DEBUG", console=True, colored=True
        )
    if key == "production":
        return TelemetrySettings(
            logger_name=base.logger_name,
            level="INFO",
            console=False,
            log_file=base.log_file or "span_engine.log",
            buffered=True,
            buffer_size=base.buffer_size,
        )
    if key in {"performance", "performance_analysis"}:
        return TelemetrySettings(
            logger_name=base.logger_name,
            level="DEBUG",
            console=False,
            json=True,
            log_file=base.log_file or "span_engine-performance.log",
            buffered=True,
            buffer_size=base.buffer_size,
        )
    raise ValueError(f"Unknown preset '{preset}'.")


def configure(
    *,
    settings: Optional[TelemetrySettings] = None,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    ``config`` (a ready ``tl.Config``) and ``preset`` (``"development"``,
    ``"production"`` or ``"performance"``) are mutually exclusive. Without
    either, ``settings`` (or the environment) decides.
    """

    global _ACTIVE_CONFIG, _ACTIVE_SETTINGS
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    resolved = settings or TelemetrySettings.from_env()
    if preset:
        resolved = _preset_settings(preset, resolved)
    if config is None:
        config = _config_from_settings(resolved)

    config.with_profiling(True)
    _ACTIVE_SETTINGS = resolved
    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def active_settings() -> TelemetrySettings:
    return _ACTIVE_SETTINGS


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active config."""

    if _ACTIVE_CONFIG is None:
        configure()
    logger_name = name or _ACTIVE_SETTINGS.logger_name
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _resolve_level_method(
    logger: Any, level: Any, *, expect_data: bool = False
) -> Tuple[Any, bool]:
    name = str(level).lower()
    if expect_data:
        with_attr = getattr(logger, f"{name}_with", None)
        if with_attr is not None:
            return with_attr, True

    attr = getattr(logger, name, None)
    if attr is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return attr, False


def record_event(
    name: str,
    *,
    level: str | Any = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    method, accepts_data = _resolve_level_method(log, level, expect_data=True)
    message = f"event::{name}"
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for attaching metadata mid-flight."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _emit(
        self, level: str, message: str, extra: Optional[Dict[str, Any]] = None
    ) -> None:
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})

        method, accepts = _resolve_level_method(self.logger, level, expect_data=True)
        if accepts:
            method(message, _format_pairs(payload))
        else:
            method(f"{message} {payload}")

    def done(self) -> None:
        self._emit("debug", "span::done")

    def fail(self, reason: str) -> None:
        self._emit("error", "span::fail", {"reason": reason})


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a code block and (optionally) track it as a component.

    ``component=True`` reuses ``name`` as the component id; a string names
    the component explicitly. ``metadata`` stays on the yielded handle and
    is attached to the closing ``span::done`` or ``span::fail`` record.
    """

    log = get_logger(logger_name)
    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))

        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
        )

        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        handle.done()


configure()

__all__ = [
    "SpanHandle",
    "active_settings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
