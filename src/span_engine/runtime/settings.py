"""Environment-driven settings for telemetry and diff computation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "SPAN_ENGINE_"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default: float, cast: type) -> float:
    raw = env(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Logger wiring resolved from ``SPAN_ENGINE_*`` variables."""

    logger_name: str = "span_engine"
    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: str = ""
    buffered: bool = False
    buffer_size: int = 2048

    def __post_init__(self) -> None:
        if not self.logger_name:
            raise ValueError("logger_name cannot be empty")
        if self.buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        object.__setattr__(self, "level", self.level.upper())

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        return cls(
            logger_name=env("LOGGER") or "span_engine",
            level=env("LOG_LEVEL") or "INFO",
            console=not env_flag("DISABLE_CONSOLE", False),
            colored=not env_flag("NO_COLOR", False),
            json=env_flag("LOG_JSON", False),
            log_file=env("LOG_FILE") or "",
            buffered=env_flag("LOG_BUFFERED", False),
            buffer_size=int(_env_number("LOG_BUFFER_SIZE", 2048, int)),
        )


@dataclass(frozen=True, slots=True)
class DiffSettings:
    """Knobs forwarded to ``diff_match_patch``.

    ``timeout`` bounds ``diff_main`` in seconds (``0`` means unlimited),
    ``edit_cost`` drives ``diff_cleanupEfficiency`` and ``checklines``
    enables the line-level speedup for large texts.
    """

    timeout: float = 1.0
    edit_cost: int = 4
    checklines: bool = True

    def __post_init__(self) -> None:
        if self.timeout < 0:
            raise ValueError("timeout cannot be negative")
        if self.edit_cost < 0:
            raise ValueError("edit_cost cannot be negative")

    @classmethod
    def from_env(cls) -> "DiffSettings":
        return cls(
            timeout=float(_env_number("DIFF_TIMEOUT", 1.0, float)),
            edit_cost=int(_env_number("DIFF_EDIT_COST", 4, int)),
            checklines=env_flag("DIFF_CHECKLINES", True),
        )


__all__ = [
    "ENV_PREFIX",
    "DiffSettings",
    "TelemetrySettings",
    "env",
    "env_flag",
]
