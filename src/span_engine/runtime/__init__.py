"""Runtime services: settings and telelog-backed telemetry."""

from .settings import DiffSettings, TelemetrySettings

__all__ = ["DiffSettings", "TelemetrySettings"]
