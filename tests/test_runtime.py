from __future__ import annotations

import pytest

from span_engine.runtime import DiffSettings, TelemetrySettings, telemetry


def test_diff_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DIFF_TIMEOUT", "DIFF_EDIT_COST", "DIFF_CHECKLINES"):
        monkeypatch.delenv(f"SPAN_ENGINE_{name}", raising=False)

    assert DiffSettings.from_env() == DiffSettings(timeout=1.0, edit_cost=4, checklines=True)


def test_diff_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPAN_ENGINE_DIFF_TIMEOUT", "0")
    monkeypatch.setenv("SPAN_ENGINE_DIFF_EDIT_COST", "6")
    monkeypatch.setenv("SPAN_ENGINE_DIFF_CHECKLINES", "off")

    assert DiffSettings.from_env() == DiffSettings(timeout=0.0, edit_cost=6, checklines=False)


def test_diff_settings_reject_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(ValueError):
        DiffSettings(timeout=-1)
    with pytest.raises(ValueError):
        DiffSettings(edit_cost=-2)

    monkeypatch.setenv("SPAN_ENGINE_DIFF_EDIT_COST", "lots")
    with pytest.raises(ValueError, match="SPAN_ENGINE_DIFF_EDIT_COST"):
        DiffSettings.from_env()


def test_telemetry_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPAN_ENGINE_LOGGER", "relocator")
    monkeypatch.setenv("SPAN_ENGINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SPAN_ENGINE_DISABLE_CONSOLE", "1")
    monkeypatch.setenv("SPAN_ENGINE_LOG_BUFFERED", "yes")
    monkeypatch.setenv("SPAN_ENGINE_LOG_BUFFER_SIZE", "512")

    settings = TelemetrySettings.from_env()

    assert settings.logger_name == "relocator"
    assert settings.level == "DEBUG"
    assert settings.console is False
    assert settings.buffered is True
    assert settings.buffer_size == 512


def test_telemetry_rejects_conflicting_configuration() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("span_engine.tests") is telemetry.get_logger(
        "span_engine.tests"
    )
