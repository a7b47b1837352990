from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from bed.runtime import telemetry


def test_record_event_attaches_payload(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="bed"):
        telemetry.record_event("buffer.edit", level="debug", data={"lines": 3})

    (record,) = caplog.records
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "event::buffer.edit event=buffer.edit lines=3"
    assert record.bed_data == {"event": "buffer.edit", "lines": 3}


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("x", level="chatty")


def test_span_reports_failures_and_reraises(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="bed"):
        with pytest.raises(KeyError):
            with telemetry.span("work", component=True, metadata={"file": "a.txt"}):
                raise KeyError("boom")

    failure = next(r for r in caplog.records if r.levelno == logging.ERROR)
    assert failure.bed_data["span"] == "work"
    assert failure.bed_data["component"] == "work"
    assert failure.bed_data["file"] == "a.txt"
    timing = next(r for r in caplog.records if r.getMessage().startswith("span::work"))
    assert "elapsed_ms" in timing.bed_data


def test_presets_pick_levels_and_outputs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BED_LOG_FILE", "custom.log")

    development = telemetry.TelemetryConfig.for_preset("development")
    production = telemetry.TelemetryConfig.for_preset("Production")

    assert (development.level, development.console) == ("DEBUG", True)
    assert (production.level, production.console) == ("INFO", False)
    assert production.json_format is True
    assert production.log_file == "custom.log"
    with pytest.raises(ValueError):
        telemetry.TelemetryConfig.for_preset("loud")


def test_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BED_LOG_LEVEL", "info")
    monkeypatch.setenv("BED_DISABLE_CONSOLE", "yes")
    monkeypatch.setenv("BED_LOG_JSON", "1")

    config = telemetry.TelemetryConfig.from_env()

    assert config.level == "INFO"
    assert config.console is False
    assert config.json_format is True


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(
            config=telemetry.TelemetryConfig(), preset="development"
        )


def test_configure_writes_json_lines_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "bed.log"
    telemetry.configure(
        config=telemetry.TelemetryConfig(
            level="INFO", console=False, json_format=True, log_file=str(log_file)
        )
    )

    telemetry.record_event("session.open", data={"lines": 2})
    telemetry.record_event("buffer.edit", level="debug")

    (line,) = log_file.read_text(encoding="utf-8").splitlines()
    payload = json.loads(line)
    assert payload["event"] == "session.open"
    assert payload["lines"] == 2
    assert payload["logger"] == "bed"


def test_child_loggers_nest_under_bed() -> None:
    assert telemetry.get_logger("bed.modes").parent is telemetry.get_logger()
