"""Tests for the structured logger."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from lenscore.config import GlobalConfig
from lenscore.logger import LensLogger
from passlens.core.engine import PassLensEngine


def _close(log: LensLogger) -> None:
    for handler in list(log.underlying.handlers):
        handler.close()


def test_json_file_records_component_operation_and_extra(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "passlens.log"
    log = LensLogger("unit", log_file=log_path, json_logs=True, log_level="DEBUG")
    with log.operation("evaluate"):
        log.info("Evaluated password", length=12, score=74)
    _close(log)

    entry = json.loads(log_path.read_text(encoding="utf-8").splitlines()[-1])
    assert entry["logger"] == "passlens.unit"
    assert entry["component"] == "unit"
    assert entry["operation"] == "evaluate"
    assert entry["extra"] == {"length": 12, "score": 74}


def test_quiet_by_default() -> None:
    log = LensLogger("quiet")
    handlers = log.underlying.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
    assert log.underlying.propagate is False


def test_from_config_debug_overrides_level() -> None:
    log = LensLogger.from_config("cfg", GlobalConfig(debug=True))
    assert log.underlying.level == logging.DEBUG


def test_engine_never_logs_password(tmp_path: Path, lens_config) -> None:
    log_path = tmp_path / "engine.log"
    lens_config.global_settings.log_file = str(log_path)
    lens_config.global_settings.log_json = True
    lens_config.global_settings.log_level = "DEBUG"

    engine = PassLensEngine(lens_config)
    secret = "Xk9#mQ2!vL"
    engine.scan(secret)
    _close(engine.logger)

    text = log_path.read_text(encoding="utf-8")
    assert "Password analysis complete" in text
    assert secret not in text
