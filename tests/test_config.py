"""Tests for TOML configuration loading."""
from __future__ import annotations

from pathlib import Path

import pytest

import lenscore.config as config_module
from lenscore.config import AnalyzerConfig, GlobalConfig, LensConfig


def test_defaults() -> None:
    config = LensConfig()
    assert config.passlens.default_attack_model == "offline"
    assert config.passlens.history_size == 50
    assert config.passlens.mask_passwords is True
    assert config.global_settings.log_level == "INFO"
    assert config.global_settings.log_file is None


def test_load_from_file(tmp_path: Path) -> None:
    path = tmp_path / "passlens.toml"
    path.write_text(
        '[global]\nlog_level = "debug"\nlog_json = true\n\n'
        '[passlens]\ndefault_attack_model = "GPU"\nhistory_size = 10\n',
        encoding="utf-8",
    )
    config = LensConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.global_settings.log_json is True
    assert config.passlens.default_attack_model == "gpu"
    assert config.passlens.history_size == 10
    assert config.passlens.recommended_length == 12


def test_unknown_keys_ignored(tmp_path: Path) -> None:
    path = tmp_path / "passlens.toml"
    path.write_text(
        '[passlens]\nfuture_option = 3\n\n[other_tool]\nx = 1\n',
        encoding="utf-8",
    )
    config = LensConfig.load(path)
    assert config.passlens == AnalyzerConfig()


def test_explicit_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        LensConfig.load(tmp_path / "missing.toml")


def test_missing_default_file_falls_back(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", tmp_path / "none.toml")
    config = LensConfig.load()
    assert config.to_dict() == LensConfig().to_dict()


def test_invalid_attack_model_rejected(tmp_path: Path) -> None:
    path = tmp_path / "passlens.toml"
    path.write_text('[passlens]\ndefault_attack_model = "quantum"\n', encoding="utf-8")
    with pytest.raises(ValueError, match="default_attack_model"):
        LensConfig.load(path)


@pytest.mark.parametrize("size", [0, -1, "50"])
def test_invalid_history_size_rejected(size) -> None:
    with pytest.raises(ValueError):
        AnalyzerConfig(history_size=size)


def test_invalid_global_values_rejected() -> None:
    with pytest.raises(ValueError):
        GlobalConfig(log_level="LOUD")
    with pytest.raises(ValueError):
        GlobalConfig(report_format="pdf")


def test_to_dict_layout() -> None:
    data = LensConfig().to_dict()
    assert set(data) == {"global_settings", "passlens"}
    assert data["passlens"]["history_size"] == 50


def test_get_config_caches_instance(tmp_path: Path) -> None:
    path = tmp_path / "passlens.toml"
    path.write_text('[passlens]\nhistory_size = 7\n', encoding="utf-8")
    loaded = config_module.get_config(path)
    assert loaded.passlens.history_size == 7
    assert config_module.get_config() is loaded
