"""Tests for the passlens command-line interface."""
from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from passlens.cli import cli

SECRET = "Xk9#mQ2!vL"


def test_analyze_json_never_contains_password() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-o", "json", "analyze", SECRET])
    assert result.exit_code == 0, result.output
    assert SECRET not in result.output

    report = json.loads(result.output)
    assert report["report_metadata"]["tool"] == "passlens"
    assert report["report_metadata"]["target"] == "*" * len(SECRET)
    assert report["metadata"]["analysis"]["charset_size"] == 94


def test_analyze_console_masks_by_default() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["analyze", SECRET, "--model", "gpu"])
    assert result.exit_code == 0, result.output
    assert "Strength Meter" in result.output
    assert "GPU-Assisted (100B guesses/sec)" in result.output
    assert SECRET not in result.output


def test_analyze_console_show_reveals_password() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["analyze", "hunter2", "--show"])
    assert result.exit_code == 0, result.output
    assert "hunter2" in result.output


def test_analyze_prompts_when_password_omitted() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-o", "json", "analyze"], input="hunter2\n")
    assert result.exit_code == 0, result.output
    assert '"target": "*******"' in result.output


def test_analyze_writes_html_report(tmp_path: Path) -> None:
    runner = CliRunner()
    report_path = tmp_path / "reports" / "pw.html"
    result = runner.invoke(
        cli, ["-q", "-o", "html", "-f", str(report_path), "analyze", SECRET]
    )
    assert result.exit_code == 0, result.output
    html = report_path.read_text(encoding="utf-8")
    assert "Crack Time Estimates" in html
    assert SECRET not in html


def test_analyze_writes_json_report(tmp_path: Path) -> None:
    runner = CliRunner()
    report_path = tmp_path / "pw.json"
    result = runner.invoke(
        cli, ["-q", "-o", "json", "-f", str(report_path), "analyze", "abc123"]
    )
    assert result.exit_code == 0, result.output
    data = json.loads(report_path.read_text(encoding="utf-8"))
    assert data["metadata"]["analysis"]["strength"] == "Very Weak"


def test_invalid_model_is_usage_error() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["analyze", "x", "--model", "quantum"])
    assert result.exit_code == 2


def test_missing_config_is_usage_error(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-c", str(tmp_path / "nope.toml"), "models"])
    assert result.exit_code == 2


def test_config_sets_default_model(tmp_path: Path) -> None:
    config_path = tmp_path / "passlens.toml"
    config_path.write_text('[passlens]\ndefault_attack_model = "online"\n', encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["-c", str(config_path), "-o", "json", "models"])
    assert result.exit_code == 0, result.output
    defaults = [m["model"] for m in json.loads(result.output) if m["default"]]
    assert defaults == ["online"]


def test_analysis_error_exits_nonzero(monkeypatch) -> None:
    def boom(self, password: str):
        raise RuntimeError("analyzer exploded")

    monkeypatch.setattr("passlens.analyzers.analyzer.PasswordAnalyzer.analyze", boom)
    runner = CliRunner()
    result = runner.invoke(cli, ["-q", "analyze", "anything"])
    assert result.exit_code == 1


def test_crack_time_compares_all_models() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-o", "json", "crack-time", "40"])
    assert result.exit_code == 0, result.output
    displays = [e["display"] for e in json.loads(result.output)]
    assert displays == ["17 years", "9 minutes", "5 seconds"]


def test_crack_time_single_model() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["crack-time", "40", "--model", "offline"])
    assert result.exit_code == 0, result.output
    assert "9 minutes" in result.output
    assert "average-case" in result.output


def test_models_lists_rates() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-o", "json", "models"])
    assert result.exit_code == 0, result.output
    rows = json.loads(result.output)
    assert [r["guesses_per_second"] for r in rows] == [1e3, 1e9, 1e11]


def test_watch_tracks_and_resets_history() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-o", "json", "watch"], input="p\npa\n\npas\n")
    assert result.exit_code == 0, result.output
    lines = [json.loads(line) for line in result.output.splitlines()]
    assert [line["history_size"] for line in lines] == [1, 2, 0, 1]
    assert lines[2]["entropy"] == 0.0
    assert "pas" not in result.output


def test_watch_console_prints_history() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-q", "watch"], input="a\nab\n")
    assert result.exit_code == 0


def test_version_option() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output
