"""Tests for the engine facade and scan-result packaging."""
from __future__ import annotations

import json

from lenscore.models import RiskLevel, Severity
from passlens.core.engine import ERROR_FINDING_TITLE, PassLensEngine
from passlens.core.models import AttackModel, PasswordStrength


def test_evaluate_uses_configured_default_model(engine) -> None:
    report = engine.evaluate("hunter2")
    assert report.crack_time.attack_model is AttackModel.OFFLINE
    assert report.suggestions


def test_evaluate_with_explicit_model(engine) -> None:
    report = engine.evaluate("hunter2", "online")
    assert report.crack_time.attack_model is AttackModel.ONLINE
    assert report.crack_time.guesses_per_second == 1e3


def test_scan_common_password(engine) -> None:
    result = engine.scan("password")

    assert result.tool_name == "passlens"
    assert result.target == "********"
    assert result.end_time is not None

    strength = result.findings[0]
    assert strength.title == "Password Strength: Weak"
    assert strength.severity is Severity.HIGH

    titles = [f.title for f in result.findings]
    assert "Weakness Detected: common words" in titles
    assert result.risk is not None
    assert result.risk.score == 73
    assert result.risk.level is RiskLevel.HIGH
    assert result.risk.factors == ["Contains common word(s)"]


def test_scan_metadata_has_every_model(engine) -> None:
    result = engine.scan("Tr0ub4dor&3", AttackModel.GPU_ASSISTED)
    meta = result.metadata
    assert meta["analysis"]["charset_size"] == 94
    assert meta["crack_time"]["attack_model"] == "gpu"
    assert [e["attack_model"] for e in meta["crack_times"]] == ["online", "offline", "gpu"]
    assert meta["suggestions"] == ["Increase length to at least 12 characters"]


def test_scan_never_contains_password(engine) -> None:
    secret = "Xk9#mQ2!vL"
    result = engine.scan(secret)
    assert secret not in result.model_dump_json()


def test_strong_password_is_informational(engine) -> None:
    result = engine.scan("Tr0ub4dor&3xZ")
    assert result.findings[0].severity is Severity.INFO
    assert result.findings[-1].title == "Password Looks Strong"
    assert result.highest_severity is Severity.INFO


def test_scan_converts_errors_to_finding(engine, monkeypatch) -> None:
    def boom(password: str):
        raise RuntimeError("analyzer exploded")

    monkeypatch.setattr(engine._analyzer, "analyze", boom)
    result = engine.scan("whatever")

    assert len(result.findings) == 1
    assert result.findings[0].title == ERROR_FINDING_TITLE
    assert result.findings[0].severity is Severity.MEDIUM
    assert result.summary == "Error: analyzer exploded"


def test_crack_times_cover_all_models(engine) -> None:
    assert [e.attack_model for e in engine.crack_times(30)] == list(AttackModel)


def test_strength_mapping_is_total() -> None:
    for strength in PasswordStrength:
        assert PassLensEngine._strength_severity(strength) in Severity
        assert PassLensEngine._strength_risk(strength) in RiskLevel


def test_strength_evidence_is_json(engine) -> None:
    finding = engine.scan("abc123").findings[0]
    evidence = json.loads(finding.evidence)
    assert evidence["score"] == 19
    assert evidence["strength"] == "Very Weak"


def test_severity_counts_cover_every_level(engine) -> None:
    counts = engine.scan("password").severity_counts
    assert set(counts) == {s.value for s in Severity}
    assert counts["HIGH"] == 1
    assert counts["MEDIUM"] == 1
