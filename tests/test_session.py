"""Tests for the caller-owned entropy history."""
from __future__ import annotations

import pytest

from passlens.core.models import AttackModel
from passlens.session import AnalysisSession, EntropyHistory


def test_history_is_capped_at_fifty(engine) -> None:
    session = AnalysisSession(engine=engine)
    for n in range(1, 61):
        session.update("a" * n)
    samples = session.history.samples
    assert len(samples) == 50
    assert samples[0].chars == 11
    assert samples[-1].chars == 60


def test_empty_password_resets_history(engine) -> None:
    session = AnalysisSession(engine=engine)
    for password in ("p", "pa", "pas"):
        session.update(password)
    assert len(session.history) == 3

    report = session.update("")
    assert len(session.history) == 0
    assert report.analysis.entropy == 0.0


def test_unchanged_length_and_entropy_not_sampled(engine) -> None:
    session = AnalysisSession(engine=engine)
    session.update("abc")
    session.update("abc")
    session.update("abd")
    assert len(session.history) == 1

    session.update("abD")
    assert len(session.history) == 2


def test_custom_history_size(engine) -> None:
    session = AnalysisSession(engine=engine, history_size=3)
    for n in range(1, 6):
        session.update("x" * n)
    assert [s.chars for s in session.history] == [3, 4, 5]


def test_history_size_from_config(lens_config) -> None:
    lens_config.passlens.history_size = 2
    session = AnalysisSession(config=lens_config)
    for n in range(1, 5):
        session.update("k" * n)
    assert session.history.max_samples == 2
    assert len(session.history) == 2


def test_set_attack_model_reestimates_last_report(engine) -> None:
    session = AnalysisSession(engine=engine, attack_model="online")
    session.update("Tr0ub4dor&3")
    report = session.set_attack_model(AttackModel.GPU_ASSISTED)
    assert report is not None
    assert report.crack_time.attack_model is AttackModel.GPU_ASSISTED
    assert len(session.history) == 1


def test_set_attack_model_before_any_update(engine) -> None:
    session = AnalysisSession(engine=engine)
    assert session.set_attack_model("gpu") is None
    assert session.attack_model is AttackModel.GPU_ASSISTED


def test_default_model_comes_from_config(engine) -> None:
    assert AnalysisSession(engine=engine).attack_model is AttackModel.OFFLINE


def test_history_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        EntropyHistory(0)


def test_explicit_zero_history_size_rejected(engine) -> None:
    with pytest.raises(ValueError):
        AnalysisSession(engine=engine, history_size=0)
