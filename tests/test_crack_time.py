"""Tests for crack-time estimation and formatting."""
from __future__ import annotations

import math
import sys

import pytest

from passlens.analyzers.crack_time import (
    CrackTimeEstimator,
    estimate_crack_time,
    format_crack_time,
)
from passlens.core.models import AttackModel


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0.0, "Instant"),
        (0.999, "Instant"),
        (1, "1 seconds"),
        (59, "59 seconds"),
        (59.6, "60 seconds"),
        (60, "1 minutes"),
        (89.9, "1 minutes"),
        (90, "2 minutes"),
        (3_600, "1 hours"),
        (86_400, "1 days"),
        (2_592_000, "1 months"),
        (31_536_000, "1 years"),
        (3_153_599_999, "100 years"),
        (3_153_600_000, "Centuries"),
        (sys.float_info.max, "Centuries"),
    ],
)
def test_format_crack_time_boundaries(seconds: float, expected: str) -> None:
    assert format_crack_time(seconds) == expected


def test_format_crack_time_nan_is_instant() -> None:
    assert format_crack_time(float("nan")) == "Instant"


def test_zero_entropy_is_instant_for_every_model() -> None:
    for model in AttackModel:
        est = estimate_crack_time(0.0, model)
        assert est.display == "Instant"
        assert est.seconds == pytest.approx(1 / (2 * model.guesses_per_second))


def test_forty_bits_per_model() -> None:
    displays = {
        est.attack_model: est.display
        for est in CrackTimeEstimator().estimate_all(40.0)
    }
    assert displays == {
        AttackModel.ONLINE: "17 years",
        AttackModel.OFFLINE: "9 minutes",
        AttackModel.GPU_ASSISTED: "5 seconds",
    }


def test_faster_attacker_never_slower() -> None:
    for bits in (0, 10, 30, 55.5, 80, 200):
        online = estimate_crack_time(bits, AttackModel.ONLINE).seconds
        offline = estimate_crack_time(bits, AttackModel.OFFLINE).seconds
        gpu = estimate_crack_time(bits, AttackModel.GPU_ASSISTED).seconds
        assert online >= offline >= gpu


def test_huge_entropy_stays_finite() -> None:
    est = estimate_crack_time(5_000.0, AttackModel.GPU_ASSISTED)
    assert math.isfinite(est.seconds)
    assert est.display == "Centuries"


def test_entropy_just_past_direct_limit_is_finite() -> None:
    est = estimate_crack_time(1_010.0, AttackModel.GPU_ASSISTED)
    assert math.isfinite(est.seconds)
    assert est.seconds > 0


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -5.0])
def test_degenerate_entropy_treated_as_zero(bad: float) -> None:
    est = estimate_crack_time(bad, AttackModel.OFFLINE)
    assert est.display == "Instant"
    assert est.seconds == estimate_crack_time(0.0, AttackModel.OFFLINE).seconds


def test_model_accepted_by_value_or_name() -> None:
    assert estimate_crack_time(10, "gpu").attack_model is AttackModel.GPU_ASSISTED
    assert estimate_crack_time(10, "GPU_ASSISTED").attack_model is AttackModel.GPU_ASSISTED
    assert estimate_crack_time(10, " Online ").attack_model is AttackModel.ONLINE


def test_unknown_model_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown attack model"):
        estimate_crack_time(10, "quantum")


def test_model_rates_and_labels() -> None:
    assert AttackModel.ONLINE.guesses_per_second == 1e3
    assert AttackModel.OFFLINE.guesses_per_second == 1e9
    assert AttackModel.GPU_ASSISTED.guesses_per_second == 1e11
    assert AttackModel.OFFLINE.label == "Offline Attack (1B guesses/sec)"


def test_integer_entropy_beyond_float_range_is_centuries() -> None:
    est = estimate_crack_time(10 ** 400, AttackModel.OFFLINE)
    assert math.isfinite(est.seconds)
    assert est.display == "Centuries"


def test_negative_integer_beyond_float_range_is_instant() -> None:
    assert estimate_crack_time(-(10 ** 400), AttackModel.ONLINE).display == "Instant"
