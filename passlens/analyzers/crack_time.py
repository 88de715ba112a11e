"""
Crack-Time Estimator
=====================

Projects how long an exhaustive search would take to find a password of
a given entropy, under a chosen attacker model.

    combinations = 2 ** entropy
    seconds      = combinations / (2 * guesses_per_second)

The factor of two models the average case: half the keyspace is searched
before the password is found. Large entropies are handled in log space so
that the result is always a finite float.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Bonneau, J. (2012). The Science of Guessing. IEEE S&P.
"""

from __future__ import annotations

import math
import sys

from passlens.core.models import AttackModel, CrackTimeEstimate

# Beyond this many bits ``2.0 ** entropy`` would overflow a float.
_DIRECT_POW_LIMIT: float = 1000.0

# (exclusive upper bound in seconds, unit length in seconds, unit name)
_DISPLAY_UNITS: tuple[tuple[float, float, str], ...] = (
    (60, 1, "seconds"),
    (3_600, 60, "minutes"),
    (86_400, 3_600, "hours"),
    (2_592_000, 86_400, "days"),
    (31_536_000, 2_592_000, "months"),
    (3_153_600_000, 31_536_000, "years"),
)

AVERAGE_CASE_NOTE: str = (
    "Estimates assume average-case scenario (50% of keyspace searched). "
    "Actual time may vary significantly based on attack sophistication "
    "and computational resources."
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_crack_time(seconds: float) -> str:
    """Render *seconds* as the largest fitting unit, rounded half up.

    Examples: ``0.4 -> "Instant"``, ``59 -> "59 seconds"``,
    ``60 -> "1 minutes"``, ``4e9 -> "Centuries"``.
    """
    if not seconds >= 1:
        return "Instant"
    for upper, unit, name in _DISPLAY_UNITS:
        if seconds < upper:
            return f"{_round_half_up(seconds / unit)} {name}"
    return "Centuries"


class CrackTimeEstimator:
    """Estimates average-case brute-force time for an entropy value.

    Usage::

        estimator = CrackTimeEstimator()
        est = estimator.estimate(52.4, AttackModel.GPU_ASSISTED)
        print(est.display)
    """

    def estimate(self, entropy: float, model: AttackModel | str) -> CrackTimeEstimate:
        """Estimate crack time for *entropy* bits under *model*.

        Non-finite or negative entropy is treated as 0. Integers too large
        for a float are estimated as "Centuries".

        Raises:
            ValueError: If *model* is a string naming no attack model.
        """
        attack_model = AttackModel.parse(model)
        bits = self._sanitize(entropy)
        rate = attack_model.guesses_per_second
        seconds = self._seconds(bits, rate)
        return CrackTimeEstimate(
            seconds=seconds,
            display=format_crack_time(seconds),
            attack_model=attack_model,
            guesses_per_second=rate,
        )

    def estimate_all(self, entropy: float) -> list[CrackTimeEstimate]:
        """One estimate per attack model, in enumeration order."""
        return [self.estimate(entropy, model) for model in AttackModel]

    @staticmethod
    def _sanitize(entropy: float) -> float:
        try:
            bits = float(entropy)
        except OverflowError:
            # Integers past the float range: positive ones are astronomically large.
            return _DIRECT_POW_LIMIT * 2 if entropy > 0 else 0.0
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(bits) or bits < 0:
            return 0.0
        return bits

    @staticmethod
    def _seconds(bits: float, rate: float) -> float:
        if bits < _DIRECT_POW_LIMIT:
            return (2.0 ** bits) / (2 * rate)
        log2_seconds = bits - 1 - math.log2(rate)
        if log2_seconds >= sys.float_info.max_exp:
            return sys.float_info.max
        return 2.0 ** log2_seconds


_DEFAULT_ESTIMATOR = CrackTimeEstimator()


def estimate_crack_time(entropy: float, model: AttackModel | str) -> CrackTimeEstimate:
    """Estimate crack time with the default :class:`CrackTimeEstimator`."""
    return _DEFAULT_ESTIMATOR.estimate(entropy, model)
