"""
PassLens Interactive Session
=============================

Caller-owned state for interactive use: the selected attack model and a
rolling window of ``(length, entropy)`` samples for the entropy chart.

The engine itself is stateless. A session feeds it one password per
change event and keeps the history::

    session = AnalysisSession()
    for candidate in ("p", "pa", "pas"):
        report = session.update(candidate)
    print(session.history.samples)
"""

from __future__ import annotations

from collections import deque
from typing import Optional

from lenscore.config import LensConfig
from lenscore.logger import LensLogger

from passlens.core.engine import PassLensEngine
from passlens.core.models import AttackModel, HistorySample, PasswordReport

DEFAULT_HISTORY_SIZE: int = 50


class EntropyHistory:
    """Bounded FIFO of :class:`HistorySample`, oldest first.

    Appending beyond *max_samples* discards the oldest sample.
    """

    def __init__(self, max_samples: int = DEFAULT_HISTORY_SIZE) -> None:
        if max_samples < 1:
            raise ValueError("max_samples must be a positive integer")
        self._samples: deque[HistorySample] = deque(maxlen=max_samples)

    @property
    def max_samples(self) -> int:
        return self._samples.maxlen  # type: ignore[return-value]

    @property
    def samples(self) -> list[HistorySample]:
        return list(self._samples)

    @property
    def last(self) -> Optional[HistorySample]:
        return self._samples[-1] if self._samples else None

    def append(self, chars: int, entropy: float) -> HistorySample:
        sample = HistorySample(chars=chars, entropy=entropy)
        self._samples.append(sample)
        return sample

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self):
        return iter(self._samples)


class AnalysisSession:
    """Interactive analysis loop state.

    Each :meth:`update` re-analyses the current password. A history
    sample is recorded only when the length or entropy differs from the
    previous sample; an empty password clears the history.

    Args:
        engine: Engine to evaluate with. Built from *config* when omitted.
        attack_model: Initially selected model; configured default if omitted.
        history_size: Window size; ``config.passlens.history_size`` if omitted.
        config: Configuration used when *engine* is not given.
    """

    def __init__(
        self,
        engine: Optional[PassLensEngine] = None,
        attack_model: AttackModel | str | None = None,
        history_size: Optional[int] = None,
        config: Optional[LensConfig] = None,
    ) -> None:
        self.engine = engine or PassLensEngine(config)
        settings = self.engine.config.passlens

        self.attack_model = (
            AttackModel.parse(attack_model)
            if attack_model is not None
            else self.engine.default_attack_model
        )
        self.history = EntropyHistory(
            settings.history_size if history_size is None else history_size
        )
        self.last_report: Optional[PasswordReport] = None

        self._logger = LensLogger.from_config(
            "session", self.engine.config.global_settings
        )

    def update(self, password: str) -> PasswordReport:
        """Evaluate *password* as the new current value and update history."""
        report = self.engine.evaluate(password, self.attack_model)
        analysis = report.analysis

        if not password:
            if len(self.history):
                self._logger.debug("Password cleared; history reset")
            self.history.clear()
        else:
            last = self.history.last
            if last is None or (last.chars, last.entropy) != (
                analysis.length,
                analysis.entropy,
            ):
                self.history.append(analysis.length, analysis.entropy)

        self.last_report = report
        return report

    def set_attack_model(self, model: AttackModel | str) -> Optional[PasswordReport]:
        """Switch attacker model and re-estimate the current password.

        History is untouched: it depends only on length and entropy.

        Raises:
            ValueError: If *model* names no attack model.
        """
        self.attack_model = AttackModel.parse(model)
        self._logger.debug("Attack model changed", attack_model=self.attack_model.value)
        if self.last_report is None:
            return None

        crack_time = self.engine.estimate(
            self.last_report.analysis.entropy, self.attack_model
        )
        self.last_report = self.last_report.model_copy(update={"crack_time": crack_time})
        return self.last_report

    def reset(self) -> None:
        self.history.clear()
        self.last_report = None
