"""
PassLens Analysis Engine
=========================

Facade over the three analysis stages. :meth:`PassLensEngine.evaluate`
runs analyzer, crack-time estimator and suggestion generator for one
password; :meth:`PassLensEngine.scan` wraps the same evaluation in a
:class:`~lenscore.models.ScanResult` with findings for console and report
output.

The engine is stateless between calls. Selected attack model and chart
history belong to the caller (see :mod:`passlens.session`).

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from lenscore.config import LensConfig
from lenscore.logger import LensLogger
from lenscore.models import Finding, Risk, RiskLevel, ScanResult, Severity

from passlens import __tool_name__, __version__
from passlens.analyzers.analyzer import PasswordAnalyzer
from passlens.analyzers.crack_time import AVERAGE_CASE_NOTE, CrackTimeEstimator
from passlens.analyzers.suggestions import AFFIRMATION, SuggestionGenerator
from passlens.core.models import (
    AttackModel,
    CrackTimeEstimate,
    PasswordAnalysis,
    PasswordReport,
    PasswordStrength,
)

ERROR_FINDING_TITLE = "Password Analysis Error"


class PassLensEngine:
    """Orchestrates password analysis and result packaging.

    Usage::

        engine = PassLensEngine()
        report = engine.evaluate("Tr0ub4dor&3", AttackModel.OFFLINE)
        result = engine.scan("Tr0ub4dor&3")

    Attributes:
        config: LensConfig instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[LensConfig] = None,
        logger: Optional[LensLogger] = None,
    ) -> None:
        self.config = config or LensConfig()
        self.logger = logger or LensLogger.from_config(
            "engine", self.config.global_settings
        )

        self._analyzer = PasswordAnalyzer()
        self._estimator = CrackTimeEstimator()
        self._suggester = SuggestionGenerator()

    @property
    def default_attack_model(self) -> AttackModel:
        return AttackModel.parse(self.config.passlens.default_attack_model)

    # ------------------------------------------------------------------ #
    #  Evaluation
    # ------------------------------------------------------------------ #

    def evaluate(
        self,
        password: str,
        attack_model: AttackModel | str | None = None,
    ) -> PasswordReport:
        """Analyse *password* and derive crack time and suggestions.

        Args:
            password: The password to analyse.
            attack_model: Attacker model; defaults to the configured one.

        Returns:
            PasswordReport bundling analysis, estimate and suggestions.

        Raises:
            ValueError: If *attack_model* is a string naming no model.
        """
        model = (
            self.default_attack_model
            if attack_model is None
            else AttackModel.parse(attack_model)
        )
        with self.logger.operation("evaluate"), self.logger.timed("password evaluation"):
            analysis = self._analyzer.analyze(password)
            crack_time = self._estimator.estimate(analysis.entropy, model)
            suggestions = self._suggester.generate(analysis)

        self.logger.debug(
            "Evaluated password",
            length=analysis.length,
            score=analysis.strength_score,
            strength=analysis.strength.value,
            attack_model=model.value,
        )
        return PasswordReport(
            analysis=analysis,
            crack_time=crack_time,
            suggestions=tuple(suggestions),
        )

    def estimate(
        self,
        entropy: float,
        attack_model: AttackModel | str | None = None,
    ) -> CrackTimeEstimate:
        """Crack-time estimate for *entropy* under one attack model."""
        model = (
            self.default_attack_model
            if attack_model is None
            else AttackModel.parse(attack_model)
        )
        return self._estimator.estimate(entropy, model)

    def crack_times(self, entropy: float) -> list[CrackTimeEstimate]:
        """Crack-time estimates for *entropy* under every attack model."""
        return self._estimator.estimate_all(entropy)

    # ------------------------------------------------------------------ #
    #  Scan result packaging
    # ------------------------------------------------------------------ #

    def scan(
        self,
        password: str,
        attack_model: AttackModel | str | None = None,
    ) -> ScanResult:
        """Evaluate *password* and package the outcome as findings.

        The raw password never enters the result; ``target`` carries a
        masked form and ``metadata`` only derived values.

        Raises:
            ValueError: If *attack_model* is a string naming no model.
        """
        model = (
            self.default_attack_model
            if attack_model is None
            else AttackModel.parse(attack_model)
        )
        result = ScanResult(
            tool_name=__tool_name__,
            target=self.mask_password(password),
            start_time=datetime.now(timezone.utc),
        )

        self.logger.info("Starting password analysis", length=len(password))

        try:
            report = self.evaluate(password, model)
            analysis = report.analysis

            result.metadata = {
                "version": __version__,
                "analysis": analysis.model_dump(mode="json"),
                "crack_time": report.crack_time.model_dump(mode="json"),
                "crack_times": [
                    est.model_dump(mode="json")
                    for est in self.crack_times(analysis.entropy)
                ],
                "suggestions": list(report.suggestions),
            }
            result.risk = Risk(
                score=100 - analysis.strength_score,
                factors=analysis.weaknesses,
            )

            result.add_finding(self._strength_finding(analysis))
            result.add_finding(self._crack_time_finding(report.crack_time))
            for finding in self._weakness_findings(analysis):
                result.add_finding(finding)
            for suggestion in report.suggestions:
                result.add_finding(Finding(
                    title=(
                        "Password Looks Strong"
                        if suggestion == AFFIRMATION
                        else "Password Improvement Suggestion"
                    ),
                    description=suggestion,
                    severity=Severity.INFO,
                    risk=RiskLevel.NEGLIGIBLE,
                ))

            result.finalize(
                f"Password analysis: {analysis.strength.value}, "
                f"entropy={analysis.entropy:.1f} bits, "
                f"score={analysis.strength_score}/100, "
                f"crack time ({model.value})={report.crack_time.display}"
            )

        except Exception as exc:
            self.logger.exception("Password analysis failed: %s", type(exc).__name__)
            result.add_finding(Finding(
                title=ERROR_FINDING_TITLE,
                description=f"Error during password analysis: {exc}",
                severity=Severity.MEDIUM,
                risk=RiskLevel.LOW,
            ))
            result.finalize(f"Error: {exc}")

        self.logger.info(
            "Password analysis complete",
            findings=result.finding_count,
            duration=result.duration_seconds,
        )
        return result

    # ------------------------------------------------------------------ #
    #  Finding builders
    # ------------------------------------------------------------------ #

    def _strength_finding(self, analysis: PasswordAnalysis) -> Finding:
        return Finding(
            title=f"Password Strength: {analysis.strength.value}",
            description=(
                f"Entropy: {analysis.entropy:.1f} bits. "
                f"Character set size: {analysis.charset_size}. "
                f"Length: {analysis.length}. "
                f"Score: {analysis.strength_score}/100."
            ),
            severity=self._strength_severity(analysis.strength),
            risk=self._strength_risk(analysis.strength),
            confidence=0.90,
            evidence={
                "entropy_bits": round(analysis.entropy, 2),
                "charset_size": analysis.charset_size,
                "length": analysis.length,
                "strength": analysis.strength.value,
                "score": analysis.strength_score,
            },
            references=[
                "NIST SP 800-63B (2017). Digital Identity Guidelines.",
            ],
        )

    @staticmethod
    def _crack_time_finding(estimate: CrackTimeEstimate) -> Finding:
        return Finding(
            title=f"Estimated Time to Crack: {estimate.display}",
            description=f"{estimate.attack_model.label}. {AVERAGE_CASE_NOTE}",
            severity=Severity.INFO,
            risk=RiskLevel.NEGLIGIBLE,
            confidence=0.60,
            evidence={
                "attack_model": estimate.attack_model.value,
                "guesses_per_second": estimate.guesses_per_second,
                "seconds": estimate.seconds,
            },
        )

    @staticmethod
    def _weakness_findings(analysis: PasswordAnalysis) -> list[Finding]:
        findings: list[Finding] = []
        if analysis.repeated_chars > 0:
            findings.append(Finding(
                title="Weakness Detected: repeated characters",
                description=(
                    f"{analysis.repeated_chars} repeated character pattern(s). "
                    f"Runs such as 'aaa' are among the first guesses attackers try."
                ),
                severity=Severity.LOW,
                risk=RiskLevel.LOW,
                confidence=0.95,
                recommendation='Avoid repeated characters (e.g., "aaa")',
            ))
        if analysis.sequences:
            findings.append(Finding(
                title="Weakness Detected: sequential patterns",
                description=(
                    "Sequential patterns detected: "
                    f"{', '.join(analysis.sequences)}."
                ),
                severity=Severity.LOW,
                risk=RiskLevel.LOW,
                confidence=0.95,
                evidence={"sequences": list(analysis.sequences)},
                recommendation='Avoid sequential patterns (e.g., "123", "abc")',
            ))
        if analysis.dictionary_words:
            findings.append(Finding(
                title="Weakness Detected: common words",
                description=(
                    "Contains common word(s): "
                    f"{', '.join(analysis.dictionary_words)}."
                ),
                severity=Severity.MEDIUM,
                risk=RiskLevel.MEDIUM,
                confidence=0.95,
                evidence={"dictionary_words": list(analysis.dictionary_words)},
                recommendation="Avoid common dictionary words",
            ))
        return findings

    # ------------------------------------------------------------------ #
    #  Private Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def mask_password(password: str) -> str:
        """Mask every character of *password* for display."""
        return "*" * len(password)

    @staticmethod
    def _strength_severity(strength: PasswordStrength) -> Severity:
        """Map password strength to a severity level."""
        mapping = {
            PasswordStrength.VERY_WEAK: Severity.CRITICAL,
            PasswordStrength.WEAK: Severity.HIGH,
            PasswordStrength.MEDIUM: Severity.MEDIUM,
            PasswordStrength.STRONG: Severity.LOW,
            PasswordStrength.VERY_STRONG: Severity.INFO,
        }
        return mapping[strength]

    @staticmethod
    def _strength_risk(strength: PasswordStrength) -> RiskLevel:
        """Map password strength to a risk level."""
        mapping = {
            PasswordStrength.VERY_WEAK: RiskLevel.CRITICAL,
            PasswordStrength.WEAK: RiskLevel.HIGH,
            PasswordStrength.MEDIUM: RiskLevel.MEDIUM,
            PasswordStrength.STRONG: RiskLevel.LOW,
            PasswordStrength.VERY_STRONG: RiskLevel.NEGLIGIBLE,
        }
        return mapping[strength]
