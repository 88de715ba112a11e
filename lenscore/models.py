"""
LensCore Data Models
=====================

Pydantic v2 models for the findings and scan results PassLens emits.
A :class:`ScanResult` wraps one analysis run so that console, JSON and
HTML outputs share a single serialisable structure.

Severity/risk classification follows the OWASP Risk Rating Methodology.

References:
    - OWASP Risk Rating Methodology.
      https://owasp.org/www-community/OWASP_Risk_Rating_Methodology
    - SARIF v2.1.0 Specification (OASIS, 2020).
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    Field,
    ConfigDict,
    field_validator,
    model_validator,
)


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Finding severity level.

    Attributes:
        CRITICAL: Trivially guessable; replace immediately.
        HIGH:     Serious weakness.
        MEDIUM:   Moderate weakness.
        LOW:      Minor issue.
        INFO:     Informational observation; no direct risk.
    """

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def css_class(self) -> str:
        """Return a CSS class name for severity-based styling."""
        return f"severity-{self.value.lower()}"


class RiskLevel(str, Enum):
    """Qualitative risk level derived from a numeric risk score.

    Attributes:
        CRITICAL:   Score 90-100.
        HIGH:       Score 70-89.
        MEDIUM:     Score 40-69.
        LOW:        Score 10-39.
        NEGLIGIBLE: Score 0-9.
    """

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    NEGLIGIBLE = "NEGLIGIBLE"

    @classmethod
    def from_score(cls, score: float) -> RiskLevel:
        """Derive the qualitative level from a 0-100 numeric risk score."""
        if score >= 90:
            return cls.CRITICAL
        if score >= 70:
            return cls.HIGH
        if score >= 40:
            return cls.MEDIUM
        if score >= 10:
            return cls.LOW
        return cls.NEGLIGIBLE


# ========================== Core Models ====================================


class Finding(BaseModel):
    """A single observation produced by an analysis run.

    Attributes:
        id:             Unique identifier of the finding.
        timestamp:      UTC creation time.
        severity:       Qualitative severity rating.
        risk:           Qualitative risk level.
        confidence:     Confidence in the observation, in [0, 1].
        title:          Short, descriptive finding title.
        description:    Detailed explanation of the finding.
        evidence:       Supporting data (dicts/lists are stored as JSON text).
        recommendation: Suggested remediation action.
        references:     External reference citations.
        metadata:       Arbitrary structured extras.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        use_enum_values=False,
        extra="ignore",
    )

    id: UUID = Field(default_factory=uuid4)
    timestamp: _dt.datetime = Field(default_factory=_utcnow)
    severity: Severity = Field(..., description="Severity level of this finding")
    risk: RiskLevel = Field(
        default=RiskLevel.NEGLIGIBLE,
        description="Risk level of this finding",
    )
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    evidence: str = Field(default="")
    recommendation: str = Field(default="")
    references: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Auto-convert non-string evidence (dict, list) to JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class Risk(BaseModel):
    """Quantitative + qualitative risk assessment.

    The numeric *score* (0-100) is canonical; *level* is derived from it
    when not supplied.
    """

    model_config = ConfigDict(validate_assignment=True)

    score: float = Field(..., ge=0.0, le=100.0)
    level: Optional[RiskLevel] = None
    factors: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _derive_level(cls, data: Any) -> Any:
        """Derive *level* from *score* when not explicitly set."""
        if isinstance(data, dict) and data.get("level") is None and "score" in data:
            data = {**data, "level": RiskLevel.from_score(float(data["score"]))}
        return data


class ScanResult(BaseModel):
    """Aggregated result of a single analysis run.

    Bundles metadata, findings, risk summary, and timing information into
    one serialisable object suitable for console display and reports.

    Attributes:
        tool_name:  Name of the emitting tool.
        target:     What was analysed (a masked password, never the raw text).
        start_time: UTC timestamp when the run started.
        end_time:   UTC timestamp when the run ended.
        findings:   Individual findings.
        risk:       Overall risk assessment (optional).
        summary:    Human-readable summary text.
        metadata:   Structured analysis payload.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=False,
        extra="ignore",
    )

    tool_name: str = Field(..., min_length=1)
    target: str = Field(default="[password]")
    start_time: _dt.datetime = Field(default_factory=_utcnow)
    end_time: Optional[_dt.datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    risk: Optional[Risk] = None
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    # ------------------------------------------------------------------ #
    #  Derived properties
    # ------------------------------------------------------------------ #

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Count of findings grouped by severity name."""
        counts: dict[str, int] = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def highest_severity(self) -> Severity | None:
        """The most severe finding, or ``None`` when the list is empty."""
        if not self.findings:
            return None
        order = list(Severity)
        return min((f.severity for f in self.findings), key=order.index)

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    # ------------------------------------------------------------------ #
    #  Mutating helpers
    # ------------------------------------------------------------------ #

    def add_finding(self, finding: Finding) -> None:
        """Append a finding to the scan result."""
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> ScanResult:
        """Mark the run as complete by setting *end_time* and *summary*.

        If *summary* is ``None`` a default is generated from severity counts.

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        else:
            parts = [
                f"{sev}: {cnt}" for sev, cnt in self.severity_counts.items() if cnt > 0
            ]
            self.summary = (
                f"Analysis complete. "
                f"Findings: {len(self.findings)} "
                f"({', '.join(parts) if parts else 'none'})"
            )
        return self
