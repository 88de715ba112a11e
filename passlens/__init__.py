"""
PassLens -- Password Strength Analyzer
=======================================

Estimates the strength of a candidate password: composition, entropy,
weakness detection, crack-time projections under several attacker models,
and remediation suggestions. All computation is local and stateless.

Modules:
    - passlens.analyzers: Analyzer, crack-time estimator, suggestion generator
    - passlens.core.models: Pydantic data models
    - passlens.core.engine: Facade producing reports and scan results
    - passlens.session: Caller-owned state (selected model, entropy history)
    - passlens.output: Console and report output
    - passlens.cli: Click-based command-line interface

Quick use::

    from passlens import analyze, estimate_crack_time, generate_suggestions
    from passlens import AttackModel

    analysis = analyze("Tr0ub4dor&3")
    estimate = estimate_crack_time(analysis.entropy, AttackModel.OFFLINE)
    tips = generate_suggestions(analysis)
"""

__version__ = "1.0.0"
__tool_name__ = "passlens"

from passlens.analyzers import analyze, estimate_crack_time, generate_suggestions
from passlens.core.models import (
    AttackModel,
    CrackTimeEstimate,
    PasswordAnalysis,
    PasswordReport,
    PasswordStrength,
)

__all__ = [
    "AttackModel",
    "CrackTimeEstimate",
    "PasswordAnalysis",
    "PasswordReport",
    "PasswordStrength",
    "analyze",
    "estimate_crack_time",
    "generate_suggestions",
]
