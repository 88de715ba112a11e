"""
PassLens Core Module
=====================

Data models for the password analysis engine. The engine facade lives in
:mod:`passlens.core.engine`.
"""

from passlens.core.models import (
    AttackModel,
    CrackTimeEstimate,
    HistorySample,
    PasswordAnalysis,
    PasswordReport,
    PasswordStrength,
)

__all__ = [
    "AttackModel",
    "CrackTimeEstimate",
    "HistorySample",
    "PasswordAnalysis",
    "PasswordReport",
    "PasswordStrength",
]
