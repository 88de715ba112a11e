"""
PassLens Analyzers
===================

The three pure stages of password analysis, each usable on its own:

1. :mod:`passlens.analyzers.analyzer` -- composition, entropy, weaknesses, score
2. :mod:`passlens.analyzers.crack_time` -- brute-force time per attacker model
3. :mod:`passlens.analyzers.suggestions` -- ordered remediation checklist
"""

from passlens.analyzers.analyzer import PasswordAnalyzer, analyze
from passlens.analyzers.crack_time import (
    CrackTimeEstimator,
    estimate_crack_time,
    format_crack_time,
)
from passlens.analyzers.suggestions import SuggestionGenerator, generate_suggestions

__all__ = [
    "CrackTimeEstimator",
    "PasswordAnalyzer",
    "SuggestionGenerator",
    "analyze",
    "estimate_crack_time",
    "format_crack_time",
    "generate_suggestions",
]
