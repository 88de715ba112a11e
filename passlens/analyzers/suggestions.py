"""
Suggestion Generator
=====================

Turns a :class:`PasswordAnalysis` into an ordered remediation checklist.
"""

from __future__ import annotations

from typing import Callable

from passlens.core.models import PasswordAnalysis

MIN_RECOMMENDED_LENGTH: int = 12

AFFIRMATION: str = "Excellent! Your password is strong."

# Evaluated top to bottom; every rule that fires contributes its message.
SUGGESTION_RULES: tuple[tuple[Callable[[PasswordAnalysis], bool], str], ...] = (
    (
        lambda a: a.length < MIN_RECOMMENDED_LENGTH,
        f"Increase length to at least {MIN_RECOMMENDED_LENGTH} characters",
    ),
    (lambda a: not a.has_uppercase, "Add uppercase letters (A-Z)"),
    (lambda a: not a.has_lowercase, "Add lowercase letters (a-z)"),
    (lambda a: not a.has_numbers, "Include numbers (0-9)"),
    (lambda a: not a.has_symbols, "Add special symbols (!@#$%^&*)"),
    (lambda a: a.repeated_chars > 0, 'Avoid repeated characters (e.g., "aaa")'),
    (lambda a: bool(a.sequences), 'Avoid sequential patterns (e.g., "123", "abc")'),
    (lambda a: bool(a.dictionary_words), "Avoid common dictionary words"),
)


class SuggestionGenerator:
    """Builds the remediation list for an analysis. Never returns ``[]``."""

    def generate(self, analysis: PasswordAnalysis) -> list[str]:
        suggestions = [message for applies, message in SUGGESTION_RULES if applies(analysis)]
        if not suggestions:
            suggestions.append(AFFIRMATION)
        return suggestions


_DEFAULT_GENERATOR = SuggestionGenerator()


def generate_suggestions(analysis: PasswordAnalysis) -> list[str]:
    """Generate suggestions with the default :class:`SuggestionGenerator`."""
    return _DEFAULT_GENERATOR.generate(analysis)
