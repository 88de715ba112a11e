"""
Password Analyzer
==================

Turns a raw password into a :class:`PasswordAnalysis`: character-class
composition, entropy, weakness detection, and a composite strength score.

Entropy uses the combinatorial model ``length * log2(pool_size)``. It
assumes every character is drawn uniformly and independently from the
classes detected in the password, not from the password's literal
character distribution. This is a known approximation and is kept for
compatibility with the scoring thresholds.

Strength score:

    min(length * 4, 40)
    + 10 per present class among {uppercase, lowercase, numbers}
    + 15 if symbols are present
    - 10 per repeated-character run
    -  5 per ascending sequence matched
    - 15 per common word matched
    clamped to [0, 100]

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import math
import re

from passlens.analyzers import tables
from passlens.core.models import PasswordAnalysis, PasswordStrength

_REPEAT_RE = re.compile(tables.REPEAT_PATTERN)


class PasswordAnalyzer:
    """Analyses password composition, entropy and weaknesses.

    The analyzer holds no state; one instance can serve any number of
    concurrent callers.

    Usage::

        analyzer = PasswordAnalyzer()
        result = analyzer.analyze("Tr0ub4dor&3")
        print(result.strength.value, f"{result.entropy:.1f} bits")
    """

    def analyze(self, password: str) -> PasswordAnalysis:
        """Analyse *password*. Never raises; ``""`` yields a zero result.

        Args:
            password: The password to analyse.

        Returns:
            PasswordAnalysis for *password*.
        """
        length = len(password)
        has_lowercase = any(c in tables.LOWERCASE for c in password)
        has_uppercase = any(c in tables.UPPERCASE for c in password)
        has_numbers = any(c in tables.DIGITS for c in password)
        has_symbols = any(c not in tables.ALPHANUMERIC for c in password)

        charset_size = self._charset_size(
            has_lowercase, has_uppercase, has_numbers, has_symbols
        )
        entropy = self._entropy(length, charset_size)

        repeated_chars = self._count_repeats(password)
        sequences = self._find_sequences(password)
        dictionary_words = self._find_dictionary_words(password)

        score = self._score(
            length,
            has_lowercase=has_lowercase,
            has_uppercase=has_uppercase,
            has_numbers=has_numbers,
            has_symbols=has_symbols,
            repeated_chars=repeated_chars,
            sequence_count=len(sequences),
            dictionary_count=len(dictionary_words),
        )

        return PasswordAnalysis(
            length=length,
            has_lowercase=has_lowercase,
            has_uppercase=has_uppercase,
            has_numbers=has_numbers,
            has_symbols=has_symbols,
            charset_size=charset_size,
            entropy=entropy,
            repeated_chars=repeated_chars,
            sequences=sequences,
            dictionary_words=dictionary_words,
            strength_score=score,
            strength=PasswordStrength.from_score(score),
        )

    # ------------------------------------------------------------------ #
    #  Composition and entropy
    # ------------------------------------------------------------------ #

    @staticmethod
    def _charset_size(
        has_lowercase: bool,
        has_uppercase: bool,
        has_numbers: bool,
        has_symbols: bool,
    ) -> int:
        sizes = tables.CLASS_SIZES
        return (
            sizes["lowercase"] * has_lowercase
            + sizes["uppercase"] * has_uppercase
            + sizes["numbers"] * has_numbers
            + sizes["symbols"] * has_symbols
        )

    @staticmethod
    def _entropy(length: int, charset_size: int) -> float:
        """Combinatorial entropy ``length * log2(max(charset_size, 1))``."""
        if length == 0:
            return 0.0
        return length * math.log2(max(charset_size, 1))

    # ------------------------------------------------------------------ #
    #  Weakness detection
    # ------------------------------------------------------------------ #

    @staticmethod
    def _count_repeats(password: str) -> int:
        """Count non-overlapping runs of 3+ identical characters."""
        return sum(1 for _ in _REPEAT_RE.finditer(password))

    @staticmethod
    def _find_sequences(password: str) -> tuple[str, ...]:
        lowered = password.lower()
        return tuple(seq for seq in tables.SEQUENCE_PATTERNS if seq in lowered)

    @staticmethod
    def _find_dictionary_words(password: str) -> tuple[str, ...]:
        lowered = password.lower()
        return tuple(word for word in tables.COMMON_WORDS if word in lowered)

    # ------------------------------------------------------------------ #
    #  Scoring
    # ------------------------------------------------------------------ #

    @staticmethod
    def _score(
        length: int,
        *,
        has_lowercase: bool,
        has_uppercase: bool,
        has_numbers: bool,
        has_symbols: bool,
        repeated_chars: int,
        sequence_count: int,
        dictionary_count: int,
    ) -> int:
        points = tables.CLASS_POINTS
        score = min(length * tables.LENGTH_POINTS_PER_CHAR, tables.LENGTH_POINTS_CAP)
        if has_uppercase:
            score += points["uppercase"]
        if has_lowercase:
            score += points["lowercase"]
        if has_numbers:
            score += points["numbers"]
        if has_symbols:
            score += points["symbols"]
        score -= repeated_chars * tables.REPEAT_PENALTY
        score -= sequence_count * tables.SEQUENCE_PENALTY
        score -= dictionary_count * tables.DICTIONARY_PENALTY
        return max(tables.SCORE_MIN, min(tables.SCORE_MAX, score))


_DEFAULT_ANALYZER = PasswordAnalyzer()


def analyze(password: str) -> PasswordAnalysis:
    """Analyse *password* with the default :class:`PasswordAnalyzer`."""
    return _DEFAULT_ANALYZER.analyze(password)
