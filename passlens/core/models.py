"""
PassLens Core Data Models
==========================

Pydantic models for the password analysis engine: the analysis value
object, the attacker-model enumeration, crack-time estimates, and the
report bundle handed to presentation code.

Every model is frozen. An analysis has no identity beyond its values, so
two equal passwords always produce equal analyses.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import enum
import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class PasswordStrength(str, enum.Enum):
    """Qualitative strength bucket of a 0-100 strength score.

    Thresholds (score):
    - [0, 20):   Very Weak
    - [20, 40):  Weak
    - [40, 60):  Medium
    - [60, 80):  Strong
    - [80, 100]: Very Strong
    """

    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"

    @classmethod
    def from_score(cls, score: float) -> PasswordStrength:
        """Map a strength score onto its bucket."""
        if score < 20:
            return cls.VERY_WEAK
        if score < 40:
            return cls.WEAK
        if score < 60:
            return cls.MEDIUM
        if score < 80:
            return cls.STRONG
        return cls.VERY_STRONG

    @property
    def rank(self) -> int:
        """Position in the ordering, 0 (Very Weak) to 4 (Very Strong)."""
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PasswordStrength):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PasswordStrength):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PasswordStrength):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PasswordStrength):
            return NotImplemented
        return self.rank >= other.rank


class AttackModel(str, enum.Enum):
    """Attacker model: a named guesses-per-second assumption.

    The rate and label of each member come from the constant tables
    below, so an invalid model identifier cannot reach the estimator.
    """

    ONLINE = "online"
    OFFLINE = "offline"
    GPU_ASSISTED = "gpu"

    @property
    def guesses_per_second(self) -> float:
        return _GUESS_RATES[self]

    @property
    def label(self) -> str:
        return _MODEL_LABELS[self]

    @classmethod
    def parse(cls, value: AttackModel | str) -> AttackModel:
        """Resolve a member from itself, its value, or its name.

        Raises:
            ValueError: If *value* names no attack model.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ValueError(
            f"Unknown attack model {value!r}; "
            f"expected one of {[m.value for m in cls]}"
        )


_GUESS_RATES: dict[AttackModel, float] = {
    AttackModel.ONLINE: 1e3,
    AttackModel.OFFLINE: 1e9,
    AttackModel.GPU_ASSISTED: 1e11,
}

_MODEL_LABELS: dict[AttackModel, str] = {
    AttackModel.ONLINE: "Online Attack (1K guesses/sec)",
    AttackModel.OFFLINE: "Offline Attack (1B guesses/sec)",
    AttackModel.GPU_ASSISTED: "GPU-Assisted (100B guesses/sec)",
}


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class PasswordAnalysis(BaseModel):
    """Structured analysis of one password.

    Attributes:
        length: Character count of the input.
        has_lowercase: Contains an ASCII lowercase letter.
        has_uppercase: Contains an ASCII uppercase letter.
        has_numbers: Contains an ASCII digit.
        has_symbols: Contains anything that is not an ASCII letter or digit.
        charset_size: Sum of the sizes of the present classes (26/26/10/32).
        entropy: Estimated bits, ``length * log2(charset_size)``.
        repeated_chars: Runs of three or more identical consecutive characters.
        sequences: Ascending three-character runs found, in table order.
        dictionary_words: Common words found, in table order.
        strength_score: Composite heuristic score in [0, 100].
        strength: Bucket of ``strength_score``.
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(default=0, ge=0)
    has_lowercase: bool = False
    has_uppercase: bool = False
    has_numbers: bool = False
    has_symbols: bool = False
    charset_size: int = Field(default=0, ge=0)
    entropy: float = Field(default=0.0, ge=0.0)
    repeated_chars: int = Field(default=0, ge=0)
    sequences: tuple[str, ...] = ()
    dictionary_words: tuple[str, ...] = ()
    strength_score: int = Field(default=0, ge=0, le=100)
    strength: PasswordStrength = PasswordStrength.VERY_WEAK

    @property
    def character_classes(self) -> dict[str, bool]:
        """Checklist of character classes, in display order."""
        return {
            "Lowercase": self.has_lowercase,
            "Uppercase": self.has_uppercase,
            "Numbers": self.has_numbers,
            "Symbols": self.has_symbols,
        }

    @property
    def has_weaknesses(self) -> bool:
        return bool(self.repeated_chars or self.sequences or self.dictionary_words)

    @property
    def weaknesses(self) -> list[str]:
        """Human-readable weakness lines for display."""
        lines: list[str] = []
        if self.repeated_chars > 0:
            lines.append(f"{self.repeated_chars} repeated character pattern(s)")
        if self.sequences:
            lines.append("Sequential patterns detected")
        if self.dictionary_words:
            lines.append("Contains common word(s)")
        return lines


class CrackTimeEstimate(BaseModel):
    """Average-case time to exhaust half the estimated keyspace.

    Attributes:
        seconds: Estimated time in seconds; always finite and non-negative.
        display: Human-readable rendering of ``seconds``.
        attack_model: Attacker model the estimate was made for.
        guesses_per_second: Guess rate of that model.
    """

    model_config = ConfigDict(frozen=True)

    seconds: float = Field(ge=0.0)
    display: str
    attack_model: AttackModel = AttackModel.OFFLINE
    guesses_per_second: float = 1e9

    @field_validator("seconds")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("seconds must be finite")
        return v


class HistorySample(BaseModel):
    """One point of the caller-owned (length, entropy) chart history."""

    model_config = ConfigDict(frozen=True)

    chars: int = Field(ge=0)
    entropy: float = Field(ge=0.0)


class PasswordReport(BaseModel):
    """Everything the presentation layer needs for one password."""

    model_config = ConfigDict(frozen=True)

    analysis: PasswordAnalysis
    crack_time: CrackTimeEstimate
    suggestions: tuple[str, ...] = ()
