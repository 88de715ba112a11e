"""
Scoring Tables
===============

Constant data consumed by the analyzer. Extending a table changes what is
detected without touching the algorithm.
"""

from __future__ import annotations

import string

LOWERCASE: frozenset[str] = frozenset(string.ascii_lowercase)
UPPERCASE: frozenset[str] = frozenset(string.ascii_uppercase)
DIGITS: frozenset[str] = frozenset(string.digits)
ALPHANUMERIC: frozenset[str] = LOWERCASE | UPPERCASE | DIGITS

# Pool size contributed by each character class when present.
# Anything that is not an ASCII letter or digit counts as a symbol.
CLASS_SIZES: dict[str, int] = {
    "lowercase": 26,
    "uppercase": 26,
    "numbers": 10,
    "symbols": 32,
}

# Ascending three-character runs, matched case-insensitively.
SEQUENCE_PATTERNS: tuple[str, ...] = (
    "012", "123", "234", "345", "456", "567", "678", "789",
    "abc", "bcd", "cde", "def", "efg", "fgh", "ghi", "hij",
    "ijk", "jkl", "klm", "lmn", "mno", "nop", "opq", "pqr",
    "qrs", "rst", "stu", "tuv", "uvw", "vwx", "wxy", "xyz",
)

# Common weak passwords/words, matched as case-insensitive substrings.
COMMON_WORDS: tuple[str, ...] = (
    "password", "welcome", "admin", "letmein", "monkey", "dragon",
    "master", "sunshine", "princess", "qwerty", "abc123", "123456",
    "iloveyou",
)

# Runs of one character repeated at least three times in a row. Line
# terminators never start a run.
REPEAT_PATTERN: str = r"([^\n\r\u2028\u2029])\1{2,}"

# Score contributions.
LENGTH_POINTS_PER_CHAR: int = 4
LENGTH_POINTS_CAP: int = 40
CLASS_POINTS: dict[str, int] = {
    "uppercase": 10,
    "lowercase": 10,
    "numbers": 10,
    "symbols": 15,
}
REPEAT_PENALTY: int = 10
SEQUENCE_PENALTY: int = 5
DICTIONARY_PENALTY: int = 15

SCORE_MIN: int = 0
SCORE_MAX: int = 100
