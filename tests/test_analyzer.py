"""Tests for password composition, entropy and scoring."""
from __future__ import annotations

import math

import pytest

from passlens.analyzers.analyzer import PasswordAnalyzer, analyze
from passlens.analyzers.tables import COMMON_WORDS
from passlens.core.models import PasswordStrength


def test_empty_password_is_zero_result() -> None:
    result = analyze("")
    assert result.length == 0
    assert result.charset_size == 0
    assert result.entropy == 0.0
    assert result.strength_score == 0
    assert result.strength is PasswordStrength.VERY_WEAK
    assert result.sequences == ()
    assert result.dictionary_words == ()


def test_common_password_is_at_most_weak() -> None:
    result = analyze("password")
    assert result.dictionary_words == ("password",)
    assert result.strength_score == 27
    assert result.strength <= PasswordStrength.WEAK


def test_dictionary_match_is_case_insensitive() -> None:
    assert analyze("PaSsWoRd").dictionary_words == ("password",)


def test_full_character_set_has_pool_of_94() -> None:
    result = analyze("Tr0ub4dor&3")
    assert result.charset_size == 94
    assert result.has_lowercase and result.has_uppercase
    assert result.has_numbers and result.has_symbols
    assert result.entropy == pytest.approx(11 * math.log2(94))
    assert result.strength_score == 85
    assert result.strength is PasswordStrength.VERY_STRONG


def test_repeats_counted_without_sequences() -> None:
    result = analyze("aaa111")
    assert result.repeated_chars == 2
    assert result.sequences == ()
    assert result.charset_size == 36
    assert result.strength_score == 24


def test_long_run_counts_once() -> None:
    assert analyze("aaaaaaaaa").repeated_chars == 1


def test_line_terminators_do_not_form_repeats() -> None:
    assert analyze("x\n\n\ny").repeated_chars == 0
    assert analyze("x\r\r\ry").repeated_chars == 0
    assert analyze("x\t\t\ty").repeated_chars == 1


def test_sequences_and_words_listed_in_table_order() -> None:
    result = analyze("abc123")
    assert result.sequences == ("123", "abc")
    assert result.dictionary_words == ("abc123",)
    assert result.strength_score == 19
    assert result.strength is PasswordStrength.VERY_WEAK


def test_sequences_match_uppercase() -> None:
    assert "xyz" in analyze("XYZ").sequences


def test_score_clamped_at_zero() -> None:
    result = analyze("aaabbbcccdddeeefff")
    assert result.repeated_chars == 6
    assert result.strength_score == 0


def test_non_ascii_counts_as_symbol() -> None:
    result = analyze("пароль")
    assert result.has_symbols
    assert not result.has_lowercase
    assert result.charset_size == 32
    assert result.length == 6


@pytest.mark.parametrize(
    "password",
    ["", "a", "password", "Tr0ub4dor&3", "correct horse battery staple", "!!!"],
)
def test_invariants_hold(password: str) -> None:
    result = PasswordAnalyzer().analyze(password)
    assert 0 <= result.strength_score <= 100
    assert result.strength is PasswordStrength.from_score(result.strength_score)
    assert result.entropy >= 0
    assert result.charset_size in {
        sum(combo)
        for combo in (
            (a, b, c, d)
            for a in (0, 26) for b in (0, 26) for c in (0, 10) for d in (0, 32)
        )
    }


def test_analysis_is_deterministic() -> None:
    assert analyze("Summer2024!") == analyze("Summer2024!")


def test_weakness_lines() -> None:
    result = analyze("aaapassword123")
    assert result.weaknesses == [
        "1 repeated character pattern(s)",
        "Sequential patterns detected",
        "Contains common word(s)",
    ]
    assert result.has_weaknesses


def test_strength_buckets() -> None:
    assert PasswordStrength.from_score(19) is PasswordStrength.VERY_WEAK
    assert PasswordStrength.from_score(20) is PasswordStrength.WEAK
    assert PasswordStrength.from_score(59) is PasswordStrength.MEDIUM
    assert PasswordStrength.from_score(60) is PasswordStrength.STRONG
    assert PasswordStrength.from_score(80) is PasswordStrength.VERY_STRONG
    assert PasswordStrength.WEAK < PasswordStrength.STRONG


def test_every_dictionary_word_clamps_to_zero() -> None:
    result = analyze("".join(COMMON_WORDS))
    assert result.dictionary_words == COMMON_WORDS
    assert result.strength_score == 0


def test_very_long_single_character_password() -> None:
    result = analyze("z" * 10_000)
    assert result.length == 10_000
    assert result.repeated_chars == 1
    assert 0 <= result.strength_score <= 100


@pytest.mark.parametrize("password", ["", "abc", "naïve", "🔑key", "Tab\there"])
def test_length_is_code_point_count(password: str) -> None:
    assert analyze(password).length == len(password)


def test_adding_a_new_class_never_shrinks_charset() -> None:
    password = ""
    previous = 0
    for extra in ("q", "Q", "7", "%"):
        password += extra
        size = analyze(password).charset_size
        assert size >= previous
        previous = size
    assert previous == 94
