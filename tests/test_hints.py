"""Tests for progressive hint reveal."""
import pytest

from dictation.scorer.hints import hint_text, next_hint_word_count

SENTENCE = "Higher education prepares students."


def test_failed_attempt_reveals_one_more_word():
    assert next_hint_word_count(0, SENTENCE, all_correct=False) == 1
    assert next_hint_word_count(2, SENTENCE, all_correct=False) == 3


def test_reveal_is_capped_at_sentence_length():
    assert next_hint_word_count(4, SENTENCE, all_correct=False) == 4


def test_correct_attempt_resets_hint():
    assert next_hint_word_count(3, SENTENCE, all_correct=True) == 0


def test_disabled_hints_keep_count():
    assert next_hint_word_count(2, SENTENCE, all_correct=False, hint_enabled=False) == 2


def test_hint_text():
    assert hint_text(SENTENCE, 0) == ""
    assert hint_text(SENTENCE, 2) == "Higher education"
    assert hint_text("  spaced   out  words ", 2) == "spaced out"
    assert hint_text(SENTENCE, 10) == SENTENCE


@pytest.mark.parametrize("call", [
    lambda: next_hint_word_count(-1, SENTENCE, all_correct=False),
    lambda: hint_text(SENTENCE, -1),
])
def test_negative_counts_raise(call):
    with pytest.raises(ValueError):
        call()
