"""Tests for dictation text normalization."""
import pytest

from dictation.alignment.normalizer import count_reference_words, normalize_text, tokenize_text


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("The Cat, sat.", "the cat sat"),
        ("  Hello WORLD!!  ", "hello world"),
        ("don't", "dont"),
        ('"Quoted" (words) [and] {braces}; yes: no?', "quoted words and braces yes no"),
        ("well-known", "well-known"),
        ("", ""),
    ],
)
def test_normalize_text(raw, expected):
    assert normalize_text(raw) == expected


def test_punctuation_is_deleted_not_replaced_with_space():
    assert tokenize_text("don't stop") == ["dont", "stop"]
    assert tokenize_text("U.S.A.") == ["usa"]


def test_tokenize_collapses_whitespace_runs():
    assert tokenize_text("  the \t quick\n\nbrown  ") == ["the", "quick", "brown"]


def test_standalone_punctuation_leaves_no_empty_token():
    assert tokenize_text("a , b ; c") == ["a", "b", "c"]


@pytest.mark.parametrize("blank", ["", "   ", "\n\t", "... !! ?"])
def test_blank_input_yields_no_tokens(blank):
    assert tokenize_text(blank) == []


def test_count_reference_words(reference_sentence):
    assert count_reference_words(reference_sentence) == 9
    assert count_reference_words("") == 0


def test_non_string_input_raises_type_error():
    with pytest.raises(TypeError, match="must be a str"):
        tokenize_text(None)
