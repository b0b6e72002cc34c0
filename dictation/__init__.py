"""Dictation scoring: compare a typed transcript with its reference sentence.

    >>> from dictation import compare
    >>> compare("The Cat, sat.", "the cat sat").all_correct
    True
"""
from .alignment import align_characters, levenshtein_distance, normalize_text, tokenize_text
from .models import AttemptResult, CharacterDiagnostic, CharStatus, WordDiagnostic, WordStatus
from .scorer import (
    compare,
    find_closest_word,
    hint_text,
    is_all_correct,
    match_words,
    next_hint_word_count,
    score_attempt,
)

__all__ = [
    "AttemptResult",
    "CharacterDiagnostic",
    "CharStatus",
    "WordDiagnostic",
    "WordStatus",
    "align_characters",
    "compare",
    "find_closest_word",
    "hint_text",
    "is_all_correct",
    "levenshtein_distance",
    "match_words",
    "next_hint_word_count",
    "normalize_text",
    "score_attempt",
    "tokenize_text",
]
