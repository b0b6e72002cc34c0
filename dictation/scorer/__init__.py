"""Word matching and attempt scoring for dictation."""
from .attempt import compare, is_all_correct, score_attempt
from .hints import hint_text, next_hint_word_count
from .word_matcher import find_closest_word, find_match_index, match_words

__all__ = [
    "compare",
    "find_closest_word",
    "find_match_index",
    "hint_text",
    "is_all_correct",
    "match_words",
    "next_hint_word_count",
    "score_attempt",
]
