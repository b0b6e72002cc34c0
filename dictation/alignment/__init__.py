"""Normalization and character alignment for dictation scoring."""
from .edit_distance import align_characters, build_distance_table, levenshtein_distance
from .normalizer import count_reference_words, normalize_text, tokenize_text

__all__ = [
    "align_characters",
    "build_distance_table",
    "count_reference_words",
    "levenshtein_distance",
    "normalize_text",
    "tokenize_text",
]
