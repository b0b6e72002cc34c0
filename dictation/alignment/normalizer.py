"""Text normalization for dictation comparison."""
from __future__ import annotations

import re
from typing import List

from ..rules import STRIP_PUNCTUATION

_PUNCTUATION_RE = re.compile("[" + re.escape("".join(sorted(STRIP_PUNCTUATION))) + "]")
_WHITESPACE_RE = re.compile(r"\s+")


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def normalize_text(text: str) -> str:
    """Lowercase text, delete punctuation and trim surrounding whitespace.

    Punctuation is removed outright, so "don't" becomes "dont" rather than "don t".

    Args:
        text: Raw transcript or reference sentence

    Returns:
        Normalized string (may still contain inner whitespace runs)
    """
    text = _require_str(text, "text").lower()
    return _PUNCTUATION_RE.sub("", text).strip()


def tokenize_text(text: str) -> List[str]:
    """Normalize text and split it into non-empty word tokens.

    Example: "The Cat, sat." -> ["the", "cat", "sat"]

    Args:
        text: Raw transcript or reference sentence

    Returns:
        List of normalized tokens (empty for blank or punctuation-only input)
    """
    normalized = normalize_text(text)
    return [tok for tok in _WHITESPACE_RE.split(normalized) if tok]


def count_reference_words(text: str) -> int:
    """Number of normalized tokens in a reference sentence."""
    return len(tokenize_text(text))
