"""Greedy word matching between a dictation transcript and its reference."""
from __future__ import annotations

import logging
from functools import reduce
from typing import List, Optional, Sequence, Set

from ..alignment.edit_distance import align_characters, levenshtein_distance
from ..models.diagnostics import WordDiagnostic, WordStatus

log = logging.getLogger(__name__)


def _longest(candidates: Sequence[int], reference_words: Sequence[str]) -> int:
    """Pick the longest candidate; on equal length the earlier candidate is kept."""
    return reduce(
        lambda best, cand: best if len(reference_words[best]) >= len(reference_words[cand]) else cand,
        candidates,
    )


def find_match_index(
    user_word: str, reference_words: Sequence[str], used: Set[int]
) -> Optional[int]:
    """Find the reference word a user word most likely corresponds to.

    Tiers are tried in order and the first one with a candidate wins:
      1. prefix    -> first unused reference word starting with user_word
      2. substring -> longest unused reference word containing user_word
      3. distance  -> longest unused reference word at minimum edit distance
      4. none      -> every reference word is already consumed

    Args:
        user_word: Normalized user token
        reference_words: Normalized reference tokens
        used: Indices of reference words already matched in this attempt

    Returns:
        Index into reference_words, or None if no unused word remains
    """
    available = [j for j in range(len(reference_words)) if j not in used]
    if not available:
        log.debug("no reference words left for %r", user_word)
        return None

    for j in available:
        if reference_words[j].startswith(user_word):
            log.debug("prefix match %r -> %r (#%d)", user_word, reference_words[j], j)
            return j

    containing = [j for j in available if user_word in reference_words[j]]
    if containing:
        j = _longest(containing, reference_words)
        log.debug("substring match %r -> %r (#%d)", user_word, reference_words[j], j)
        return j

    distances = {j: levenshtein_distance(user_word, reference_words[j]) for j in available}
    min_distance = min(distances.values())
    closest = [j for j in available if distances[j] == min_distance]
    j = _longest(closest, reference_words)
    log.debug(
        "edit-distance match %r -> %r (#%d, distance=%d)",
        user_word, reference_words[j], j, min_distance,
    )
    return j


def match_words(user_words: Sequence[str], reference_words: Sequence[str]) -> List[WordDiagnostic]:
    """Match each user word to a reference word and align their characters.

    Matching is greedy and without replacement: user words are processed left
    to right and a reference word consumed by an earlier user word is never
    offered again, even if a later user word would fit it better.

    Args:
        user_words: Normalized user tokens
        reference_words: Normalized reference tokens

    Returns:
        One WordDiagnostic per user word, in the user's order
    """
    used: Set[int] = set()
    out: List[WordDiagnostic] = []

    for user_word in user_words:
        idx = find_match_index(user_word, reference_words, used)
        if idx is None:
            correct_word = ""
        else:
            correct_word = reference_words[idx]
            used.add(idx)

        out.append(
            WordDiagnostic(
                user_word=user_word,
                correct_word=correct_word,
                status=WordStatus.CORRECT if user_word == correct_word else WordStatus.PARTIAL,
                characters=tuple(align_characters(user_word, correct_word)),
            )
        )
    return out


def find_closest_word(word: str, word_list: Sequence[str]) -> str:
    """Closest word by case-insensitive edit distance.

    The first word at the minimum distance wins. Returns "" for an empty list.
    """
    min_distance: Optional[int] = None
    closest = ""
    for target in word_list:
        distance = levenshtein_distance(word.lower(), target.lower())
        if min_distance is None or distance < min_distance:
            min_distance = distance
            closest = target
    return closest
