"""Edit distance and character-level alignment between two words."""
from __future__ import annotations

from typing import List

from ..models.diagnostics import CharacterDiagnostic, CharStatus
from ..rules import MISSING_CHAR_PLACEHOLDER


def build_distance_table(user_word: str, correct_word: str) -> List[List[int]]:
    """Classic Levenshtein DP table with unit costs.

    dp[i][j] is the edit distance between user_word[:i] and correct_word[:j].

    Args:
        user_word: Word typed by the learner (length m)
        correct_word: Reference word (length n)

    Returns:
        (m + 1) x (n + 1) table of distances
    """
    m, n = len(user_word), len(correct_word)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if user_word[i - 1] == correct_word[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j - 1],  # substitution
                    dp[i - 1][j],  # extra user char
                    dp[i][j - 1],  # missing reference char
                )
    return dp


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character edits turning a into b."""
    return build_distance_table(a, b)[len(a)][len(b)]


def align_characters(user_word: str, correct_word: str) -> List[CharacterDiagnostic]:
    """Align a user word to its reference word character by character.

    Backtraces the distance table from the end, preferring at each step:
    match, substitution, extra user character, missing reference character.

    Args:
        user_word: Normalized word typed by the learner
        correct_word: Matched reference word ("" when nothing matched)

    Returns:
        Character diagnostics in left-to-right reading order
    """
    m, n = len(user_word), len(correct_word)

    if m == 0:
        return [
            CharacterDiagnostic(MISSING_CHAR_PLACEHOLDER, CharStatus.MISSING, correct_char=ch)
            for ch in correct_word
        ]
    if n == 0:
        return [CharacterDiagnostic(ch, CharStatus.EXTRA) for ch in user_word]

    dp = build_distance_table(user_word, correct_word)

    alignment: List[CharacterDiagnostic] = []
    i, j = m, n
    while i > 0 or j > 0:
        if i > 0 and j > 0 and user_word[i - 1] == correct_word[j - 1]:
            alignment.append(CharacterDiagnostic(user_word[i - 1], CharStatus.CORRECT))
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            alignment.append(
                CharacterDiagnostic(
                    user_word[i - 1], CharStatus.INCORRECT, correct_char=correct_word[j - 1]
                )
            )
            i -= 1
            j -= 1
        elif i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            alignment.append(CharacterDiagnostic(user_word[i - 1], CharStatus.EXTRA))
            i -= 1
        elif j > 0 and dp[i][j] == dp[i][j - 1] + 1:
            alignment.append(
                CharacterDiagnostic(
                    MISSING_CHAR_PLACEHOLDER, CharStatus.MISSING, correct_char=correct_word[j - 1]
                )
            )
            j -= 1
        else:
            raise RuntimeError(f"inconsistent distance table at ({i}, {j})")

    # built end-to-start
    alignment.reverse()
    return alignment
