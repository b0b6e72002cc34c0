"""Data model for character, word and attempt diagnostics."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class CharStatus(str, Enum):
    """Outcome of one aligned character position."""

    CORRECT = "correct"
    INCORRECT = "incorrect"  # substituted
    EXTRA = "extra"  # typed by the learner, absent from the reference
    MISSING = "missing"  # in the reference, omitted by the learner


class WordStatus(str, Enum):
    """Outcome of one matched word."""

    CORRECT = "correct"
    PARTIAL = "partial"


@dataclass(frozen=True)
class CharacterDiagnostic:
    """One aligned character between a user word and its reference word.

    Attributes:
        char: The character the learner typed, or the placeholder for a Missing position
        status: Alignment outcome for this position
        correct_char: The reference character (only for Incorrect and Missing)
    """
    char: str
    status: CharStatus
    correct_char: Optional[str] = None

    def __post_init__(self) -> None:
        needs_correct = self.status in (CharStatus.INCORRECT, CharStatus.MISSING)
        if needs_correct != (self.correct_char is not None):
            raise ValueError(
                f"correct_char must be set iff status is incorrect/missing "
                f"(status={self.status.value}, correct_char={self.correct_char!r})"
            )

    @property
    def is_correct(self) -> bool:
        return self.status is CharStatus.CORRECT


@dataclass(frozen=True)
class WordDiagnostic:
    """A user word, the reference word it was matched to, and their alignment.

    Attributes:
        user_word: Normalized user token
        correct_word: Matched reference token ("" when nothing could be matched)
        status: Correct iff both words are equal, Partial otherwise
        characters: Character-level alignment in reading order
    """
    user_word: str
    correct_word: str
    status: WordStatus
    characters: Tuple[CharacterDiagnostic, ...]

    @property
    def is_correct(self) -> bool:
        return self.status is WordStatus.CORRECT


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of comparing one submitted transcript with its reference sentence.

    Attributes:
        all_correct: Every word correct and as many words as the reference
        words: One diagnostic per user word, in the user's order
        user_text: Transcript as submitted (unnormalized)
        correct_text: Reference sentence as given (unnormalized)
    """
    all_correct: bool
    words: Tuple[WordDiagnostic, ...]
    user_text: str
    correct_text: str
