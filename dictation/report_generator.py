"""Boundary payloads for the presentation and progress-logging layers.

Both collaborators consume camelCase JSON, e.g.:

    {"userWord": "bat", "correctWord": "cat", "status": "partial",
     "characters": [{"char": "b", "status": "incorrect", "isCorrect": false,
                     "correctChar": "c"}, ...]}
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models.diagnostics import (
    AttemptResult,
    CharacterDiagnostic,
    CharStatus,
    WordDiagnostic,
    WordStatus,
)
from .scorer.attempt import score_attempt


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CharacterFeedback(_CamelModel):
    char: str
    status: CharStatus
    is_correct: bool
    correct_char: Optional[str] = None


class WordFeedback(_CamelModel):
    user_word: str
    correct_word: str
    status: WordStatus
    characters: List[CharacterFeedback]


class AttemptFeedback(_CamelModel):
    all_correct: bool
    user_text: str
    correct_text: str
    comparison: List[WordFeedback]


class AiFeedback(_CamelModel):
    all_correct: bool
    comparison: List[WordFeedback]


class AttemptRecord(_CamelModel):
    """One logged attempt at a challenge sentence."""

    sentence_index: int = Field(ge=0)
    user_answer: str
    correct_answer: str
    ai_feedback: AiFeedback
    score: int
    attempt_number: int = Field(default=1, ge=1)
    created_at: datetime


def _character_feedback(c: CharacterDiagnostic) -> CharacterFeedback:
    return CharacterFeedback(
        char=c.char,
        status=c.status,
        is_correct=c.is_correct,
        correct_char=c.correct_char,
    )


def _word_feedback(w: WordDiagnostic) -> WordFeedback:
    return WordFeedback(
        user_word=w.user_word,
        correct_word=w.correct_word,
        status=w.status,
        characters=[_character_feedback(c) for c in w.characters],
    )


def build_feedback(result: AttemptResult) -> AttemptFeedback:
    """Feedback payload rendered by the lesson player."""
    return AttemptFeedback(
        all_correct=result.all_correct,
        user_text=result.user_text,
        correct_text=result.correct_text,
        comparison=[_word_feedback(w) for w in result.words],
    )


def build_attempt_record(
    result: AttemptResult,
    sentence_index: int,
    *,
    attempt_number: int = 1,
    created_at: Optional[datetime] = None,
) -> AttemptRecord:
    """Build the record handed to progress logging for one attempt.

    Args:
        result: Outcome of compare()
        sentence_index: Position of the challenge sentence within its lesson
        attempt_number: 1-based attempt counter for this sentence
        created_at: Timestamp of the attempt (defaults to now, UTC)

    Returns:
        AttemptRecord ready for serialization

    Raises:
        pydantic.ValidationError: On a negative sentence_index or attempt_number < 1
    """
    return AttemptRecord(
        sentence_index=sentence_index,
        user_answer=result.user_text,
        correct_answer=result.correct_text,
        ai_feedback=AiFeedback(
            all_correct=result.all_correct,
            comparison=[_word_feedback(w) for w in result.words],
        ),
        score=score_attempt(result),
        attempt_number=attempt_number,
        created_at=created_at or datetime.now(timezone.utc),
    )


def feedback_to_dict(result: AttemptResult) -> Dict[str, Any]:
    """JSON-ready camelCase dict; correctChar is omitted where it does not apply."""
    return build_feedback(result).model_dump(mode="json", by_alias=True, exclude_none=True)
