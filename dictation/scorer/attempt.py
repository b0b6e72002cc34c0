"""Attempt-level scoring: compare a transcript with its reference sentence."""
from __future__ import annotations

import logging
from typing import Sequence

from ..alignment.normalizer import tokenize_text
from ..models.diagnostics import AttemptResult, WordDiagnostic, WordStatus
from ..rules import CORRECT_ATTEMPT_SCORE, INCORRECT_ATTEMPT_SCORE
from .word_matcher import match_words

log = logging.getLogger(__name__)


def is_all_correct(words: Sequence[WordDiagnostic], reference_word_count: int) -> bool:
    """Whether an attempt reproduces the whole reference sentence.

    The length check keeps a short transcript whose few words all match from
    being scored as fully correct.
    """
    return len(words) == reference_word_count and all(
        w.status is WordStatus.CORRECT for w in words
    )


def compare(user_text: str, reference_text: str) -> AttemptResult:
    """Score a dictation attempt against its reference sentence.

    Args:
        user_text: Transcript typed by the learner
        reference_text: Canonical sentence the learner heard

    Returns:
        AttemptResult with one WordDiagnostic per normalized user word

    Raises:
        TypeError: If either argument is not a str
    """
    user_words = tokenize_text(user_text)
    reference_words = tokenize_text(reference_text)

    words = tuple(match_words(user_words, reference_words))
    all_correct = is_all_correct(words, len(reference_words))

    log.debug(
        "compared %d user words with %d reference words: all_correct=%s",
        len(user_words), len(reference_words), all_correct,
    )
    return AttemptResult(
        all_correct=all_correct,
        words=words,
        user_text=user_text,
        correct_text=reference_text,
    )


def score_attempt(result: AttemptResult) -> int:
    """Points for an attempt: one for a fully correct sentence, none otherwise."""
    return CORRECT_ATTEMPT_SCORE if result.all_correct else INCORRECT_ATTEMPT_SCORE
