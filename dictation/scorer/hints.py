"""Progressive hint reveal for dictation challenges."""
from __future__ import annotations


def _raw_words(reference_text: str):
    return reference_text.split()


def next_hint_word_count(
    current: int,
    reference_text: str,
    all_correct: bool,
    *,
    hint_enabled: bool = True,
) -> int:
    """How many leading reference words to reveal after a check.

    A correct attempt resets the hint; a failed one reveals one more word,
    up to the whole sentence. With hints disabled the count is left as is.

    Args:
        current: Words revealed so far
        reference_text: Reference sentence as shown to the learner
        all_correct: Outcome of the attempt just checked
        hint_enabled: Whether the learner has hints switched on

    Returns:
        New number of revealed words

    Raises:
        ValueError: If current is negative
    """
    if current < 0:
        raise ValueError(f"current must be >= 0, got {current}")
    if all_correct:
        return 0
    if not hint_enabled:
        return current
    return min(current + 1, len(_raw_words(reference_text)))


def hint_text(reference_text: str, word_count: int) -> str:
    """The first word_count words of the reference, as displayed in the hint."""
    if word_count < 0:
        raise ValueError(f"word_count must be >= 0, got {word_count}")
    return " ".join(_raw_words(reference_text)[:word_count])
