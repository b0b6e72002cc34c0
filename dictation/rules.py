"""Normalization and diagnostic rules for dictation scoring."""
from __future__ import annotations

# Punctuation deleted before comparison (not replaced with a space: "don't" -> "dont")
STRIP_PUNCTUATION = frozenset(".,!?;:'\"()[]{}")

# Placeholder shown in place of a reference character the learner omitted
MISSING_CHAR_PLACEHOLDER = "_"

# Default level for configure_logging() when DICTATION_LOG_LEVEL is unset
DEFAULT_LOG_LEVEL = "WARNING"

# Points awarded per attempt
CORRECT_ATTEMPT_SCORE = 1
INCORRECT_ATTEMPT_SCORE = 0
