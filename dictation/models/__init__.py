"""Diagnostic records produced by the dictation scorer."""
from .diagnostics import (
    AttemptResult,
    CharacterDiagnostic,
    CharStatus,
    WordDiagnostic,
    WordStatus,
)

__all__ = [
    "AttemptResult",
    "CharacterDiagnostic",
    "CharStatus",
    "WordDiagnostic",
    "WordStatus",
]
