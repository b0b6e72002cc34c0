"""Environment-driven settings for the dictation package."""
from __future__ import annotations

import logging
import os
from typing import Optional, Union

from .rules import DEFAULT_LOG_LEVEL

LOG_LEVEL = os.getenv("DICTATION_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def resolve_log_level(level: Optional[Union[str, int]] = None) -> int:
    """Turn a level name or number into a logging level.

    Args:
        level: Level name ("debug", "INFO", ...) or number. Falls back to
            DICTATION_LOG_LEVEL when None.

    Returns:
        Numeric logging level

    Raises:
        ValueError: If the name is not a known logging level
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Configure root logging for scripts and interactive sessions.

    The library never installs handlers on import; call this explicitly.
    """
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
