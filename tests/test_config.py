"""Tests for logging configuration."""
import logging

import pytest

from dictation import config


@pytest.mark.parametrize("level, expected", [
    ("debug", logging.DEBUG),
    (" INFO ", logging.INFO),
    (logging.ERROR, logging.ERROR),
])
def test_resolve_log_level(level, expected):
    assert config.resolve_log_level(level) == expected


def test_resolve_log_level_defaults_to_environment(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "ERROR")
    assert config.resolve_log_level() == logging.ERROR


def test_unknown_level_raises():
    with pytest.raises(ValueError, match="Unknown log level"):
        config.resolve_log_level("chatty")


def test_configure_logging_sets_root_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    config.configure_logging("debug")
    assert calls["level"] == logging.DEBUG
