from pathlib import Path

import pytest

from lispy import config
from lispy.errors import LispyConfigError


def test_defaults(monkeypatch):
    for var in ("LISPY_PROMPT", "LISPY_HISTORY_FILE", "LISPY_COLOR", "LISPY_LOG_LEVEL", "LISPY_PRINT_OPTIONS"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == "lispy> "
    assert config.get_history_file() == Path.home() / ".lispy_history"
    assert config.use_color() is False
    assert config.get_log_level() == "WARNING"
    assert config.get_print_options() is None


def test_history_file(monkeypatch, tmp_path):
    monkeypatch.setenv("LISPY_HISTORY_FILE", str(tmp_path / "hist"))
    assert config.get_history_file() == tmp_path / "hist"
    monkeypatch.setenv("LISPY_HISTORY_FILE", "")
    assert config.get_history_file() is None


def test_color(monkeypatch):
    monkeypatch.setenv("LISPY_COLOR", "1")
    assert config.use_color() is True
    monkeypatch.setenv("LISPY_COLOR", "yes")
    with pytest.raises(LispyConfigError):
        config.use_color()


def test_log_level(monkeypatch):
    monkeypatch.setenv("LISPY_LOG_LEVEL", "debug")
    assert config.get_log_level() == "DEBUG"
    monkeypatch.setenv("LISPY_LOG_LEVEL", "chatty")
    with pytest.raises(LispyConfigError):
        config.get_log_level()


def test_print_options(monkeypatch):
    monkeypatch.setenv("LISPY_PRINT_OPTIONS", ' {"max_depth": 2} ')
    assert config.get_print_options() == '{"max_depth": 2}'
    monkeypatch.setenv("LISPY_PRINT_OPTIONS", "  ")
    assert config.get_print_options() is None
