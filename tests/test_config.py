"""Tests for environment-driven configuration."""

from framediag.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_REFRESH_SECONDS,
    FrameConfig,
    LogLevel,
    load_config,
)


def test_defaults():
    """No variables set yields the defaults."""
    config = load_config()

    assert config == FrameConfig()
    assert config.refresh_seconds == DEFAULT_REFRESH_SECONDS
    assert config.auto_restart_minutes is None
    assert config.log_level == DEFAULT_LOG_LEVEL
    assert config.log_file is None
    assert config.debug_overlay is False


def test_from_environment(monkeypatch):
    monkeypatch.setenv("IMMICHFRAME_DEBUG_OVERLAY", "yes")
    monkeypatch.setenv("IMMICHFRAME_DEBUG_OVERLAY_SECONDS", "2")
    monkeypatch.setenv("IMMICHFRAME_AUTO_RESTART_MINUTES", "120")
    monkeypatch.setenv("IMMICHFRAME_LOG_LEVEL", "debug")
    monkeypatch.setenv("IMMICHFRAME_LOG_FILE", "/tmp/framediag.log")

    config = load_config()

    assert config.debug_overlay is True
    assert config.refresh_seconds == 2.0
    assert config.auto_restart_minutes == 120
    assert config.log_level == "DEBUG"
    assert config.log_file == "/tmp/framediag.log"


def test_invalid_values_fall_back():
    values = {
        "DEBUG_OVERLAY": "maybe",
        "DEBUG_OVERLAY_SECONDS": "0",
        "AUTO_RESTART_MINUTES": "soon",
        "LOG_LEVEL": "chatty",
        "LOG_FILE": "",
    }

    config = load_config(values.get)

    assert config == FrameConfig()


def test_config_is_frozen():
    config = FrameConfig()
    try:
        config.log_level = "DEBUG"
        raise AssertionError("Should have raised FrozenInstanceError")
    except AttributeError:
        pass


def test_log_level_enum_matches_accepted_names():
    assert [level.value for level in LogLevel] == ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
