"""Shared fixtures for framediag tests."""

import logging

import pytest

from framediag.models import ProcessRow


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep settings and IMMICHFRAME_* variables away from the real user."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in [
        "IMMICHFRAME_DEBUG_OVERLAY",
        "IMMICHFRAME_DEBUG_OVERLAY_SECONDS",
        "IMMICHFRAME_AUTO_RESTART_MINUTES",
        "IMMICHFRAME_LOG_LEVEL",
        "IMMICHFRAME_LOG_FILE",
    ]:
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def webkit_table():
    """A bash shell with two WebKit descendants."""
    rows = [
        ProcessRow(10, 1, 1000, "bash"),
        ProcessRow(20, 10, 5000, "WebKitWebProcess"),
        ProcessRow(30, 20, 3000, "WebKitNetworkProcess"),
    ]
    return {row.pid: row for row in rows}


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger("framediag")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
