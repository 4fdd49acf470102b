"""Persistence of the frame URL in a per-user settings file."""

import logging
import os
import sys
from pathlib import Path

from framediag.exceptions import SettingsError

logger = logging.getLogger(__name__)

APP_DIR_NAME = "immichFrame"
SETTINGS_FILE = "Settings.txt"
DEFAULT_URL = "https://demo.immichframe.online/"


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise SettingsError(f"Failed to get home directory: {e}") from e


def _base_dir() -> Path:
    if sys.platform.startswith("linux"):
        # relative XDG values are ignored
        config_home = os.environ.get("XDG_CONFIG_HOME")
        if config_home and Path(config_home).is_absolute():
            return Path(config_home) / APP_DIR_NAME
        return _home() / ".config" / APP_DIR_NAME

    home = _home()
    if sys.platform.startswith("win"):
        return home / "AppData" / "Roaming" / APP_DIR_NAME
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / APP_DIR_NAME
    return home


def settings_dir() -> Path:
    """Return the settings directory, creating it if needed."""
    path = _base_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SettingsError(f"Failed to create directory: {e}") from e
    return path


def settings_path() -> Path:
    return settings_dir() / SETTINGS_FILE


def save_url(url: str) -> None:
    """Write ``url`` verbatim to the settings file."""
    path = settings_path()
    try:
        f = path.open("w", encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Failed to open file: {e}") from e
    with f:
        try:
            f.write(url)
        except OSError as e:
            raise SettingsError(f"Failed to write to file: {e}") from e
    logger.info("Saved URL to %s", path)


def load_url() -> str:
    """Return the settings file contents verbatim."""
    path = settings_path()
    try:
        f = path.open(encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Failed to open file: {e}") from e
    with f:
        try:
            return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsError(f"Failed to read file: {e}") from e


def resolve_url() -> str:
    """Return the saved URL, or DEFAULT_URL if none is saved."""
    try:
        saved = load_url()
    except SettingsError as e:
        logger.warning("Error loading saved URL: %s", e)
        return DEFAULT_URL
    return saved if saved.strip() else DEFAULT_URL
