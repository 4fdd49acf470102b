"""Runtime configuration loaded from IMMICHFRAME_* variables."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from framediag.environ import is_truthy, parse_positive_int, read_env

DEFAULT_REFRESH_SECONDS = 5.0
DEFAULT_LOG_LEVEL = "WARNING"


class LogLevel(str, Enum):
    """Accepted log level names."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(slots=True, frozen=True)
class FrameConfig:
    """Settings for the overlay and logging."""

    debug_overlay: bool = False
    refresh_seconds: float = DEFAULT_REFRESH_SECONDS
    auto_restart_minutes: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None


def _log_level(value: str | None) -> str:
    level = (value or "").strip().upper()
    if level not in LogLevel.__members__:
        if level:
            logging.getLogger(__name__).warning(
                "Unknown log level %r, using %s", value, DEFAULT_LOG_LEVEL
            )
        return DEFAULT_LOG_LEVEL
    return level


def load_config(read: Callable[[str], str | None] = read_env) -> FrameConfig:
    """Build a FrameConfig from the environment."""
    refresh = parse_positive_int(read("DEBUG_OVERLAY_SECONDS"))
    return FrameConfig(
        debug_overlay=is_truthy(read("DEBUG_OVERLAY")),
        refresh_seconds=float(refresh) if refresh else DEFAULT_REFRESH_SECONDS,
        auto_restart_minutes=parse_positive_int(read("AUTO_RESTART_MINUTES")),
        log_level=_log_level(read("LOG_LEVEL")),
        log_file=read("LOG_FILE") or None,
    )
