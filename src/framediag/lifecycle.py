"""Exit and restart of the running application."""

import logging
import subprocess
import sys

import psutil

from framediag.exceptions import LifecycleError

logger = logging.getLogger(__name__)


def current_command() -> list[str]:
    """Return the command line that started this process."""
    try:
        cmdline = psutil.Process().cmdline()
    except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
        cmdline = []
    return cmdline or [sys.executable, *sys.argv]


def spawn_current() -> subprocess.Popen:
    """Start a fresh instance of this program."""
    argv = current_command()
    try:
        return subprocess.Popen(argv)
    except OSError as e:
        raise LifecycleError(f"Failed to restart app: {e}") from e


def exit_app() -> None:
    """Terminate with status 0."""
    sys.exit(0)


def restart_app() -> None:
    """Spawn a new instance, then exit."""
    proc = spawn_current()
    logger.info("Restarted as pid %d", proc.pid)
    exit_app()
