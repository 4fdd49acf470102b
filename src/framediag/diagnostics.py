"""Entry point for Linux resource diagnostics."""

import logging
import os
import sys
from pathlib import Path

from framediag.aggregate import build_snapshot
from framediag.closure import descendant_closure
from framediag.listing import build_process_table
from framediag.models import ResourceSnapshot

logger = logging.getLogger(__name__)

MEMINFO_PATH = Path("/proc/meminfo")
STATUS_PATH = Path("/proc/self/status")


def is_linux() -> bool:
    """Return True if running on Linux."""
    return sys.platform.startswith("linux")


def read_source(path: Path) -> str | None:
    """Read a pseudo-file as UTF-8, returning None on any failure."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", path, e)
        return None


def get_resource_stats() -> ResourceSnapshot | None:
    """
    Take a memory snapshot of the host, this process and its WebKit workers.

    Returns None on platforms other than Linux. On Linux a snapshot is
    always returned, possibly with some or all fields set to None.
    """
    if not is_linux():
        return None

    meminfo = read_source(MEMINFO_PATH)
    status = read_source(STATUS_PATH)

    table = build_process_table()
    descendants = descendant_closure(table, os.getpid()) if table is not None else None

    return build_snapshot(meminfo, status, table, descendants)
