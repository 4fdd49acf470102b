"""Process listing via ps(1)."""

import logging
import subprocess
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from framediag.models import ProcessTable
from framediag.parsers import parse_listing_output

logger = logging.getLogger(__name__)

# argv -> decoded stdout, or None if the command could not be used
Runner = Callable[[Sequence[str]], str | None]


@dataclass(slots=True, frozen=True)
class ListingStrategy:
    """A named ps invocation that should print pid, ppid, rss and comm."""

    name: str
    argv: tuple[str, ...]


LISTING_STRATEGIES: tuple[ListingStrategy, ...] = (
    # "=" suppresses the column headers
    ListingStrategy("suppressed", ("ps", "-e", "-o", "pid=,ppid=,rss=,comm=")),
    # ps variants that reject the "=" form print a header instead
    ListingStrategy("headered", ("ps", "-e", "-o", "pid,ppid,rss,comm")),
)


def run_command(argv: Sequence[str]) -> str | None:
    """
    Run ``argv`` and return its stdout decoded as UTF-8.

    Returns None if the command is missing, exits non-zero or prints
    undecodable output. No timeout is applied.
    """
    try:
        proc = subprocess.run(list(argv), capture_output=True, check=False)
    except OSError as e:
        logger.debug("Cannot run %s: %s", argv[0], e)
        return None

    if proc.returncode != 0:
        logger.debug("%s exited with status %d", " ".join(argv), proc.returncode)
        return None

    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("%s produced non UTF-8 output", " ".join(argv))
        return None


def build_process_table(
    strategies: Iterable[ListingStrategy] = LISTING_STRATEGIES,
    run: Runner = run_command,
) -> ProcessTable | None:
    """
    Build a pid-keyed table of running processes.

    Strategies are tried in order until one yields at least one row. On a
    duplicate pid the last row wins. Returns None when no strategy produced
    usable rows.
    """
    for strategy in strategies:
        output = run(strategy.argv)
        if output is None:
            continue

        rows = parse_listing_output(output)
        if not rows:
            logger.debug("Listing strategy %r yielded no rows", strategy.name)
            continue

        return {row.pid: row for row in rows}

    logger.debug("No listing strategy produced a process table")
    return None
