"""Combine parsed sources into a ResourceSnapshot."""

from collections.abc import Set

from framediag.models import U32_MAX, U64_MAX, ProcessTable, ResourceSnapshot
from framediag.parsers import parse_colon_kb

# comm prefix of the rendering engine's helper processes
WORKER_MARKER = "WebKit"

MEMINFO_FIELDS = {
    "mem_total_kb": "MemTotal",
    "mem_free_kb": "MemFree",
    "mem_available_kb": "MemAvailable",
    "swap_total_kb": "SwapTotal",
    "swap_free_kb": "SwapFree",
    "cma_total_kb": "CmaTotal",
    "cma_free_kb": "CmaFree",
}

STATUS_FIELDS = {
    "self_rss_kb": "VmRSS",
    "self_vmsize_kb": "VmSize",
}


def summarize_workers(
    table: ProcessTable,
    descendants: Set[int],
    marker: str = WORKER_MARKER,
) -> tuple[int, int]:
    """
    Sum resident memory of descendant worker processes.

    Returns ``(total_kb, count)``. Both saturate instead of growing past
    their unsigned bounds.
    """
    total_kb = 0
    count = 0
    for pid in descendants:
        row = table.get(pid)
        if row is None or not row.command_name.startswith(marker):
            continue
        total_kb = min(total_kb + row.resident_kb, U64_MAX)
        count = min(count + 1, U32_MAX)
    return total_kb, count


def _extract(text: str | None, fields: dict[str, str]) -> dict[str, int | None]:
    if text is None:
        return dict.fromkeys(fields)
    return {name: parse_colon_kb(text, key) for name, key in fields.items()}


def build_snapshot(
    meminfo: str | None,
    status: str | None,
    table: ProcessTable | None = None,
    descendants: Set[int] | None = None,
) -> ResourceSnapshot:
    """
    Assemble a snapshot from whatever sources were available.

    Each metric is extracted on its own, so a missing line only blanks its
    own field. Without a process table or descendant set the worker total
    and count are both None.
    """
    webkit_rss_kb: int | None = None
    webkit_process_count: int | None = None
    if table is not None and descendants is not None:
        webkit_rss_kb, webkit_process_count = summarize_workers(table, descendants)

    return ResourceSnapshot(
        **_extract(meminfo, MEMINFO_FIELDS),
        **_extract(status, STATUS_FIELDS),
        webkit_rss_kb=webkit_rss_kb,
        webkit_process_count=webkit_process_count,
    )
