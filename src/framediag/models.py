"""Data models for framediag."""

from dataclasses import asdict, dataclass

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


@dataclass(slots=True, frozen=True)
class ProcessRow:
    """One entry of a process listing."""

    pid: int
    parent_pid: int
    resident_kb: int
    command_name: str


# pid -> row, pid unique within one listing
ProcessTable = dict[int, ProcessRow]


@dataclass(slots=True, frozen=True)
class ResourceSnapshot:
    """
    Point-in-time memory figures, all in kibibytes.

    Every field is independently optional. ``None`` means the value could
    not be measured, which is distinct from a measured zero.
    """

    mem_total_kb: int | None = None
    mem_free_kb: int | None = None
    mem_available_kb: int | None = None
    swap_total_kb: int | None = None
    swap_free_kb: int | None = None
    cma_total_kb: int | None = None
    cma_free_kb: int | None = None
    self_rss_kb: int | None = None
    self_vmsize_kb: int | None = None
    webkit_rss_kb: int | None = None
    webkit_process_count: int | None = None

    def to_dict(self) -> dict[str, int | None]:
        """Return the snapshot as a plain dict."""
        return asdict(self)
