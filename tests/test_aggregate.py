"""Tests for snapshot aggregation."""

from framediag.aggregate import WORKER_MARKER, build_snapshot, summarize_workers
from framediag.models import U32_MAX, U64_MAX, ProcessRow, ResourceSnapshot

MEMINFO = "MemTotal:    16384000 kB\nMemFree:     512000 kB\n"
STATUS = "VmRSS:\t   20000 kB\n"


class TestSummarizeWorkers:
    """Tests for summarize_workers."""

    def test_scenario(self, webkit_table):
        assert summarize_workers(webkit_table, {20, 30}) == (8000, 2)

    def test_marker(self):
        assert WORKER_MARKER == "WebKit"

    def test_non_descendants_ignored(self, webkit_table):
        assert summarize_workers(webkit_table, {20}) == (5000, 1)

    def test_non_workers_ignored(self, webkit_table):
        """bash is a descendant here but not a worker."""
        assert summarize_workers(webkit_table, {10}) == (0, 0)

    def test_marker_must_be_prefix(self):
        table = {
            1: ProcessRow(1, 0, 10, "MyWebKitProcess"),
            2: ProcessRow(2, 0, 20, "webkitwebprocess"),
            3: ProcessRow(3, 0, 30, "WebKit"),
        }
        assert summarize_workers(table, {1, 2, 3}) == (30, 1)

    def test_missing_pid_ignored(self, webkit_table):
        assert summarize_workers(webkit_table, {20, 999}) == (5000, 1)

    def test_measured_zero(self, webkit_table):
        assert summarize_workers(webkit_table, set()) == (0, 0)

    def test_total_saturates(self):
        table = {
            1: ProcessRow(1, 0, U64_MAX, "WebKitWebProcess"),
            2: ProcessRow(2, 0, 5, "WebKitNetworkProcess"),
        }
        assert summarize_workers(table, {1, 2}) == (U64_MAX, 2)

    def test_count_saturates(self, monkeypatch):
        monkeypatch.setattr("framediag.aggregate.U32_MAX", 2)
        table = {pid: ProcessRow(pid, 0, 1, "WebKitWebProcess") for pid in range(1, 6)}
        assert summarize_workers(table, set(table)) == (5, 2)
        assert U32_MAX == 2**32 - 1


class TestBuildSnapshot:
    """Tests for build_snapshot."""

    def test_scenario_text_sources(self):
        snapshot = build_snapshot(MEMINFO, STATUS)

        assert snapshot.mem_total_kb == 16384000
        assert snapshot.mem_free_kb == 512000
        assert snapshot.self_rss_kb == 20000
        assert snapshot.mem_available_kb is None
        assert snapshot.self_vmsize_kb is None

    def test_all_sources_missing(self):
        assert build_snapshot(None, None) == ResourceSnapshot()

    def test_meminfo_missing_keeps_status(self):
        snapshot = build_snapshot(None, STATUS)

        assert snapshot.mem_total_kb is None
        assert snapshot.self_rss_kb == 20000

    def test_workers_included(self, webkit_table):
        snapshot = build_snapshot(MEMINFO, STATUS, webkit_table, {20, 30})

        assert snapshot.webkit_rss_kb == 8000
        assert snapshot.webkit_process_count == 2
        assert snapshot.mem_total_kb == 16384000

    def test_no_table_means_unknown_not_zero(self):
        snapshot = build_snapshot(MEMINFO, STATUS, None, None)

        assert snapshot.webkit_rss_kb is None
        assert snapshot.webkit_process_count is None

    def test_no_workers_is_measured_zero(self, webkit_table):
        snapshot = build_snapshot(MEMINFO, STATUS, webkit_table, set())

        assert snapshot.webkit_rss_kb == 0
        assert snapshot.webkit_process_count == 0

    def test_cma_fields(self):
        snapshot = build_snapshot("CmaTotal: 65536 kB\nCmaFree: 100 kB\n", None)

        assert snapshot.cma_total_kb == 65536
        assert snapshot.cma_free_kb == 100
