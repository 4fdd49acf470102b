"""framediag - Textual debug overlay."""

import time
from decimal import ROUND_HALF_UP, Decimal
from queue import Empty, Queue

from textual.app import App, ComposeResult
from textual.widgets import Footer, Static

from framediag import lifecycle, settings
from framediag.config import FrameConfig, load_config
from framediag.exceptions import FrameDiagError
from framediag.models import ResourceSnapshot
from framediag.monitor import StatsPoller

MISSING = "-"
UNAVAILABLE = "Debug overlay: stats unavailable"
DISABLED = "Debug overlay disabled (set IMMICHFRAME_DEBUG_OVERLAY=1)"


def _fixed(value: float, places: int) -> str:
    """Format with ties rounded away from zero."""
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def format_kb(kb: int | None) -> str:
    """Format kibibytes as MiB below 1 GiB and GiB above."""
    if kb is None:
        return MISSING
    mib = kb / 1024
    if mib < 1024:
        return f"{_fixed(mib, 0)} MiB"
    return f"{_fixed(mib / 1024, 2)} GiB"


def render_snapshot(snapshot: ResourceSnapshot | None, url: str, now: str) -> str:
    """Render a snapshot as the overlay's text block."""
    if snapshot is None:
        return UNAVAILABLE

    s = snapshot
    lines = [
        f"ImmichFrame debug  {now}",
        f"URL: {url}",
        "",
        f"MemAvail: {format_kb(s.mem_available_kb)} / Total: {format_kb(s.mem_total_kb)}",
        f"MemFree:  {format_kb(s.mem_free_kb)}",
        f"SwapFree: {format_kb(s.swap_free_kb)} / Total: {format_kb(s.swap_total_kb)}",
        f"CMAFree:  {format_kb(s.cma_free_kb)} / Total: {format_kb(s.cma_total_kb)}",
    ]
    if s.webkit_rss_kb is not None:
        count = f" ({s.webkit_process_count})" if s.webkit_process_count is not None else ""
        lines.append(f"WebKit RSS:{format_kb(s.webkit_rss_kb)}{count}")
    lines.append("")
    lines.append(
        f"Self RSS: {format_kb(s.self_rss_kb)}   VmSize: {format_kb(s.self_vmsize_kb)}"
    )
    return "\n".join(lines)


class StatsPanel(Static):
    """Panel showing the latest resource snapshot."""

    DEFAULT_CSS = """
    StatsPanel {
        height: auto;
        padding: 1 2;
        background: $surface;
    }
    """

    def __init__(self, url: str, *args, **kwargs) -> None:
        super().__init__("Loading memory stats...", *args, **kwargs)
        self._url = url
        self._snapshot: ResourceSnapshot | None = None

    @property
    def snapshot(self) -> ResourceSnapshot | None:
        return self._snapshot

    def show(self, snapshot: ResourceSnapshot | None) -> None:
        """Display a new snapshot."""
        self._snapshot = snapshot
        self.update(render_snapshot(snapshot, self._url, time.strftime("%H:%M:%S")))


class FrameDiagApp(App):
    """Debug overlay for the frame kiosk."""

    TITLE = "framediag"
    SUB_TITLE = "ImmichFrame Resource Diagnostics"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("r", "refresh", "Refresh"),
        ("ctrl+r", "restart", "Restart"),
    ]

    def __init__(self, config: FrameConfig | None = None) -> None:
        """Initialize the FrameDiagApp."""
        super().__init__()
        self._config = config or load_config()
        self._update_queue: Queue[ResourceSnapshot | None] = Queue()
        self._poller = StatsPoller(self._update_queue, poll_rate=self._config.refresh_seconds)

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield StatsPanel(settings.resolve_url(), id="stats")
        yield Footer()

    def on_mount(self) -> None:
        """Start the poller when the app is mounted and the overlay is enabled."""
        if self._config.debug_overlay:
            self._poller.start()
            self.set_interval(0.5, self._check_for_updates)
        else:
            self.query_one("#stats", StatsPanel).update(DISABLED)

        minutes = self._config.auto_restart_minutes
        if minutes:
            self.log.info(f"Auto restart enabled: after {minutes} minutes")
            self.set_timer(minutes * 60, self.action_restart)

    def _check_for_updates(self) -> None:
        """Show the most recent result waiting in the queue."""
        result = None
        received = False
        while True:
            try:
                result = self._update_queue.get_nowait()
                received = True
            except Empty:
                break

        if received:
            self.query_one("#stats", StatsPanel).show(result)

    def action_refresh(self) -> None:
        """Poll again without waiting for the interval."""
        self._poller.poll_now()

    def action_restart(self) -> None:
        """Start a fresh instance and exit this one."""
        try:
            lifecycle.spawn_current()
        except FrameDiagError as e:
            self.notify(f"Auto restart failed: {e}", severity="error")
            return
        self._poller.stop(timeout=1.0)
        self.exit()

    def action_quit(self) -> None:
        """Handle quit action with graceful cleanup."""
        self._poller.stop(timeout=1.0)
        self.exit()

    def on_unmount(self) -> None:
        self._poller.stop(timeout=1.0)


def main() -> None:
    """Entry point for the overlay."""
    app = FrameDiagApp()
    app.run()


if __name__ == "__main__":
    main()
