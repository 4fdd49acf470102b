"""Background collection of resource snapshots."""

import logging
import threading
from collections.abc import Callable
from queue import Queue

from framediag.diagnostics import get_resource_stats
from framediag.models import ResourceSnapshot

logger = logging.getLogger(__name__)


class StatsPoller:
    """
    Runs the blocking diagnostics call on a daemon thread.

    Each result, a ResourceSnapshot or None on unsupported platforms, is
    pushed to a thread-safe Queue. Nothing is retained between polls.
    """

    def __init__(
        self,
        update_queue: Queue[ResourceSnapshot | None],
        poll_rate: float = 5.0,
        collect: Callable[[], ResourceSnapshot | None] = get_resource_stats,
    ) -> None:
        """
        Initialize the StatsPoller.

        Args:
            update_queue: Thread-safe queue to push results to.
            poll_rate: Seconds between polls. Default 5.0s.
            collect: Callable producing one result per poll.
        """
        self._queue = update_queue
        self._poll_rate = max(0.1, poll_rate)
        self._collect = collect
        self._stop_event = threading.Event()
        self._wake_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def poll_rate(self) -> float:
        """Get the current poll rate."""
        return self._poll_rate

    @poll_rate.setter
    def poll_rate(self, value: float) -> None:
        """Set the poll rate."""
        self._poll_rate = max(0.1, value)  # Minimum 0.1 seconds

    @property
    def is_running(self) -> bool:
        """Check if the poller thread is running."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the polling thread."""
        if self.is_running:
            return

        self._stop_event.clear()
        self._wake_event.clear()
        self._thread = threading.Thread(
            target=self._poll_loop,
            daemon=True,
            name="StatsPoller",
        )
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        """
        Stop the polling thread.

        A poll already in progress is not interrupted; a hung ps keeps the
        daemon thread alive past ``timeout``.
        """
        self._stop_event.set()
        self._wake_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None

    def poll_now(self) -> None:
        """Cut the current wait short and poll immediately."""
        self._wake_event.set()

    def _poll_loop(self) -> None:
        """Main polling loop running in the background thread."""
        while not self._stop_event.is_set():
            try:
                self._queue.put(self._collect())
            except Exception:
                logger.exception("Resource collection failed")

            self._wake_event.wait(timeout=self._poll_rate)
            self._wake_event.clear()
