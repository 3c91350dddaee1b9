"""
Refresh scheduling service.

Runs the refresh once after an initial delay and then periodically on a
background thread, with at most one refresh in flight.
"""

import enum
import logging
import threading
import time
from typing import Callable, Optional

from ..core.errors import RefreshFailure


class RefreshState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"


class RefreshOutcome(enum.Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RefreshScheduler:
    """Periodic trigger for the refresh pipeline."""

    def __init__(
        self,
        refresh: Callable[[], object],
        interval_seconds: float,
        initial_delay_seconds: float = 0,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize scheduler.

        Args:
            refresh: Callable running one refresh; raises RefreshFailure on failure
            interval_seconds: Time between ticks
            initial_delay_seconds: Time before the first tick
            logger: Logger instance
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self.refresh = refresh
        self.interval_seconds = interval_seconds
        self.initial_delay_seconds = initial_delay_seconds
        self.logger = logger or logging.getLogger(__name__)

        self.state = RefreshState.IDLE
        self.last_outcome: Optional[RefreshOutcome] = None
        self._in_flight = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def trigger(self) -> bool:
        """
        Run one refresh unless one is already in flight.

        Returns:
            True if a refresh ran, False if the tick was dropped
        """
        if not self._in_flight.acquire(blocking=False):
            self.logger.info("Refresh already in progress, skipping tick")
            return False

        try:
            self.state = RefreshState.FETCHING
            try:
                self.refresh()
            except RefreshFailure as e:
                self.last_outcome = RefreshOutcome.FAILED
                self.logger.error(str(e), exc_info=e.cause)
            except Exception as e:
                self.last_outcome = RefreshOutcome.FAILED
                self.logger.error(f"Unexpected error during refresh: {e}", exc_info=True)
            else:
                self.last_outcome = RefreshOutcome.SUCCEEDED
            return True
        finally:
            self.state = RefreshState.IDLE
            self._in_flight.release()

    def _run(self, stop_event: threading.Event) -> None:
        next_run = time.monotonic() + self.initial_delay_seconds
        while not stop_event.wait(max(0.0, next_run - time.monotonic())):
            self.trigger()
            # Fixed period; ticks missed while a refresh overran are dropped
            now = time.monotonic()
            next_run += self.interval_seconds
            while next_run <= now:
                next_run += self.interval_seconds

    def start(self) -> None:
        """Start the background thread."""
        if self.running:
            self.logger.warning("Refresh scheduler already running")
            return

        # Each thread owns its stop event so a thread left over from a timed
        # out stop() still exits once its in-flight refresh finishes.
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event,),
            name="contributor-refresh",
            daemon=True
        )
        self._thread.start()
        self.logger.info(
            f"Refresh scheduled every {self.interval_seconds / 3600:g}h, "
            f"first run in {self.initial_delay_seconds:g}s"
        )

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Stop the background thread.

        An in-flight refresh is not interrupted; this waits up to timeout
        for it to finish. The thread exits after that refresh either way.
        """
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                self.logger.warning("Refresh still in progress, scheduler thread will exit when it finishes")
            self._thread = None
