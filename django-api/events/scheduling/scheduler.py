"""
Recurring reminder scheduler.

A polling thread checks once per poll interval whether a tick is due and
hands due ticks to a small thread pool. A bounded semaphore caps the number
of ticks running at once; a due tick that finds the cap reached is skipped,
never queued.
"""

import threading
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from events.domain.results import DispatchResult
from events.logging import get_logger

logger = get_logger(__name__)

# Job configuration
DEFAULT_INTERVAL_SECONDS = 3600  # Run every hour
DEFAULT_POLL_SECONDS = 60  # Check whether a run is due every minute
DEFAULT_MAX_CONCURRENCY = 2


class ReminderScheduler:
    """Runs a reminder job on a fixed interval until stopped."""

    def __init__(
        self,
        job: Callable[[], DispatchResult],
        interval: float = DEFAULT_INTERVAL_SECONDS,
        poll_interval: float = DEFAULT_POLL_SECONDS,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        run_on_start: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0 or poll_interval <= 0:
            raise ValueError("Scheduler intervals must be positive")
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

        self._job = job
        self._interval = interval
        self._poll_interval = poll_interval
        self._max_concurrency = max_concurrency
        self._run_on_start = run_on_start
        self._clock = clock

        self._slots = threading.BoundedSemaphore(max_concurrency)
        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._executor: ThreadPoolExecutor | None = None
        self._next_run_at: float | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def next_run_at(self) -> float | None:
        return self._next_run_at

    def start(self) -> None:
        """Start polling. Calling start on a running scheduler does nothing."""
        with self._lock:
            if self._thread is not None:
                return

            self._stop_event.clear()
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_concurrency, thread_name_prefix="reminder-tick"
            )
            now = self._clock()
            self._next_run_at = now if self._run_on_start else now + self._interval
            self._thread = threading.Thread(
                target=self._poll_loop, name="reminder-scheduler", daemon=True
            )
            self._thread.start()

        logger.info(
            "Reminder scheduler started",
            interval_seconds=self._interval,
            poll_seconds=self._poll_interval,
            max_concurrency=self._max_concurrency,
        )
        self.tick()

    def stop(self, wait: bool = True) -> None:
        """Stop scheduling new ticks; with wait, block until in-flight ticks finish."""
        with self._lock:
            thread, executor = self._thread, self._executor
            self._thread = None
            self._executor = None
            self._stop_event.set()

        if thread is not None:
            thread.join()
        if executor is not None:
            executor.shutdown(wait=wait)
        logger.info("Reminder scheduler stopped")

    def tick(self) -> bool:
        """Submit the job if it is due. Returns True if a run was submitted."""
        with self._lock:
            if self._executor is None or self._next_run_at is None:
                return False
            now = self._clock()
            if now < self._next_run_at:
                return False
            # Missed intervals collapse into a single run.
            while self._next_run_at <= now:
                self._next_run_at += self._interval
            return self._submit()

    def trigger_now(self) -> bool:
        """Submit a run immediately, subject to the concurrency ceiling."""
        with self._lock:
            if self._executor is None:
                return False
            return self._submit()

    def run_once(self) -> DispatchResult | None:
        """Execute one tick in the calling thread. Failures end the tick only."""
        started = time.monotonic()
        try:
            result = self._job()
        except Exception:
            logger.exception("Reminder tick failed")
            return None

        duration = round(time.monotonic() - started, 3)
        if result.success:
            logger.info(
                "Reminder tick completed",
                events_processed=result.events_processed,
                sent=result.messages_sent,
                failed=result.messages_failed,
                duration_seconds=duration,
            )
        else:
            logger.error("Reminder tick failed", error=result.error, duration_seconds=duration)
        return result

    def _submit(self) -> bool:
        if not self._slots.acquire(blocking=False):
            logger.warning(
                "Reminder tick skipped, concurrency ceiling reached",
                max_concurrency=self._max_concurrency,
            )
            return False
        try:
            future = self._executor.submit(self.run_once)
        except RuntimeError:
            self._slots.release()
            logger.warning("Reminder tick skipped, scheduler shutting down")
            return False
        future.add_done_callback(lambda _: self._slots.release())
        return True

    def _poll_loop(self) -> None:
        while not self._stop_event.wait(self._poll_interval):
            self.tick()
