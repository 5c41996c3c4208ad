"""
Fixed-period game clock built on the `schedule` library.

The clock owns at most one scheduled job. Starting always cancels the
previous job first, and every job carries a generation number so a tick
that was already in flight when the clock was stopped or restarted is
dropped instead of firing against the new configuration.
"""

import logging
import threading
from typing import Callable, Optional

import schedule


logger = logging.getLogger(__name__)

POLL_SECONDS = 0.005  # scheduler loop sleep; well under the fastest tick


class GameClock:
    """
    Repeating tick trigger.

    Args:
        on_tick: Called once per period with no arguments
        interval_ms: Tick period in milliseconds
        lock: Lock shared with the tick consumer. Ticks run while holding
            it, so the consumer must pass a reentrant lock it also uses for
            its own commands.
        scheduler: schedule.Scheduler to register jobs on (a private one by default)
    """

    def __init__(
        self,
        on_tick: Callable[[], None],
        interval_ms: int,
        lock: Optional[threading.RLock] = None,
        scheduler: Optional[schedule.Scheduler] = None,
        poll_seconds: float = POLL_SECONDS,
    ):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self._on_tick = on_tick
        self._interval_ms = interval_ms
        self._lock = lock or threading.RLock()
        self._scheduler = scheduler or schedule.Scheduler()
        self._job: Optional[schedule.Job] = None
        self._generation = 0
        self._poll_seconds = poll_seconds
        self._thread: Optional[threading.Thread] = None
        self._shutdown = threading.Event()

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def running(self) -> bool:
        return self._job is not None

    @property
    def pending_jobs(self) -> int:
        return len(self._scheduler.jobs)

    def start(self) -> None:
        """Begin ticking at the configured period, replacing any pending job."""
        with self._lock:
            self._cancel_job()
            generation = self._generation
            self._job = self._scheduler.every(self._interval_ms / 1000.0).seconds.do(
                self._fire, generation
            )
            logger.debug("Clock started: every %sms (generation %s)", self._interval_ms, generation)

    def stop(self) -> None:
        """Halt ticking. Safe to call when already stopped."""
        with self._lock:
            if self._job is not None:
                logger.debug("Clock stopped (generation %s)", self._generation)
            self._cancel_job()

    def set_interval(self, interval_ms: int) -> None:
        """Change the period; a running clock restarts so it applies at once."""
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        with self._lock:
            self._interval_ms = interval_ms
            if self.running:
                self.start()

    def fire(self) -> bool:
        """
        Run one tick right now if the clock is running.

        Returns:
            True if a tick ran, False if the clock is stopped.
        """
        with self._lock:
            if self._job is None:
                return False
            self._fire(self._generation)
            return True

    def pump(self) -> None:
        """Run the tick if it is due. Call this from the driving loop."""
        self._scheduler.run_pending()

    def run_in_background(self) -> threading.Thread:
        """Drive pump() from a daemon thread until shutdown()."""
        if self._thread is not None and self._thread.is_alive():
            return self._thread

        self._shutdown.clear()
        self._thread = threading.Thread(target=self._loop, name="game-clock", daemon=True)
        self._thread.start()
        return self._thread

    def shutdown(self, timeout: Optional[float] = 1.0) -> None:
        """Stop ticking and end the background loop, if any."""
        self.stop()
        self._shutdown.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _loop(self) -> None:
        logger.debug("Clock loop running (poll every %ss)", self._poll_seconds)
        while not self._shutdown.is_set():
            self.pump()
            self._shutdown.wait(self._poll_seconds)

    def _cancel_job(self) -> None:
        if self._job is not None:
            self._scheduler.cancel_job(self._job)
            self._job = None
        # Invalidate anything already handed to the scheduler
        self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._job is None:
                logger.debug("Dropping stale tick from generation %s", generation)
                return
            self._on_tick()
