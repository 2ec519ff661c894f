"""
Poll scheduler module for the Fire Risk Monitor.

This module contains the PollScheduler class, a periodic timer that runs a
job on a background thread at a fixed interval, plus an on-demand trigger
that runs the same job immediately. It is used by the console runner; the
web UI relies on Streamlit auto-refresh instead.
"""

import logging
import threading
from typing import Callable, Optional

from . import config
from .errors import FireRiskError

logger = logging.getLogger(__name__)


class PollScheduler:
    """
    Runs a job every interval_ms milliseconds until stopped.
    
    The job runs once as soon as the scheduler starts. Any exception from a
    scheduled run is logged and the schedule continues; the next tick is the
    retry.
    """
    
    def __init__(
        self,
        job: Callable[[], object],
        interval_ms: int = config.POLL_INTERVAL_MS,
        run_immediately: bool = True
    ):
        """
        Initialize the scheduler.
        
        Args:
            job: Callable to run on every tick
            interval_ms: Milliseconds between runs (must be positive)
            run_immediately: Whether to run the job as soon as start() is called
        """
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        
        self.job = job
        self.interval_ms = interval_ms
        self.run_immediately = run_immediately
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
    
    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
    
    def _run_job(self) -> None:
        try:
            self.job()
        except FireRiskError as e:
            logger.warning("Scheduled poll failed, will retry next interval: %s", e)
        except Exception:
            logger.exception("Scheduled poll crashed, will retry next interval")
    
    def _loop(self) -> None:
        if self.run_immediately:
            self._run_job()
        # wait() returns True once stop() is called
        while not self._stop_event.wait(self.interval_ms / 1000.0):
            self._run_job()
    
    def start(self) -> None:
        """Starts the background polling thread."""
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, name="fire-risk-poller", daemon=True)
        self._thread.start()
        logger.info("Polling every %d ms", self.interval_ms)
    
    def trigger_now(self) -> object:
        """
        Runs the job immediately on the calling thread.
        
        Unlike scheduled runs, errors propagate to the caller so they can be
        shown to the user.
        """
        return self.job()
    
    def stop(self, timeout: Optional[float] = None) -> None:
        """Stops the polling thread, waiting up to timeout seconds for it to exit."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
