"""
Rate Limiter

Enforces a minimum wall-clock gap between the starts of successive outbound
requests. One instance is shared by every client that talks to the same host.
"""

import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# Minimum spacing between request dispatches, in seconds
DEFAULT_INTERVAL = 0.5


class RateLimiter:
    """Thread-safe minimum-interval throttle.

    The lock only guards the last-dispatch timestamp; it is released while a
    caller sleeps, and the check is repeated after waking, so two waiters can
    never dispatch closer together than ``interval``.
    """

    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval < 0:
            raise ValueError(f"interval must be non-negative, got {interval}")
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last_dispatch: Optional[float] = None

    @property
    def last_dispatch(self) -> Optional[float]:
        with self._lock:
            return self._last_dispatch

    def acquire(self) -> float:
        """
        Block until a request may be dispatched, then record the dispatch

        Returns:
            float: The dispatch instant, as reported by the clock
        """
        self._lock.acquire()
        try:
            while True:
                now = self._clock()
                if self._last_dispatch is None:
                    break
                elapsed = now - self._last_dispatch
                if elapsed >= self.interval:
                    break

                wait = self.interval - elapsed
                logger.debug(f"Throttling request for {wait:.3f}s")
                self._lock.release()
                try:
                    self._sleep(wait)
                finally:
                    self._lock.acquire()

            self._last_dispatch = now
            return now
        finally:
            self._lock.release()
