"""
Test Rate Limiter - Minimum spacing between request dispatches
"""

import threading
import time

import pytest

from lifetables.coreutils.rate_limiter import RateLimiter


class FakeClock:
    """Deterministic clock whose sleep advances time"""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def test_first_acquire_does_not_wait():
    clock = FakeClock()
    limiter = RateLimiter(0.5, clock=clock, sleep=clock.sleep)

    assert limiter.last_dispatch is None
    assert limiter.acquire() == 1000.0
    assert clock.sleeps == []
    assert limiter.last_dispatch == 1000.0


def test_back_to_back_acquires_are_spaced_by_interval():
    clock = FakeClock()
    limiter = RateLimiter(0.5, clock=clock, sleep=clock.sleep)

    first = limiter.acquire()
    second = limiter.acquire()

    assert second - first >= 0.5
    assert clock.sleeps == [pytest.approx(0.5)]


def test_no_wait_once_interval_has_elapsed():
    clock = FakeClock()
    limiter = RateLimiter(0.5, clock=clock, sleep=clock.sleep)

    limiter.acquire()
    clock.now += 2.0
    limiter.acquire()

    assert clock.sleeps == []


def test_partial_wait_covers_only_the_remainder():
    clock = FakeClock()
    limiter = RateLimiter(0.5, clock=clock, sleep=clock.sleep)

    limiter.acquire()
    clock.now += 0.25
    dispatched = limiter.acquire()

    assert clock.sleeps == [pytest.approx(0.25)]
    assert dispatched == pytest.approx(1000.5)


def test_records_dispatch_time_after_sleeping():
    clock = FakeClock()
    limiter = RateLimiter(0.5, clock=clock, sleep=clock.sleep)

    dispatches = [limiter.acquire() for _ in range(4)]

    gaps = [b - a for a, b in zip(dispatches, dispatches[1:])]
    assert all(gap >= 0.5 - 1e-9 for gap in gaps)
    assert dispatches[-1] == pytest.approx(1001.5)


def test_negative_interval_rejected():
    with pytest.raises(ValueError):
        RateLimiter(-1)


def test_real_clock_back_to_back_gap():
    limiter = RateLimiter(0.5)

    first = limiter.acquire()
    second = limiter.acquire()

    assert second - first >= 0.5


def test_concurrent_callers_never_dispatch_closer_than_interval():
    interval = 0.05
    limiter = RateLimiter(interval)
    dispatches = []
    dispatches_lock = threading.Lock()

    def worker():
        instant = limiter.acquire()
        with dispatches_lock:
            dispatches.append(instant)

    threads = [threading.Thread(target=worker) for _ in range(6)]
    start = time.monotonic()
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    dispatches.sort()
    assert len(dispatches) == 6
    gaps = [b - a for a, b in zip(dispatches, dispatches[1:])]
    assert all(gap >= interval for gap in gaps)
    assert time.monotonic() - start >= interval * 5
