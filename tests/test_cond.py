import random
import threading
import time

import pytest

from jitkit.cond import Cond


def _start_waiter(cond, woke, started, timeout=5.0):
    def run():
        with cond:
            started.set()
            try:
                cond.wait(timeout)
                woke.append(True)
            except TimeoutError:
                woke.append(False)

    thread = threading.Thread(target=run)
    thread.start()
    return thread


def test_broadcast_wakes_waiter_until_all_ready():
    lock = threading.Lock()
    cond = Cond(lock)
    ready = 0
    wakeups = 0

    def worker():
        nonlocal ready
        time.sleep(random.random() * 0.05)
        with cond:
            ready += 1
        cond.broadcast()

    threads = [threading.Thread(target=worker) for _ in range(10)]
    with cond:
        for thread in threads:
            thread.start()
        while ready != 10:
            try:
                cond.wait(2.0)
                wakeups += 1
            except TimeoutError:
                pass
            assert lock.locked()
        assert ready == 10
    assert wakeups >= 1
    assert not lock.locked()
    for thread in threads:
        thread.join()


def test_wait_times_out_and_reacquires_lock():
    lock = threading.Lock()
    cond = Cond(lock)
    with cond:
        with pytest.raises(TimeoutError):
            cond.wait(0.05)
        assert lock.locked()
    assert not lock.locked()


def test_signal_without_waiters_is_not_kept():
    cond = Cond()
    cond.signal()
    cond.broadcast()
    with cond:
        with pytest.raises(TimeoutError):
            cond.wait(0.05)


def test_signal_wakes_one_waiter_at_a_time():
    cond = Cond()
    woke = []
    starts = [threading.Event(), threading.Event()]
    threads = []
    for started in starts:
        threads.append(_start_waiter(cond, woke, started))
        assert started.wait(2.0)
        with cond:
            pass

    cond.signal()
    deadline = time.monotonic() + 2.0
    while not woke and time.monotonic() < deadline:
        time.sleep(0.01)
    time.sleep(0.05)
    assert woke == [True]

    cond.signal()
    for thread in threads:
        thread.join(2.0)
    assert woke == [True, True]


def test_broadcast_wakes_all_waiters():
    cond = Cond()
    woke = []
    threads = []
    for _ in range(5):
        started = threading.Event()
        threads.append(_start_waiter(cond, woke, started))
        assert started.wait(2.0)
        with cond:
            pass

    cond.broadcast()
    for thread in threads:
        thread.join(2.0)
    assert woke == [True] * 5


def test_timed_out_waiter_does_not_swallow_signal():
    cond = Cond()
    woke = []
    started = threading.Event()
    with cond:
        with pytest.raises(TimeoutError):
            cond.wait(0.01)

    thread = _start_waiter(cond, woke, started)
    assert started.wait(2.0)
    with cond:
        pass
    cond.signal()
    thread.join(2.0)
    assert woke == [True]