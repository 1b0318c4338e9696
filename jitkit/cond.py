"""A condition variable whose waits can time out without losing signals."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Optional


class Cond:
    """A condition variable bound to ``lock``.

    Waiters are woken in the order they started waiting. A waiter that times
    out after a signal reached it passes that signal on to the next waiter,
    so no notification is lost.
    """

    def __init__(self, lock: Optional[Any] = None) -> None:
        self.lock = threading.Lock() if lock is None else lock
        self._mutex = threading.Lock()
        self._waiters: deque[threading.Event] = deque()

    def __enter__(self) -> "Cond":
        self.lock.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.lock.release()

    def wait(self, timeout: Optional[float] = None) -> None:
        """Release the lock, wait for a signal, then take the lock back.

        The caller must hold the lock. Raises TimeoutError if no signal
        arrives within ``timeout`` seconds; the lock is held again either way.
        """
        event = threading.Event()
        with self._mutex:
            self._waiters.append(event)

        self.lock.release()
        try:
            if event.wait(timeout):
                return
            with self._mutex:
                if event.is_set():
                    # The signal arrived after the timeout; hand it on.
                    if self._waiters:
                        self._notify_next()
                else:
                    self._waiters.remove(event)
            raise TimeoutError("condition wait timed out")
        finally:
            self.lock.acquire()

    def _notify_next(self) -> None:
        self._waiters.popleft().set()

    def signal(self) -> None:
        """Wake the longest-waiting waiter, if any."""
        with self._mutex:
            if self._waiters:
                self._notify_next()

    def broadcast(self) -> None:
        """Wake every waiter."""
        with self._mutex:
            while self._waiters:
                self._notify_next()