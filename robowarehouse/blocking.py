"""A list of blocked threads that can all be released at once."""

from __future__ import annotations

import threading
from collections import deque


class BlockedThreads:
    """Threads block here until another thread releases them all."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._waiting: deque[threading.Event] = deque()

    def block(self) -> None:
        """Block the calling thread until unblock_all is called."""
        event = threading.Event()
        with self._lock:
            self._waiting.append(event)
        event.wait()

    def unblock_all(self) -> int:
        """Release every blocked thread in the order it blocked; return how many."""
        with self._lock:
            released = list(self._waiting)
            self._waiting.clear()
        for event in released:
            event.set()
        return len(released)

    def waiting(self) -> int:
        """Return the number of threads currently blocked."""
        with self._lock:
            return len(self._waiting)