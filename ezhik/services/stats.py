"""In-process counter of generated ideas."""

from __future__ import annotations

import threading


class StatsCounter:
    """Thread-safe counter held on ``app.state`` rather than as a module global."""

    def __init__(self, initial: int = 0) -> None:
        self._count = initial
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._count += 1
            return self._count

    @property
    def count(self) -> int:
        with self._lock:
            return self._count
