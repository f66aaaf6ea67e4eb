"""Timestamp sources."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class MonotonicClock:
    """Wall-clock nanoseconds that never go backwards within a process."""

    def __init__(self, source: Callable[[], int] = time.time_ns) -> None:
        self._source = source
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            self._last = max(self._last, self._source())
            return self._last
