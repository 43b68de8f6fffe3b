"""Monotonic clock that reports the time elapsed between readings."""

from __future__ import annotations

import time
from collections.abc import Callable


class Clock:
    """Measures the seconds that pass between successive calls to elapsed()."""

    def __init__(self, timer: Callable[[], float] = time.perf_counter) -> None:
        self._timer = timer
        self._last = timer()
        self._curr = self._last

    def elapsed(self) -> float:
        """Return the seconds since creation or since the previous call."""
        self._last = self._curr
        self._curr = self._timer()
        return float(self._curr - self._last)