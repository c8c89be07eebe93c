"""A wall-clock timer for frame intervals and frames-per-second measurement."""

from __future__ import annotations

import time
from typing import Callable

__all__ = ["Timer"]


class Timer:
    """Measures elapsed time since the last reset.

    ``clock`` returns the current time in seconds; it defaults to
    :func:`time.perf_counter`.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = 0.0
        self._last_interval_time = 0.0
        self._frame_count = 0
        self._fps_time = 0.0
        self._fps = 0.0
        self._last_time = 0.0
        self.reset()

    def reset(self) -> None:
        """Restart the clock and the frame counter."""
        self._start = self._clock()
        self._last_interval_time = 0.0
        self._frame_count = 0
        self._fps_time = 0.0

    def time(self) -> float:
        """Seconds elapsed since the last reset."""
        return self._clock() - self._start

    def interval(self) -> float:
        """Seconds elapsed since the previous call (or since the reset)."""
        now = self.time()
        interval = now - self._last_interval_time
        self._last_interval_time = now
        return interval

    def fps(self) -> float:
        """Count a frame and return the frame rate, updated about once a second."""
        now = self.time()
        elapsed = now - self._fps_time
        if elapsed > 1.0:
            self._fps = self._frame_count / elapsed
            self._frame_count = 0
            self._fps_time = now
        self._frame_count += 1
        return self._fps

    def is_time_passed(self, seconds: float) -> bool:
        """Return True, once, each time more than ``seconds`` have passed since it last did."""
        now = self.time()
        if now - self._last_time > seconds:
            self._last_time = now
            return True
        return False