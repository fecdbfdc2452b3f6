# stats.py
"""
Statistics helper module.

Tracks:
- Total number of processed frames
- Elapsed time (seconds)
- FPS, averaged over short windows so the overlay does not flicker
"""

import time
from typing import Callable


class StatsTracker:
    """
    Track frame count, elapsed time and FPS for the capture loop.
    """

    def __init__(self, window: float = 0.5, clock: Callable[[], float] = time.time):
        """
        :param window: Seconds of frames averaged into one FPS value.
        :param clock: Time source (seconds); replaceable in tests.
        """
        self.window = float(window)
        self._clock = clock
        self.start_time = clock()
        self._window_start = self.start_time
        self._window_frames = 0
        self.total_frames = 0
        self.fps = 0.0

    def update(self) -> None:
        """Call this once per processed frame to update counters."""
        self.total_frames += 1
        self._window_frames += 1
        now = self._clock()
        dt = now - self._window_start
        if dt >= self.window:
            self.fps = self._window_frames / dt
            self._window_start = now
            self._window_frames = 0

    @property
    def elapsed(self) -> float:
        """Return total elapsed time in seconds since the tracker was created."""
        return self._clock() - self.start_time
