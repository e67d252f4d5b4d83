"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable

TARGET_FPS = 60
TARGET_DELTATIME = 1.0 / TARGET_FPS


def _monotonic_ticks() -> int:
    return int(time.monotonic() * 1000)


class Timer:
    """Measures the time between frames, capped at one target frame."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _monotonic_ticks
        self.last_time = self._clock()
        self.delta_time = 0.0

    def tick(self) -> None:
        """Record a new frame and compute the elapsed seconds."""
        current = self._clock()
        self.delta_time = min((current - self.last_time) / 1000.0, TARGET_DELTATIME)
        self.last_time = current