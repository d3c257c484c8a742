"""Angles, collisions, slopes and frame pacing."""

from __future__ import annotations

import math
from typing import Callable

from .defs import PI


def get_angle(x1, y1, x2, y2) -> float:
    """Angle in degrees [0, 360) for facing from (x1, y1) towards (x2, y2)."""
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
    angle = -180 + math.atan2(y1 - y2, x1 - x2) * (180 / PI)
    return angle if angle >= 0 else 360 + angle


def collision(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """True when the two rectangles overlap; touching edges do not count."""
    x1, y1, w1, h1 = int(x1), int(y1), int(w1), int(h1)
    x2, y2, w2, h2 = int(x2), int(y2), int(w2), int(h2)
    return max(x1, x2) < min(x1 + w1, x2 + w2) and max(y1, y2) < min(y1 + h1, y2 + h2)


def calc_slope(x1, y1, x2, y2) -> tuple[float, float]:
    """Step (dx, dy) from (x2, y2) towards (x1, y1), largest component of size 1."""
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
    steps = max(abs(x1 - x2), abs(y1 - y2))
    if steps == 0:
        return 0.0, 0.0
    return (x1 - x2) / steps, (y1 - y2) / steps


def clamp(value, low, high):
    """Limit value to the range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


class FrameLimiter:
    """Sleeps between frames to hold a target frame rate.

    ``ticks`` returns the current time in milliseconds and ``sleep`` waits
    for a number of milliseconds.
    """

    def __init__(self, ticks: Callable[[], int], sleep: Callable[[int], None]):
        self._ticks = ticks
        self._sleep = sleep
        self.then = ticks()
        self.remainder = 0.0

    def wait(self, target_fps: int) -> int:
        """Sleep out the rest of the frame and return the milliseconds slept."""
        ideal = 1000.0 / target_fps
        delay = int(ideal) + int(self.remainder)
        self.remainder -= math.floor(self.remainder)
        delay -= self._ticks() - self.then
        if delay < 1:
            delay = 1
        self._sleep(delay)
        self.remainder += ideal - math.floor(ideal)
        self.then = self._ticks()
        return delay