"""Host primitives available to patterns: waveforms, clamping, HSV colors, pattern time."""

import colorsys
import math
import time as _time
from typing import Callable, NamedTuple

# Type alias for RGB tuples
Color = tuple[int, int, int]

# time(interval) loops every 65.536 * interval seconds
TIME_PERIOD_S = 65.536


class HSVColor(NamedTuple):
    """A color as emitted by a pattern. h wraps at 1.0, s and v are 0-1."""

    h: float
    s: float
    v: float

    def to_rgb(self) -> Color:
        h = self.h % 1.0
        s = clamp(self.s, 0.0, 1.0)
        v = clamp(self.v, 0.0, 1.0)
        r, g, b = colorsys.hsv_to_rgb(h, s, v)
        return (int(r * 255), int(g * 255), int(b * 255))


def triangle(x: float) -> float:
    """Fold a 0-1 sawtooth into a triangle wave: 0 -> 1 at x=0.5 -> 0. x wraps."""
    frac = x - math.floor(x)
    return 1.0 - abs(1.0 - 2.0 * frac)


def clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


def hsv(h: float, s: float = 1.0, v: float = 1.0) -> HSVColor:
    return HSVColor(h, s, v)


class PatternClock:
    """Shared animation clock behind the time() primitive.

    Elapsed time is measured from construction using `now`, which defaults to
    time.monotonic and can be swapped for a fixed source when rendering offline.
    """

    def __init__(self, now: Callable[[], float] = _time.monotonic):
        self._now = now
        self.start = now()

    def elapsed(self) -> float:
        return self._now() - self.start

    def time(self, interval: float) -> float:
        """Sawtooth in [0, 1) looping every 65.536 * interval seconds.

        interval 0 stalls at 0. Negative intervals run the sawtooth backward.
        """
        if interval == 0:
            return 0.0
        phase = self.elapsed() / (TIME_PERIOD_S * interval)
        return phase - math.floor(phase)


class FixedClock(PatternClock):
    """Clock whose elapsed time is set explicitly. Used for headless rendering."""

    def __init__(self, t: float = 0.0):
        self.t = t
        super().__init__(now=lambda: self.t)
        self.start = 0.0

    def advance(self, dt: float) -> None:
        self.t += dt
