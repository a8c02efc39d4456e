"""Alert - a colored edge sweeping across the strip and back.

Exported vars (settable at runtime via setVars):
  hue   - base hue, 0-1, wraps
  speed - time() interval; larger is slower, 0 freezes, negative reverses
"""

import math
from dataclasses import dataclass, fields

from ledpattern.pattern import FrameContext, Pattern
from ledpattern.primitives import HSVColor, PatternClock, clamp, hsv, triangle


@dataclass
class AlertParams:
    hue: float = 0.0
    speed: float = 0.03

    def get_vars(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def set_vars(self, values: dict) -> list[str]:
        """Apply exported vars from `values`. Returns the names that were ignored.

        All values are converted before any is assigned, so a bad value leaves
        the params untouched.
        """
        exported = {f.name for f in fields(self)}
        updates = {}
        ignored = []
        for name, value in values.items():
            if name not in exported:
                ignored.append(name)
                continue
            if isinstance(value, bool):
                raise ValueError(f"{name}: expected a number, got {value!r}")
            try:
                updates[name] = float(value)
            except (TypeError, ValueError):
                raise ValueError(f"{name}: expected a number, got {value!r}") from None
            if not math.isfinite(updates[name]):
                raise ValueError(f"{name}: expected a finite number, got {value!r}")
        for name, value in updates.items():
            setattr(self, name, value)
        return ignored


class AlertPattern(Pattern):
    name = "alert"

    def __init__(self, pixel_count: int, clock: PatternClock | None = None,
                 params: AlertParams | None = None):
        super().__init__(pixel_count, clock)
        self.params = params or AlertParams()

    def before_render(self, delta: float) -> FrameContext:
        t1 = triangle(self.clock.time(self.params.speed))
        return FrameContext(t1=t1, pixel_count=self.pixel_count)

    def render(self, index: int, frame: FrameContext) -> HSVColor:
        f = index / frame.pixel_count
        edge = clamp(triangle(f) + frame.t1 * 4 - 2, 0, 1)
        v = triangle(edge)
        return hsv(self.params.hue, 1, v)
