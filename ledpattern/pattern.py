"""Pattern base class and the per-frame context handed to render()."""

from dataclasses import dataclass

from ledpattern.primitives import HSVColor, PatternClock


@dataclass(frozen=True)
class FrameContext:
    """Values computed once in before_render and read by every render call of that frame."""

    t1: float
    pixel_count: int


class Pattern:
    """A pattern the host drives once per frame and once per pixel.

    Subclasses set `params` to an object with get_vars()/set_vars() and
    implement before_render() and render().
    """

    name = "pattern"

    def __init__(self, pixel_count: int, clock: PatternClock | None = None):
        self.pixel_count = pixel_count
        self.clock = clock or PatternClock()
        self.params = None

    def get_vars(self) -> dict[str, float]:
        return self.params.get_vars()

    def set_vars(self, values: dict) -> list[str]:
        return self.params.set_vars(values)

    def before_render(self, delta: float) -> FrameContext:
        raise NotImplementedError

    def render(self, index: int, frame: FrameContext) -> HSVColor:
        raise NotImplementedError
