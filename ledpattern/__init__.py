"""LED strip pattern toolkit: host primitives, frame loop, simulator and UDP streaming."""

from ledpattern.alert import AlertParams, AlertPattern
from ledpattern.pattern import FrameContext, Pattern
from ledpattern.primitives import HSVColor, PatternClock, clamp, hsv, triangle
from ledpattern.run import render_frame, run
from ledpattern.strip import Strip

__all__ = [
    "AlertParams", "AlertPattern", "FrameContext", "HSVColor", "Pattern",
    "PatternClock", "Strip", "clamp", "hsv", "render_frame", "run", "triangle",
]
