"""Main run loop - drives a Pattern and ties together Strip, Simulator, Sender and ControlListener."""

import time

from ledpattern import config
from ledpattern.control import ControlListener, create_control_listener
from ledpattern.pattern import FrameContext, Pattern
from ledpattern.sender import Sender
from ledpattern.simulator import Simulator
from ledpattern.strip import Strip


def render_frame(pattern: Pattern, strip: Strip, delta: float) -> FrameContext:
    """Render one frame: before_render once, then render for every pixel into the strip."""
    frame = pattern.before_render(delta)
    for index in range(strip.pixel_count):
        strip.set(index, pattern.render(index, frame).to_rgb())
    return frame


def run(pattern: Pattern, fps: int | None = None, title: str = "LED Strip Simulator",
        scale: int = 12, columns: int = 64, control_port: int | None = None) -> None:
    """Main entry point. Runs the frame loop with simulator preview + optional strip streaming.

    Args:
        pattern: Pattern to drive. Its pixel_count sizes the strip.
        fps: Target frames per second (default FPS env var, 30).
        title: Window title.
        scale: Size in screen pixels of each simulated LED.
        columns: LEDs per row in the simulator before wrapping.
        control_port: UDP port for setVars/getVars (default CONTROL_PORT env var, 7778).
    """
    fps = fps or config.FPS
    strip = Strip(pattern.pixel_count)
    sim = Simulator(strip, scale=scale, columns=columns, title=title)
    sender = Sender()
    control = ControlListener(pattern, create_control_listener(control_port))

    last = time.monotonic()

    try:
        while True:
            control.poll()

            now = time.monotonic()
            # Pattern callbacks take delta in milliseconds
            delta = (now - last) * 1000.0
            last = now
            render_frame(pattern, strip, delta)

            if not sim.update():
                break

            sender.send_frame(strip)
            sim.tick(fps)
    except KeyboardInterrupt:
        pass
    finally:
        control.close()
        sender.close()
        sim.close()
