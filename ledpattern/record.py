#!/usr/bin/env python3
"""Record an animated GIF of a pattern by rendering frames headlessly.

Usage: python -m ledpattern.record [pixel_count]
Output: media/pattern-alert.gif
"""

import sys
from pathlib import Path

from PIL import Image

from ledpattern.alert import AlertPattern
from ledpattern.pattern import Pattern
from ledpattern.primitives import FixedClock
from ledpattern.run import render_frame
from ledpattern.strip import Strip

MEDIA_DIR = Path(__file__).parent.parent / "media"

# GIF settings
SCALE = 8          # Screen pixels per LED
COLUMNS = 64       # LEDs per row before wrapping
DURATION_S = 4.0   # Seconds of animation per GIF
GIF_FPS = 20       # Frames per second in the GIF


def strip_to_image(strip: Strip, scale: int = SCALE, columns: int = COLUMNS) -> Image.Image:
    """Convert a Strip buffer to a scaled-up PIL Image, wrapping every `columns` LEDs."""
    columns = max(1, min(columns, strip.pixel_count))
    rows = max(1, -(-strip.pixel_count // columns))
    padded = strip.get_buffer().ljust(columns * rows * 3, b'\x00')
    img = Image.frombytes("RGB", (columns, rows), padded)
    if scale > 1:
        img = img.resize((columns * scale, rows * scale), Image.NEAREST)
    return img


def render_frames(pattern: Pattern, clock: FixedClock, fps: float = GIF_FPS,
                  duration: float = DURATION_S, scale: int = SCALE,
                  columns: int = COLUMNS) -> list[Image.Image]:
    """Render `duration` seconds of a pattern driven by `clock`."""
    n_frames = max(1, int(duration * fps))
    dt = 1.0 / fps
    strip = Strip(pattern.pixel_count)
    frames = []
    for _ in range(n_frames):
        strip.clear()
        render_frame(pattern, strip, dt * 1000.0)
        frames.append(strip_to_image(strip, scale, columns))
        clock.advance(dt)
    return frames


def render_gif(pattern: Pattern, clock: FixedClock, out_path: Path, fps: float = GIF_FPS,
               duration: float = DURATION_S, scale: int = SCALE, columns: int = COLUMNS) -> Path:
    """Render frames and save as animated GIF."""
    frames = render_frames(pattern, clock, fps, duration, scale, columns)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    # Save as GIF (duration in ms per frame)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
    )
    print(f"[record] Saved {out_path} ({len(frames)} frames, {duration}s)")
    return out_path


def main():
    pixel_count = int(sys.argv[1]) if len(sys.argv) > 1 else 64
    clock = FixedClock()
    pattern = AlertPattern(pixel_count, clock=clock)
    # Default speed cycles every ~2s; slow it so the GIF holds one full cycle
    pattern.set_vars({"speed": 0.06})
    render_gif(pattern, clock, MEDIA_DIR / f"pattern-{pattern.name}.gif")


if __name__ == "__main__":
    main()
