"""Addressable LED strip pixel buffer."""

from ledpattern.primitives import Color


class Strip:
    """Linear RGB pixel buffer for an LED strip.

    Pixels are stored as a flat bytearray in RGB order: [R0,G0,B0, R1,G1,B1, ...]
    Pixel i is at byte offset i * 3.
    """

    def __init__(self, pixel_count: int = 64):
        if pixel_count < 0:
            raise ValueError(f"pixel_count must be >= 0, got {pixel_count}")
        self.pixel_count = pixel_count
        self.buffer = bytearray(pixel_count * 3)

    def __len__(self) -> int:
        return self.pixel_count

    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Fill the entire strip with a color (default black)."""
        if color == (0, 0, 0):
            self.buffer[:] = b'\x00' * len(self.buffer)
        else:
            self.buffer[:] = bytes(color) * self.pixel_count

    def set(self, index: int, color: Color) -> None:
        """Set a single pixel. Out-of-range writes are silently ignored."""
        if 0 <= index < self.pixel_count:
            idx = index * 3
            self.buffer[idx] = color[0]
            self.buffer[idx + 1] = color[1]
            self.buffer[idx + 2] = color[2]

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as bytes."""
        return bytes(self.buffer)

    def get(self, index: int) -> Color:
        """Get a pixel's color. Returns (0,0,0) for out-of-range."""
        if 0 <= index < self.pixel_count:
            idx = index * 3
            return (self.buffer[idx], self.buffer[idx + 1], self.buffer[idx + 2])
        return (0, 0, 0)

