"""UDP pixel sender - streams Strip data to the LED controller over WiFi.

Protocol (per packet):
  - Bytes 0-1: start pixel offset (uint16 big-endian), 0xFFFF = frame-done signal
  - Bytes 2+:  up to PIXELS_PER_PACKET pixels of RGB565 data (little-endian)

Long strips are split across several packets, followed by one frame-done signal.
Packets are sent in small bursts with pauses between them so the controller's
UDP receive mailbox (6 packets on lwIP defaults) never overflows.

Controller listens on UDP port 7777.
"""

import socket
import struct
import time

import numpy as np

from ledpattern import config
from ledpattern.strip import Strip

FRAME_DONE = 0xFFFF
PIXELS_PER_PACKET = 256
BURST_SIZE = 4  # Packets per burst (must fit in the controller's 6-packet UDP mailbox)
BURST_DELAY = 0.004  # Pause between bursts for the controller to drain its mailbox
FRAME_DELAY = 0.005  # Post-frame delay for the controller to latch the strip


def to_rgb565(buffer: bytes | bytearray) -> bytes:
    """Vectorized RGB888 -> RGB565 (little-endian) conversion."""
    rgb = np.frombuffer(bytes(buffer), dtype=np.uint8).reshape(-1, 3)
    r = rgb[:, 0].astype(np.uint16)
    g = rgb[:, 1].astype(np.uint16)
    b = rgb[:, 2].astype(np.uint16)
    rgb565 = ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3)
    return rgb565.astype('<u2').tobytes()


def encode_frame(strip: Strip, pixels_per_packet: int = PIXELS_PER_PACKET) -> list[bytes]:
    """Split a strip into data packets, ending with the frame-done packet."""
    data = to_rgb565(strip.buffer)
    packets = []
    for start in range(0, strip.pixel_count, pixels_per_packet):
        chunk = data[start * 2:(start + pixels_per_packet) * 2]
        packets.append(struct.pack(">H", start) + chunk)
    packets.append(struct.pack(">H", FRAME_DONE))
    return packets


class Sender:
    """Streams strip pixel data to the LED controller over UDP."""

    def __init__(self, host: str | None = None, port: int | None = None):
        self.host = config.STRIP_IP if host is None else host
        self.port = config.STRIP_PORT if port is None else port
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.enabled = bool(self.host)
        if not self.enabled:
            print("[sender] No STRIP_IP set, streaming disabled. Set STRIP_IP env var to enable.")

    def send_frame(self, strip: Strip) -> None:
        """Send the entire strip as data packets + frame-done."""
        if not self.enabled:
            return
        addr = (self.host, self.port)
        packets = encode_frame(strip)
        for i, packet in enumerate(packets[:-1]):
            self.sock.sendto(packet, addr)
            if (i + 1) % BURST_SIZE == 0:
                time.sleep(BURST_DELAY)
        # Frame done signal, then wait for the controller to latch
        self.sock.sendto(packets[-1], addr)
        time.sleep(FRAME_DELAY)

    def close(self) -> None:
        self.sock.close()
