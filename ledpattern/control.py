"""setVars / getVars control listener.

Each UDP datagram is one JSON object:
  {"setVars": {"hue": 0.5, "speed": 0.01}}   - update exported vars
  {"getVars": true}                          - reply with {"vars": {...}}

Polled between frames by the run loop, so vars never change mid-frame.

    echo '{"setVars": {"hue": 0.66}}' | nc -u -w0 127.0.0.1 7778
"""

import json
import socket

from ledpattern import config
from ledpattern.pattern import Pattern

MAX_DATAGRAM = 4096


def create_control_listener(port: int | None = None, host: str = "0.0.0.0"):
    """Create a non-blocking UDP socket for control messages, or None if the port is taken."""
    port = config.CONTROL_PORT if port is None else port
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.setblocking(False)
        return sock
    except OSError as e:
        print(f"[control] Could not bind control listener on port {port}: {e}")
        return None


class ControlListener:
    """Applies setVars/getVars datagrams to a pattern."""

    def __init__(self, pattern: Pattern, sock: socket.socket | None):
        self.pattern = pattern
        self.sock = sock

    @property
    def address(self) -> tuple[str, int] | None:
        return self.sock.getsockname() if self.sock is not None else None

    def handle(self, data: bytes, addr=None) -> bool:
        """Process one datagram. Returns True if at least one command in it was applied."""
        try:
            message = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            print(f"[control] Dropping malformed message from {addr}: {e}")
            return False
        if not isinstance(message, dict):
            print(f"[control] Dropping non-object message from {addr}")
            return False

        # A rejected setVars does not stop a getVars in the same message
        handled = False
        if "setVars" in message:
            values = message["setVars"]
            if not isinstance(values, dict):
                print(f"[control] setVars expects an object, got {type(values).__name__}")
            else:
                try:
                    ignored = self.pattern.set_vars(values)
                except ValueError as e:
                    print(f"[control] Rejected setVars: {e}")
                else:
                    if ignored:
                        print(f"[control] Ignoring unknown vars: {', '.join(ignored)}")
                    handled = True

        if message.get("getVars"):
            if self.sock is not None and addr is not None:
                reply = json.dumps({"vars": self.pattern.get_vars()}).encode()
                self.sock.sendto(reply, addr)
            handled = True

        return handled

    def poll(self) -> int:
        """Drain all waiting datagrams. Returns the number of commands handled."""
        if self.sock is None:
            return 0
        count = 0
        try:
            while True:
                data, addr = self.sock.recvfrom(MAX_DATAGRAM)
                if self.handle(data, addr):
                    count += 1
        except BlockingIOError:
            pass
        return count

    def close(self) -> None:
        if self.sock is not None:
            self.sock.close()
