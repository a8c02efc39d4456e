import json
import socket
import time

import pytest

from ledpattern.alert import AlertPattern
from ledpattern.control import ControlListener, create_control_listener
from ledpattern.run import render_frame
from ledpattern.strip import Strip


@pytest.fixture
def listener(alert: AlertPattern):
    sock = create_control_listener(port=0, host="127.0.0.1")
    assert sock is not None
    control = ControlListener(alert, sock)
    yield control
    control.close()


@pytest.fixture
def client():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.settimeout(2.0)
    yield sock
    sock.close()


def poll_until(control: ControlListener, expected: int = 1, timeout: float = 2.0) -> int:
    handled = 0
    deadline = time.monotonic() + timeout
    while handled < expected and time.monotonic() < deadline:
        handled += control.poll()
        time.sleep(0.01)
    return handled


class TestHandle:
    """Datagram parsing without a socket."""

    def test_set_vars(self, alert: AlertPattern) -> None:
        control = ControlListener(alert, None)
        assert control.handle(b'{"setVars": {"hue": 0.25, "speed": 0.1}}')
        assert alert.get_vars() == {"hue": 0.25, "speed": 0.1}

    def test_unknown_vars_are_reported(self, alert: AlertPattern, capsys) -> None:
        control = ControlListener(alert, None)
        assert control.handle(b'{"setVars": {"hue": 0.5, "glow": 2}}')
        assert alert.params.hue == 0.5
        assert "glow" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "payload",
        [
            b"not json",
            b"\xff\xfe",
            b"[1, 2]",
            b'{"setVars": 3}',
            b'{"setVars": {"speed": "fast"}}',
            b'{"hello": true}',
            b'{"setVars": {"hue": NaN}}',
            b'{"setVars": {"speed": NaN}}',
            b'{"setVars": {"hue": Infinity}}',
            b'{"setVars": {"hue": 1e400}}',
            b"[" * 4000,
        ],
    )
    def test_rejected_payloads_leave_vars_unchanged(self, alert: AlertPattern, payload: bytes,
                                                    capsys) -> None:
        control = ControlListener(alert, None)
        assert not control.handle(payload)
        assert alert.get_vars() == {"hue": 0.0, "speed": 0.03}

    @pytest.mark.parametrize(
        "payload",
        [b'{"setVars": {"hue": NaN}}', b'{"setVars": {"speed": NaN}}', b'{"setVars": {"hue": Infinity}}'],
    )
    def test_non_finite_values_never_reach_the_frame(self, alert: AlertPattern,
                                                     payload: bytes) -> None:
        ControlListener(alert, None).handle(payload)
        strip = Strip(alert.pixel_count)
        render_frame(alert, strip, 16.0)
        assert alert.get_vars() == {"hue": 0.0, "speed": 0.03}

    def test_rejected_set_vars_still_counts_get_vars(self, alert: AlertPattern) -> None:
        control = ControlListener(alert, None)
        assert control.handle(b'{"setVars": {"speed": "fast"}, "getVars": true}')
        assert alert.get_vars() == {"hue": 0.0, "speed": 0.03}

    def test_poll_without_socket_is_a_no_op(self, alert: AlertPattern) -> None:
        assert ControlListener(alert, None).poll() == 0


class TestListener:
    def test_bind_failure_disables_listener(self, capsys) -> None:
        taken = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        taken.bind(("127.0.0.1", 0))
        try:
            port = taken.getsockname()[1]
            assert create_control_listener(port=port, host="127.0.0.1") is None
        finally:
            taken.close()
        assert "Could not bind" in capsys.readouterr().out

    def test_poll_applies_set_vars(self, listener: ControlListener, client, alert) -> None:
        client.sendto(json.dumps({"setVars": {"hue": 0.66}}).encode(), listener.address)
        assert poll_until(listener) == 1
        assert alert.params.hue == 0.66

    def test_poll_drains_all_waiting_messages(self, listener: ControlListener, client,
                                              alert) -> None:
        for hue in (0.1, 0.2, 0.3):
            client.sendto(json.dumps({"setVars": {"hue": hue}}).encode(), listener.address)
        assert poll_until(listener, expected=3) == 3
        assert alert.params.hue == 0.3

    def test_get_vars_replies_to_sender(self, listener: ControlListener, client) -> None:
        client.sendto(b'{"getVars": true}', listener.address)
        assert poll_until(listener) == 1
        reply, _ = client.recvfrom(4096)
        assert json.loads(reply) == {"vars": {"hue": 0.0, "speed": 0.03}}

    def test_get_vars_replies_after_rejected_set_vars(self, listener: ControlListener,
                                                      client) -> None:
        client.sendto(b'{"setVars": {"hue": NaN}, "getVars": true}', listener.address)
        assert poll_until(listener) == 1
        reply, _ = client.recvfrom(4096)
        assert json.loads(reply) == {"vars": {"hue": 0.0, "speed": 0.03}}
