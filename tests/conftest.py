import os

# Keep pygame headless and quiet for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import pytest

from ledpattern.alert import AlertPattern
from ledpattern.primitives import FixedClock


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def alert(clock: FixedClock) -> AlertPattern:
    return AlertPattern(10, clock=clock)
