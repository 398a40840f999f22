"""Shared fixtures: a manual clock and a recording audio output."""

import pytest

from music_browser.core.config import Config
from music_browser.domain.library.exceptions import DecodeError


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeOutput:
    """Audio output that records calls and serves fixed durations."""

    def __init__(self, durations=None, unplayable=()):
        self.durations = durations or {}
        self.unplayable = set(unplayable)
        self.calls = []
        self.loaded = None

    def open(self, path):
        self.calls.append(("open", path))
        if path in self.unplayable:
            raise DecodeError(path)
        self.loaded = path
        return self.durations.get(path, 60.0)

    def play(self):
        self.calls.append(("play",))

    def pause(self):
        self.calls.append(("pause",))

    def set_volume(self, volume):
        self.calls.append(("set_volume", volume))

    def close(self):
        self.calls.append(("close",))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def output():
    return FakeOutput()


@pytest.fixture
def config():
    return Config()
