import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pixel_racer.utils.input import ControlSignal


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def idle() -> ControlSignal:
    return ControlSignal()


@pytest.fixture
def throttle() -> ControlSignal:
    return ControlSignal(accelerate=True)


class FakeClock:
    """Millisecond clock the tests advance by hand."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms
        return self.now


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
