"""Shared fakes for the game's input and output collaborators."""

import logging
import random
from collections import deque

import pytest

from termsnake.config import GameConfig
from termsnake.game import Game
from termsnake.log import LOGGER_NAME


class RecordingSurface:
    """Surface that remembers every call made on it."""

    def __init__(self):
        self.calls = []
        self.flushes = 0

    def clear(self):
        self.calls.append(("clear",))

    def draw_cell(self, position, size, color):
        self.calls.append(("cell", position, size, color))

    def draw_text(self, position, text, color):
        self.calls.append(("text", position, text, color))

    def flush(self):
        self.flushes += 1
        self.calls.append(("flush",))

    def cells(self, color=None):
        return [c for c in self.calls if c[0] == "cell" and (color is None or c[3] == color)]


class ScriptedInput:
    """Input source fed from a list; ``feed`` queues events for the next drain."""

    def __init__(self, events=()):
        self.queue = deque(events)
        self.reads = 0

    def feed(self, *events):
        self.queue.extend(events)

    def poll(self, timeout):
        return bool(self.queue)

    def read(self):
        self.reads += 1
        return self.queue.popleft()


class FakeClock:
    """Manual clock; ``sleep`` advances it."""

    def __init__(self, now=0.0, max_sleeps=100000):
        self.now = now
        self.sleeps = []
        self.max_sleeps = max_sleeps

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        if len(self.sleeps) > self.max_sleeps:
            raise RuntimeError("loop did not terminate")
        self.now += seconds


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def events():
    return ScriptedInput()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def game(config, clock):
    return Game(config, rng=random.Random(1234), clock=clock, sleep=clock.sleep)


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
