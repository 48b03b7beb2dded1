"""
Shared fakes and fixtures.

Nothing here opens a window or an audio device.
"""

import pytest

from invaders_core.config import Config
from invaders_core.game import Game


class RecordingRenderer:
    """Renderer that records every draw command."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_rect(self, x, y, w, h, color):
        self.calls.append(("draw_rect", x, y, w, h, color))

    def stroke_rect(self, x, y, w, h, color):
        self.calls.append(("stroke_rect", x, y, w, h, color))

    def draw_text(self, text, x, y, font="16px Arial", align="center",
                  baseline="middle", color=(255, 255, 255)):
        self.calls.append(("draw_text", text, x, y, font, align))

    def commands(self, name):
        return [c for c in self.calls if c[0] == name]

    def texts(self):
        return [c[1] for c in self.commands("draw_text")]


class RecordingSounds:
    """Sound system that remembers what was loaded and played."""

    def __init__(self):
        self.muted = False
        self.initialised = False
        self.loaded = {}
        self.played = []

    def init(self):
        self.initialised = True

    def load_sound(self, name, data):
        self.loaded[name] = data

    def play_sound(self, name):
        if not self.muted:
            self.played.append(name)

    def set_mute(self, mute):
        self.muted = mute


class ManualScheduler:
    """Scheduler driven by the test instead of a clock."""

    def __init__(self):
        self.callback = None
        self.rate = None
        self.stopped = False

    def start(self, callback, rate):
        self.callback = callback
        self.rate = rate
        self.stopped = False

    def stop(self):
        self.stopped = True

    def advance(self, ticks=1):
        for _ in range(ticks):
            self.callback()


class ScriptedRandom:
    """
    Random source returning scripted values.

    Once the script runs out ``random()`` returns ``default``, which by
    default is high enough that no bomb is ever dropped.
    """

    def __init__(self, values=(), default=0.999):
        self.values = list(values)
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default

    def uniform(self, a, b):
        return (a + b) / 2


CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def sounds():
    return RecordingSounds()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def game(renderer, sounds, scheduler, rng):
    """Initialised on an 800x600 canvas, not started."""
    g = Game(
        Config(),
        renderer=renderer,
        sounds=sounds,
        scheduler=scheduler,
        rng=rng,
    )
    g.initialise(CANVAS_WIDTH, CANVAS_HEIGHT)
    return g


def tick(game, times=1):
    for _ in range(times):
        game.tick()
