import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pytest

from holetap.core import GameSession, MemoryBestScore, RandomSource, RoundConfig

SCREEN = (1280, 720)


class ScriptedRandom(RandomSource):
    """
    Returns queued values from random(); once the script runs out it keeps
    returning `fallback` (0.99 never passes a spawn roll).
    """

    def __init__(self, values=(), fallback: float = 0.99):
        super().__init__(0)
        self.values = list(values)
        self.fallback = fallback
        self.calls = 0

    def push(self, *values):
        self.values.extend(values)

    def random(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.fallback


@pytest.fixture
def scripted():
    return ScriptedRandom()


@pytest.fixture
def store():
    return MemoryBestScore()


@pytest.fixture
def session(scripted, store):
    """A started session where nothing spawns unless the test scripts it."""
    s = GameSession(cfg=RoundConfig(), screen_size=SCREEN, rng=scripted, store=store)
    s.start()
    return s
