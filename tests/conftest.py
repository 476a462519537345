import random

import pytest

from escape_snake.config import Config
from escape_snake.game import Game


class MaxRng:
    """
    Deterministic stand-in for random.Random: randrange always returns the
    largest value and choice the first item. New food lands in the
    bottom-right interior corner, and food never escapes unless the snake is
    long enough to saturate the evasion weight.
    """

    def randrange(self, start, stop=None):
        if stop is None:
            return start - 1
        return stop - 1

    def choice(self, seq):
        return seq[0]


class ScriptedRng:
    """Plays back fixed randrange draws and records what choice() was offered."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.offered = []

    def randrange(self, start, stop=None):
        return self.draws.pop(0)

    def choice(self, seq):
        self.offered.append(list(seq))
        return seq[-1]


@pytest.fixture
def max_rng():
    return MaxRng()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def make_game(max_rng):
    def _make(**overrides):
        return Game(Config(**overrides), rng=max_rng)
    return _make
