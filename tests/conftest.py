import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from tetris_engine import BoardEngine


class ScriptedRandom:
    """Deals piece kinds from a fixed list, cycling when exhausted."""

    def __init__(self, kinds):
        self.kinds = list(kinds)
        self.i = 0

    def next_piece(self):
        t = self.kinds[self.i % len(self.kinds)]
        self.i += 1
        return t


@pytest.fixture
def make_engine():
    def build(kinds=("O", "T", "I"), **config):
        return BoardEngine(config, rng=ScriptedRandom(kinds))
    return build
