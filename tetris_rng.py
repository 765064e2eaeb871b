
"""Piece randomizers: uniform (default) and 7-bag"""
import random
from typing import List, Optional


class UniformRandom:
    PIECES = ["I","J","L","O","S","T","Z"]

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_piece(self) -> str:
        # Independent draws; repeats are allowed
        return self.rng.choice(self.PIECES)


class BagRandom(UniformRandom):
    """Deals a shuffled bag of all seven kinds, refilled when empty."""

    def __init__(self, seed: Optional[int] = None):
        super().__init__(seed)
        self.bag: List[str] = []

    def next_piece(self) -> str:
        if not self.bag:
            self.bag = self.PIECES[:]
            self.rng.shuffle(self.bag)
        return self.bag.pop(0)


def make_randomizer(name: str, seed: Optional[int] = None) -> UniformRandom:
    if name == "uniform":
        return UniformRandom(seed)
    if name == "bag":
        return BagRandom(seed)
    raise ValueError(f"unknown randomizer {name!r}")
