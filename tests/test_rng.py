import pytest

from tetris_rng import BagRandom, UniformRandom, make_randomizer


def test_uniform_is_reproducible_with_seed():
    r1, r2 = UniformRandom(42), UniformRandom(42)
    seq = [r1.next_piece() for _ in range(50)]
    assert seq == [r2.next_piece() for _ in range(50)]
    assert set(seq) <= set(UniformRandom.PIECES)


def test_uniform_allows_repeats():
    r = UniformRandom(1)
    seq = [r.next_piece() for _ in range(200)]
    assert set(seq) == set(UniformRandom.PIECES)
    assert any(x == y for x, y in zip(seq, seq[1:]))


def test_bag_deals_each_kind_once_per_bag():
    r = BagRandom(5)
    seq = [r.next_piece() for _ in range(21)]
    for i in range(0, 21, 7):
        assert sorted(seq[i:i + 7]) == sorted(BagRandom.PIECES)


def test_make_randomizer():
    assert type(make_randomizer("uniform")) is UniformRandom
    assert type(make_randomizer("bag", 1)) is BagRandom
    with pytest.raises(ValueError):
        make_randomizer("nes")
