import random

import pytest

from trafsim.rando import Rando


def test_uniroll_stays_in_range():
    r = Rando(7, rng=random.Random(1))
    values = {r.uniroll() for _ in range(500)}
    assert values <= set(range(1, 8))
    assert min(values) == 1
    assert max(values) == 7


def test_uniroll_of_one_is_always_one():
    r = Rando(1)
    assert all(r.uniroll() == 1 for _ in range(20))


def test_uniroll_rejects_empty_range():
    with pytest.raises(ValueError):
        Rando(0).uniroll()


def test_roll_is_close_to_mean():
    r = Rando(1000, 0.1, rng=random.Random(3))
    for _ in range(100):
        assert r.roll() in (999, 1000)


def test_roll_returns_int():
    r = Rando(100, 25, rng=random.Random(5))
    values = [r.roll() for _ in range(50)]
    assert all(isinstance(v, int) for v in values)
    assert all(-100 < v < 300 for v in values)


def test_same_seed_gives_same_sequence():
    a = Rando(100, 25, rng=random.Random(42))
    b = Rando(100, 25, rng=random.Random(42))
    assert [a.roll() for _ in range(10)] == [b.roll() for _ in range(10)]
    assert [a.uniroll() for _ in range(10)] == [b.uniroll() for _ in range(10)]


def test_non_positive_std_rejected():
    with pytest.raises(ValueError):
        Rando(10, 0)