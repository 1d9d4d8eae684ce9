import pytest

from inkrt.random import Prng


def test_seed_zero_first_value_is_increment():
    rng = Prng()
    rng.srand(0)
    assert rng.rand() == Prng.C


def test_same_seed_same_sequence():
    a, b = Prng(), Prng()
    a.srand(42)
    b.srand(42)
    assert [a.rand() for _ in range(20)] == [b.rand() for _ in range(20)]


def test_default_seed_deterministic():
    a, b = Prng(), Prng()
    assert [a.rand(100) for _ in range(10)] == [b.rand(100) for _ in range(10)]


def test_different_seeds_differ():
    a, b = Prng(), Prng()
    a.srand(1)
    b.srand(2)
    assert [a.rand() for _ in range(5)] != [b.rand() for _ in range(5)]


def test_raw_values_below_modulus():
    rng = Prng()
    rng.srand(7)
    assert all(0 <= rng.rand() < Prng.M for _ in range(200))


@pytest.mark.parametrize("maximum", [1, 2, 6, 1000])
def test_bounded_values_in_range(maximum):
    rng = Prng()
    rng.srand(99)
    assert all(0 <= rng.rand(maximum) < maximum for _ in range(200))


def test_reseed_restarts_sequence():
    rng = Prng()
    rng.srand(5)
    first = [rng.rand(10) for _ in range(5)]
    rng.srand(5)
    assert [rng.rand(10) for _ in range(5)] == first