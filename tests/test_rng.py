import pytest

from pokebattle.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    rolls_a = [rng_a.roll_die() for _ in range(10)]
    rolls_b = [rng_b.roll_die() for _ in range(10)]

    assert rolls_a == rolls_b
    assert all(1 <= roll <= 6 for roll in rolls_a)


def test_roll_die_respects_sides() -> None:
    rng = RNG(7)
    assert {rng.roll_die(1) for _ in range(5)} == {1}
    with pytest.raises(ValueError):
        rng.roll_die(0)
