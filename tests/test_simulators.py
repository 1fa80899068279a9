# test_simulators.py
#
# Unit tests for simulator-layer utilities.
# Scope:
# - sims.disturbance_generator: DisturbanceGenerator

import random
from collections import Counter

import pytest

from sims.disturbance_generator import DisturbanceGenerator


def test_default_intensity_is_full():
    gen = DisturbanceGenerator(rng=random.Random(0))
    assert gen.intensity == 1.0


@pytest.mark.parametrize("value, expected", [(-0.5, 0.0), (0.0, 0.0), (0.25, 0.25), (1.0, 1.0), (3.0, 1.0)])
def test_intensity_is_clamped(value, expected):
    gen = DisturbanceGenerator(intensity=value, rng=random.Random(0))
    assert gen.intensity == expected


@pytest.mark.parametrize(
    "intensity, expected",
    [
        (0.0, 1.0),
        (0.5, 2.0 / 3.0),
        (1.0, 1.0 / 3.0),
    ],
)
def test_calm_probability_interpolates_linearly(intensity, expected):
    gen = DisturbanceGenerator(intensity=intensity)
    assert gen.calm_probability() == pytest.approx(expected)


def test_draws_are_unit_steps():
    gen = DisturbanceGenerator(rng=random.Random(123))
    values = {gen.draw() for _ in range(500)}
    assert values <= {-1, 0, 1}
    assert values == {-1, 0, 1}


def test_zero_intensity_never_disturbs():
    gen = DisturbanceGenerator(intensity=0.0, rng=random.Random(7))
    assert all(gen.draw() == 0 for _ in range(1000))


def test_full_intensity_is_roughly_uniform():
    gen = DisturbanceGenerator(intensity=1.0, rng=random.Random(42))
    counts = Counter(gen.draw() for _ in range(30_000))

    for value in (-1, 0, 1):
        assert counts[value] / 30_000 == pytest.approx(1.0 / 3.0, abs=0.02)


def test_half_intensity_keeps_up_and_down_equiprobable():
    gen = DisturbanceGenerator(intensity=0.5, rng=random.Random(99))
    counts = Counter(gen.draw() for _ in range(30_000))

    assert counts[0] / 30_000 == pytest.approx(2.0 / 3.0, abs=0.02)
    assert counts[-1] / 30_000 == pytest.approx(counts[1] / 30_000, abs=0.02)


def test_same_seed_gives_same_sequence():
    a = DisturbanceGenerator(rng=random.Random(5))
    b = DisturbanceGenerator(rng=random.Random(5))

    assert [a.draw() for _ in range(50)] == [b.draw() for _ in range(50)]
