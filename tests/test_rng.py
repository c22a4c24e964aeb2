"""Tests for the SeededRNG facade and stream derivation."""

from __future__ import annotations

import numpy as np
import pytest

from apputils.domain.types import RNGConfig, UINT64_MAX
from apputils.utils.rng import SeededRNG, derive_seed


def test_randint_is_inclusive() -> None:
    rng = SeededRNG(9281)

    assert {rng.randint(1, 6) for _ in range(1000)} == {1, 2, 3, 4, 5, 6}


def test_uniform_is_within_bounds() -> None:
    rng = SeededRNG(9281)

    assert all(2.0 <= rng.uniform(2.0, 3.0) <= 3.0 for _ in range(1000))


def test_choice() -> None:
    rng = SeededRNG(28931)

    assert {rng.choice(["x", "y", "z"]) for _ in range(300)} == {"x", "y", "z"}
    with pytest.raises(IndexError):
        rng.choice([])


def test_shuffle_is_a_deterministic_permutation() -> None:
    a = list(range(20))
    b = list(range(20))

    SeededRNG(647831).shuffle(a)
    SeededRNG(647831).shuffle(b)

    assert a == b
    assert sorted(a) == list(range(20))
    assert a != list(range(20))


def test_sample_returns_unique_elements() -> None:
    rng = SeededRNG(38130)
    population = list(range(50))

    picked = rng.sample(population, 10)

    assert len(picked) == 10
    assert len(set(picked)) == 10
    assert set(picked) <= set(population)
    assert population == list(range(50))
    assert rng.sample(population, 0) == []
    assert sorted(rng.sample(population, 50)) == population


@pytest.mark.parametrize("k", [-1, 4])
def test_sample_rejects_invalid_size(k: int) -> None:
    with pytest.raises(ValueError):
        SeededRNG(1).sample([1, 2, 3], k)


def test_gauss_is_centered() -> None:
    rng = SeededRNG(9281)

    values = np.array([rng.gauss(10.0, 2.0) for _ in range(5000)])

    assert values.mean() == pytest.approx(10.0, abs=0.15)
    assert values.std() == pytest.approx(2.0, abs=0.15)


def test_random_array_matches_scalar_draws() -> None:
    values = SeededRNG(28931).random_array(100)
    control = SeededRNG(28931)

    assert values.shape == (100,)
    assert values.dtype == np.float64
    assert np.all((values >= 0.0) & (values < 1.0))
    assert values.tolist() == [control.random() for _ in range(100)]
    assert SeededRNG(1).random_array(0).size == 0


def test_random_array_rejects_negative_size() -> None:
    with pytest.raises(ValueError):
        SeededRNG(1).random_array(-1)


def test_set_seed_restarts_the_stream() -> None:
    rng = SeededRNG(9281)
    first = [rng.next_uint64() for _ in range(5)]

    rng.set_seed(9281)

    assert [rng.next_uint64() for _ in range(5)] == first
    assert rng.seed == 9281


def test_from_config() -> None:
    config = RNGConfig(seed=647831, drop=0)

    rng = SeededRNG.from_config(config)

    assert rng.seed == 647831
    assert rng.next_uint64() == SeededRNG(647831, drop=0).next_uint64()


@pytest.mark.parametrize("seed, drop", [(-1, 0), (UINT64_MAX + 1, 0), (1, -5)])
def test_config_validation(seed: int, drop: int) -> None:
    with pytest.raises(ValueError):
        RNGConfig(seed=seed, drop=drop)


def test_spawn_gives_independent_reproducible_streams() -> None:
    parent = SeededRNG(9281)
    control = SeededRNG(9281)

    children = parent.spawn(4)
    again = SeededRNG(9281).spawn(4)

    firsts = [child.next_uint64() for child in children]
    assert firsts == [child.next_uint64() for child in again]
    assert len(set(firsts)) == 4
    assert parent.next_uint64() == control.next_uint64()


def test_derive_seed() -> None:
    seeds = {derive_seed(9281, index) for index in range(100)}

    assert len(seeds) == 100
    assert all(0 <= seed <= UINT64_MAX for seed in seeds)
    assert derive_seed(9281, 3) == derive_seed(9281, 3)
    assert derive_seed(9281, 3) != derive_seed(28931, 3)
    with pytest.raises(ValueError):
        derive_seed(9281, -1)


def test_weighted_choice() -> None:
    rng = SeededRNG(38130)
    weights = {"never": 0, "always": 2}

    assert rng.weighted_choice(list(weights), weights.get) == "always"
    assert rng.weighted_choice([], weights.get) is None
