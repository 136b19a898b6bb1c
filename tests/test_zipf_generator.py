import random
from collections import Counter

import pytest

from skewgen.constants import DEFAULT_MAX, DEFAULT_THETA, DEFAULT_ZETA_N, MAX_UINT64
from skewgen.errors import InvalidParameterError, RangeExhaustedError
from skewgen.random_variable.zipf_generator import (
    ZipfGenerator,
    compute_zeta_from_scratch,
    compute_zeta_incrementally,
)
from skewgen.utils.random import create_rng


@pytest.mark.parametrize(
    "min,max,theta",
    [
        (5, 3, 0.5),
        (0, 10, 1.0),
        (0, 10, -0.1),
        (-1, 10, 0.5),
        (0, MAX_UINT64 + 1, 0.5),
    ],
)
def test_rejects_invalid_parameters(rng, min, max, theta):
    with pytest.raises(InvalidParameterError):
        ZipfGenerator(rng, min, max, theta)


def test_rejects_limit_below_max(rng):
    with pytest.raises(InvalidParameterError):
        ZipfGenerator(rng, 0, 10, 0.5, limit=9)


@pytest.mark.parametrize("theta", [0.0, 0.5, 0.99, 1.5])
def test_values_stay_in_range(rng, theta):
    generator = ZipfGenerator(rng, 3, 50, theta)
    for _ in range(5000):
        assert 3 <= generator.next() <= 50


def test_single_value_range(rng):
    generator = ZipfGenerator(rng, 7, 7, 0.99)
    assert {generator.next() for _ in range(100)} == {7}


def test_two_value_range(rng):
    generator = ZipfGenerator(rng, 0, 1, 0.99)
    assert {generator.next() for _ in range(1000)} == {0, 1}


def test_low_ranks_are_most_frequent(rng):
    generator = ZipfGenerator(rng, 0, 9, 0.99)
    counts = Counter(generator.next() for _ in range(20000))

    assert counts[0] > counts[1] > counts[5]
    assert counts[0] > 5 * counts[9]


def test_zero_theta_is_close_to_uniform(rng):
    generator = ZipfGenerator(rng, 0, 9, 0.0)
    counts = Counter(generator.next() for _ in range(20000))

    assert set(counts) == set(range(10))
    assert max(counts.values()) < 2 * min(counts.values())


def test_inc_max_grows_by_one(rng):
    generator = ZipfGenerator(rng, 0, 10, 0.8)
    generator.inc_max()
    assert generator.get_max() == 11

    seen = {generator.next() for _ in range(20000)}
    assert max(seen) <= 11


def test_inc_max_matches_zeta_from_scratch(rng):
    generator = ZipfGenerator(rng, 0, 10, 0.7)
    for _ in range(40):
        generator.inc_max()

    fresh = ZipfGenerator(rng, 0, 50, 0.7)
    assert generator._zeta_n == pytest.approx(fresh._zeta_n)
    assert generator._eta == pytest.approx(fresh._eta)


def test_inc_max_at_limit_leaves_state_unchanged(rng):
    generator = ZipfGenerator(rng, 0, 5, 0.5, limit=6)
    generator.inc_max()
    zeta_n = generator._zeta_n

    with pytest.raises(RangeExhaustedError):
        generator.inc_max()

    assert generator.get_max() == 6
    assert generator._zeta_n == zeta_n
    assert 0 <= generator.next() <= 6


def test_incremental_zeta_matches_scratch():
    partial = compute_zeta_from_scratch(10, 0.7)
    assert compute_zeta_incrementally(10, 1000, 0.7, partial) == pytest.approx(
        compute_zeta_from_scratch(1000, 0.7)
    )


def test_zeta_spans_multiple_chunks(monkeypatch):
    expected = sum(1.0 / i**0.5 for i in range(1, 101))
    monkeypatch.setattr(
        "skewgen.random_variable.zipf_generator.ZETA_CHUNK_SIZE", 7
    )
    assert compute_zeta_from_scratch(100, 0.5) == pytest.approx(expected)


def test_incremental_zeta_refuses_to_shrink():
    with pytest.raises(ValueError):
        compute_zeta_incrementally(10, 5, 0.5, 1.0)


def test_default_zeta_is_precomputed():
    assert compute_zeta_from_scratch(DEFAULT_MAX, DEFAULT_THETA) == DEFAULT_ZETA_N


def test_seeded_sources_reproduce_sequences():
    first = ZipfGenerator(create_rng(7), 0, 1000, 0.99)
    second = ZipfGenerator(create_rng(7), 0, 1000, 0.99)

    assert [first.next() for _ in range(200)] == [second.next() for _ in range(200)]


def test_accepts_stdlib_random_source():
    generator = ZipfGenerator(random.Random(3), 0, 100, 0.99)
    for _ in range(1000):
        assert 0 <= generator.next() <= 100


@pytest.mark.parametrize("theta", [35.0, 60.0, 200.0, 1e6])
def test_rejects_theta_too_large_for_range(rng, theta):
    with pytest.raises(InvalidParameterError):
        ZipfGenerator(rng, 0, 10, theta)


@pytest.mark.parametrize("theta", [35.0, 60.0, 200.0])
def test_growth_past_two_items_with_large_theta(rng, theta):
    generator = ZipfGenerator(rng, 0, 1, theta)

    with pytest.raises(RangeExhaustedError):
        generator.inc_max()

    assert generator.get_max() == 1
    assert {generator.next() for _ in range(100)} <= {0, 1}


def test_eta_overflow_is_reported_as_unrepresentable(rng):
    generator = ZipfGenerator(rng, 0, 1, 33.0)
    assert generator._compute_eta(10**10, generator._zeta_2 * 2) is None


@pytest.mark.parametrize("max", [1, 2, 10, 1000])
@pytest.mark.parametrize("theta", [2.0, 5.0, 20.0, 33.0, 34.0, 35.0, 60.0, 200.0])
def test_large_theta_samples_or_refuses(rng, theta, max):
    try:
        generator = ZipfGenerator(rng, 0, max, theta)
    except InvalidParameterError:
        return

    for _ in range(200):
        assert 0 <= generator.next() <= max

    try:
        generator.inc_max()
    except RangeExhaustedError:
        assert generator.get_max() == max
    else:
        assert generator.get_max() == max + 1

    for _ in range(200):
        assert 0 <= generator.next() <= generator.get_max()
