"""Tests for the generator distribution analysis"""

import logging

import numpy as np
import pytest

from fischer_random.data import (
    GeneratorStats,
    chi_square,
    exact_counts,
    exact_distribution,
    generator_stats,
    is_exactly_uniform,
    sample_counts,
)


def test_exact_counts_two_per_position():
    counts = exact_counts()
    assert counts.shape == (960,)
    assert counts.sum() == 4 * 4 * 6 * 5 * 4
    assert np.all(counts == 2)


def test_exact_distribution_is_uniform():
    p = exact_distribution()
    assert p.shape == (960,)
    assert np.isclose(p.sum(), 1.0)
    assert np.allclose(p, 1 / 960)
    assert is_exactly_uniform()


def test_sample_counts_seeded():
    c1 = sample_counts(2000, seed=11)
    c2 = sample_counts(2000, seed=11)
    assert c1.shape == (960,)
    assert c1.sum() == 2000
    assert np.array_equal(c1, c2)


def test_sample_counts_rejects_non_positive():
    with pytest.raises(ValueError):
        sample_counts(0)


def test_chi_square_uniform_is_zero():
    assert chi_square(np.full(960, 5)) == 0.0


def test_chi_square_skewed():
    counts = np.zeros(960)
    counts[0] = 960
    # all mass on one cell: (960-1)^2/1 + 959 * 1 = 959 * 960
    assert chi_square(counts) == pytest.approx(959 * 960)


@pytest.mark.parametrize("bad", [np.ones(10), np.zeros(960)])
def test_chi_square_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        chi_square(bad)


def test_generator_stats(caplog):
    with caplog.at_level(logging.INFO, logger="fischer_random.data.distribution"):
        stats = generator_stats(samples=48_000, seed=1337, verbose=True)
    assert isinstance(stats, GeneratorStats)
    assert stats.samples == 48_000
    assert stats.distinct_ids == 960
    assert stats.expected_count == 50.0
    assert stats.min_count <= 50 <= stats.max_count
    assert stats.exact_uniform is True
    # 959 degrees of freedom: mean 959, sd ~44
    assert stats.chi_square < 959 + 6 * 44
    assert "Generator distribution" in caplog.text
