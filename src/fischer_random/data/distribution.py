# fischer_random/data/distribution.py
from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass
from typing import Optional

import numpy as np

from fischer_random.position import DRAW_SIZES, NUM_POSITIONS, arrangement_from_draws, encode, generate

logger = logging.getLogger(__name__)


@dataclass
class GeneratorStats:
    """Summary of how evenly `generate` covers the 960 position IDs."""

    samples: int
    distinct_ids: int
    min_count: int
    max_count: int
    expected_count: float
    chi_square: float
    exact_uniform: bool


def exact_counts() -> np.ndarray:
    """
    Number of draw sequences that land on each position ID.

    Every draw sequence (4 * 4 * 6 * 5 * 4 = 1920 of them) is equally likely.
    The two knight draws are ordered, so each arrangement is hit exactly twice.
    """
    counts = np.zeros(NUM_POSITIONS, dtype=np.int64)
    for draws in itertools.product(*(range(n) for n in DRAW_SIZES)):
        counts[encode(arrangement_from_draws(draws))] += 1
    return counts


def exact_distribution() -> np.ndarray:
    """Probability of every position ID under `generate`."""
    counts = exact_counts()
    return counts / counts.sum()


def is_exactly_uniform() -> bool:
    counts = exact_counts()
    return bool(np.all(counts == counts[0]))


def sample_counts(samples: int, seed: Optional[int] = None) -> np.ndarray:
    """Histogram of IDs over `samples` calls to `generate` (seeded for reproducibility)."""
    if samples <= 0:
        raise ValueError("samples must be positive")
    rng = random.Random(seed)
    ids = [encode(generate(rng)) for _ in range(samples)]
    return np.bincount(np.asarray(ids, dtype=np.int64), minlength=NUM_POSITIONS)


def chi_square(counts: np.ndarray) -> float:
    """Pearson chi-square statistic of `counts` against the uniform distribution."""
    counts = np.asarray(counts, dtype=np.float64)
    if counts.shape != (NUM_POSITIONS,):
        raise ValueError(f"counts must have shape ({NUM_POSITIONS},), got {counts.shape}")
    total = counts.sum()
    if total <= 0:
        raise ValueError("counts must not be empty")
    expected = total / NUM_POSITIONS
    return float(np.sum((counts - expected) ** 2) / expected)


def generator_stats(samples: int = 96_000, seed: Optional[int] = 1337, verbose: bool = True) -> GeneratorStats:
    counts = sample_counts(samples, seed=seed)
    stats = GeneratorStats(
        samples=samples,
        distinct_ids=int(np.count_nonzero(counts)),
        min_count=int(counts.min()),
        max_count=int(counts.max()),
        expected_count=samples / NUM_POSITIONS,
        chi_square=chi_square(counts),
        exact_uniform=is_exactly_uniform(),
    )
    if verbose:
        _log_stats(stats)
    return stats


def _log_stats(s: GeneratorStats) -> None:
    logger.info("Generator distribution:")
    logger.info(f"  Samples         : {s.samples:,}")
    logger.info(f"  Distinct IDs    : {s.distinct_ids} / {NUM_POSITIONS}")
    logger.info(f"  Count range     : [{s.min_count}, {s.max_count}] (expected {s.expected_count:.1f})")
    logger.info(f"  Chi-square      : {s.chi_square:.1f} (df={NUM_POSITIONS - 1})")
    logger.info(f"  Exactly uniform : {s.exact_uniform}")
