# fischer_random/data/__init__.py
"""
Position datasets and generator statistics.

Exports:
    - GeneratorStats / generator_stats: how evenly `generate` covers all IDs
    - exact_distribution, sample_counts, chi_square: the underlying pieces
    - position_record / write_positions / read_positions: JSONL datasets
"""

from .distribution import (
    GeneratorStats,
    chi_square,
    exact_counts,
    exact_distribution,
    generator_stats,
    is_exactly_uniform,
    sample_counts,
)
from .positions import position_record, read_positions, write_positions

__all__ = [
    "GeneratorStats",
    "generator_stats",
    "exact_counts",
    "exact_distribution",
    "is_exactly_uniform",
    "sample_counts",
    "chi_square",
    "position_record",
    "write_positions",
    "read_positions",
]
