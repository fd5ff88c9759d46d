"""Domain helper functions."""

from .statistics import (
    calculate_percentiles,
    nearest_rank_percentile,
    population_std_dev,
    safe_ratio,
)

__all__ = [
    "calculate_percentiles",
    "nearest_rank_percentile",
    "population_std_dev",
    "safe_ratio",
]
