"""Statistics helper functions.

Pure functions used to turn raw duration samples into summary figures.
Percentiles use the nearest-rank method: the result is always one of the
samples, never an interpolation between two of them.
"""

import math
from typing import Sequence

from ...const import PERCENTILE_RANKS
from ..value_objects import Percentiles


def nearest_rank_percentile(sorted_values: Sequence[float], percentile: float) -> float:
    """Pick the nearest-rank percentile from an ascending sequence.

    The rank is ``ceil(p / 100 * n) - 1`` clamped to ``[0, n - 1]``, so for
    small samples the same value may serve several percentiles.

    Args:
        sorted_values: Samples sorted ascending
        percentile: Percentile to pick (0-100)

    Returns:
        Selected sample, or 0.0 for an empty sequence

    Examples:
        >>> nearest_rank_percentile([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 90)
        9
        >>> nearest_rank_percentile([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 95)
        10
        >>> nearest_rank_percentile([], 50)
        0.0
    """
    count = len(sorted_values)
    if count == 0:
        return 0.0

    # p * n / 100 rather than p / 100 * n keeps whole ranks exact
    index = math.ceil(percentile * count / 100) - 1
    index = max(0, min(count - 1, index))
    return sorted_values[index]


def calculate_percentiles(values: Sequence[float]) -> Percentiles:
    """Calculate p50/p90/p95/p99 for unsorted samples.

    Examples:
        >>> calculate_percentiles([3.0, 1.0, 2.0])
        Percentiles(p50=2.0, p90=3.0, p95=3.0, p99=3.0)
    """
    if not values:
        return Percentiles()

    ordered = sorted(values)
    p50, p90, p95, p99 = (
        nearest_rank_percentile(ordered, rank) for rank in PERCENTILE_RANKS
    )
    return Percentiles(p50=p50, p90=p90, p95=p95, p99=p99)


def population_std_dev(values: Sequence[float], mean: float) -> float:
    """Population standard deviation of samples about a given mean.

    Divides by n, not n - 1. Defined as 0 for fewer than two samples.

    Examples:
        >>> population_std_dev([2, 4, 4, 4, 5, 5, 7, 9], 5.0)
        2.0
        >>> population_std_dev([42.0], 42.0)
        0.0
    """
    if len(values) <= 1:
        return 0.0

    variance = sum((value - mean) ** 2 for value in values) / len(values)
    return math.sqrt(variance)


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 when the denominator is not positive.

    Examples:
        >>> safe_ratio(10, 4)
        2.5
        >>> safe_ratio(3, 0)
        0.0
    """
    if denominator <= 0:
        return 0.0
    return numerator / denominator
