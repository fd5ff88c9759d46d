"""Tests for statistics helper functions."""

import pytest

from call_profiler.domain.helpers.statistics import (
    calculate_percentiles,
    nearest_rank_percentile,
    population_std_dev,
    safe_ratio,
)
from call_profiler.domain.value_objects import Percentiles


class TestNearestRankPercentile:
    """Test nearest-rank percentile selection."""

    def test_one_to_ten(self):
        """Test the documented 1..10 example."""
        values = [float(v) for v in range(1, 11)]

        assert nearest_rank_percentile(values, 50) == 5.0
        assert nearest_rank_percentile(values, 90) == 9.0
        assert nearest_rank_percentile(values, 95) == 10.0
        assert nearest_rank_percentile(values, 99) == 10.0

    def test_empty_returns_zero(self):
        """Test empty input yields 0.0."""
        assert nearest_rank_percentile([], 50) == 0.0

    def test_single_sample_serves_all_percentiles(self):
        """Test one sample is every percentile."""
        for rank in (0, 50, 99, 100):
            assert nearest_rank_percentile([7.5], rank) == 7.5

    def test_zero_percentile_clamped_to_first(self):
        """Test rank below zero is clamped to the first sample."""
        assert nearest_rank_percentile([1.0, 2.0, 3.0], 0) == 1.0

    def test_never_interpolates(self):
        """Test result is always an actual sample."""
        values = [10.0, 20.0]
        assert nearest_rank_percentile(values, 50) == 10.0
        assert nearest_rank_percentile(values, 51) == 20.0


class TestCalculatePercentiles:
    """Test percentile bundle calculation."""

    def test_unsorted_input(self):
        """Test samples are sorted before ranking."""
        values = [float(v) for v in (10, 3, 7, 1, 9, 2, 8, 4, 6, 5)]

        result = calculate_percentiles(values)

        assert result == Percentiles(p50=5.0, p90=9.0, p95=10.0, p99=10.0)

    def test_input_not_mutated(self):
        """Test the caller's list keeps its order."""
        values = [3.0, 1.0, 2.0]
        calculate_percentiles(values)
        assert values == [3.0, 1.0, 2.0]

    def test_empty(self):
        """Test empty samples give zero percentiles."""
        assert calculate_percentiles([]) == Percentiles()


class TestPopulationStdDev:
    """Test population standard deviation."""

    def test_known_value(self):
        """Test classic example has std dev 2 (divide by n)."""
        values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        assert population_std_dev(values, 5.0) == pytest.approx(2.0)

    def test_single_sample_is_zero(self):
        """Test n <= 1 is defined as zero."""
        assert population_std_dev([3.0], 3.0) == 0.0
        assert population_std_dev([], 0.0) == 0.0

    def test_constant_samples(self):
        """Test identical samples have no spread."""
        assert population_std_dev([4.0] * 5, 4.0) == 0.0


class TestSafeRatio:
    """Test guarded division."""

    def test_regular_division(self):
        assert safe_ratio(10, 4) == 2.5

    def test_zero_denominator(self):
        assert safe_ratio(5, 0) == 0.0

    def test_negative_denominator(self):
        assert safe_ratio(5, -1) == 0.0
