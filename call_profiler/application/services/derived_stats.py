"""Derived statistics data structure.

Summary of one operation's record, computed on demand.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple

from ...const import BYTES_PER_KB, MS_PER_SECOND, RECENT_CALLS_VIEW_SIZE
from ...domain.entities import OperationRecord
from ...domain.helpers import calculate_percentiles, population_std_dev, safe_ratio
from ...domain.value_objects import Percentiles, RecentCall


@dataclass(frozen=True)
class DerivedStats:
    """Statistical summary of one operation.

    Attributes:
        name: Operation name
        executions: Number of calls
        total_time_ms: Sum of all durations
        avg_time_ms: Mean duration
        min_time_ms: Fastest successful call (0 if none succeeded)
        max_time_ms: Slowest successful call
        std_dev_ms: Population standard deviation of durations
        percentiles: Nearest-rank p50/p90/p95/p99
        errors: Number of calls that raised
        error_rate_percent: errors / executions * 100
        calls_per_second: Throughput between first and last call
        avg_stack_depth: Mean nesting depth at call time
        avg_memory_delta_kb: Mean heap change per call in KB
        efficiency: Calls per millisecond of total time
        recent_calls: Latest ring buffer entries, oldest first
    """

    name: str
    executions: int
    total_time_ms: float
    avg_time_ms: float
    min_time_ms: float
    max_time_ms: float
    std_dev_ms: float
    percentiles: Percentiles
    errors: int
    error_rate_percent: float
    calls_per_second: float
    avg_stack_depth: float
    avg_memory_delta_kb: float
    efficiency: float
    recent_calls: Tuple[RecentCall, ...] = field(default_factory=tuple)

    @classmethod
    def from_record(
        cls,
        record: OperationRecord,
        recent_view: int = RECENT_CALLS_VIEW_SIZE,
    ) -> DerivedStats:
        """Compute derived statistics for a record with at least one call.

        Args:
            record: Record to summarize
            recent_view: Number of ring buffer entries to expose

        Raises:
            ValueError: If the record has no calls
        """
        if not record.has_calls:
            raise ValueError(f"Operation {record.name} has no observed calls")

        count = record.call_count
        avg_time = record.total_duration_ms / count

        window_seconds = 0.0
        if record.first_observed_at is not None and record.last_observed_at is not None:
            window_seconds = (record.last_observed_at - record.first_observed_at) / MS_PER_SECOND

        avg_memory_delta = 0.0
        if record.memory_samples:
            avg_memory_delta = (
                (record.memory_after_sum - record.memory_before_sum) / count / BYTES_PER_KB
            )

        recent = tuple(record.recent_calls)[-recent_view:] if recent_view > 0 else ()

        return cls(
            name=record.name,
            executions=count,
            total_time_ms=record.total_duration_ms,
            avg_time_ms=avg_time,
            min_time_ms=record.min_duration_ms if record.min_duration_ms is not None else 0.0,
            max_time_ms=record.max_duration_ms,
            std_dev_ms=population_std_dev(record.duration_samples, avg_time),
            percentiles=calculate_percentiles(record.duration_samples),
            errors=record.error_count,
            error_rate_percent=record.error_count / count * 100,
            calls_per_second=safe_ratio(count, window_seconds),
            avg_stack_depth=record.total_stack_depth / count,
            avg_memory_delta_kb=avg_memory_delta,
            efficiency=safe_ratio(count, record.total_duration_ms),
            recent_calls=recent,
        )

    def as_dict(self) -> Dict[str, Any]:
        """Plain dict form, nested value objects included."""
        data = asdict(self)
        data["recent_calls"] = [asdict(call) for call in self.recent_calls]
        return data
