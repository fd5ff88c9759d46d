"""OperationRecord entity holding running aggregates for one operation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from ...const import RECENT_CALLS_CAPACITY
from ..value_objects import RecentCall


@dataclass(eq=False)
class OperationRecord:
    """Running counters, samples and recent history for one operation name.

    A record is identified by its name. It is created the first time the
    operation is seen, mutated by every observation, and cleared (not
    removed) on reset.

    Invariants:
        - error_count <= call_count
        - len(duration_samples) == call_count (failed calls add a sample too)
        - len(recent_calls) <= recent_calls capacity

    Attributes:
        name: Operation name, unique key
        call_count: Observed calls, successful or not
        error_count: Observed calls that raised
        total_duration_ms: Sum of all durations, failures included
        duration_samples: One duration per call, in observation order
        min_duration_ms: Fastest successful call, None until the first success
        max_duration_ms: Slowest successful call
        first_observed_at: Monotonic start time of the first call (ms)
        last_observed_at: Monotonic start time of the latest call (ms)
        total_stack_depth: Sum of nesting depth at call time
        memory_before_sum: Sum of heap samples taken before calls
        memory_after_sum: Sum of heap samples taken after calls
        recent_calls: Ring buffer of the latest calls, oldest first

    Example:
        >>> record = OperationRecord("render")
        >>> record.record(4.0, succeeded=True, stack_depth=0, observed_at_ms=10.0)
        >>> record.call_count, record.min_duration_ms
        (1, 4.0)
    """

    name: str
    capacity: int = RECENT_CALLS_CAPACITY
    call_count: int = 0
    error_count: int = 0
    total_duration_ms: float = 0.0
    duration_samples: List[float] = field(default_factory=list)
    min_duration_ms: Optional[float] = None
    max_duration_ms: float = 0.0
    first_observed_at: Optional[float] = None
    last_observed_at: Optional[float] = None
    total_stack_depth: int = 0
    memory_before_sum: int = 0
    memory_after_sum: int = 0
    memory_samples: int = 0
    recent_calls: Deque[RecentCall] = field(init=False)

    def __post_init__(self) -> None:
        """Validate capacity and create the ring buffer."""
        if self.capacity < 1:
            raise ValueError(f"Recent call capacity must be at least 1, got {self.capacity}")
        self.recent_calls = deque(maxlen=self.capacity)

    def record(
        self,
        duration_ms: float,
        succeeded: bool,
        stack_depth: int,
        observed_at_ms: float,
        relative_ms: float = 0.0,
        memory_before: Optional[int] = None,
        memory_after: Optional[int] = None,
    ) -> None:
        """Fold one finished call into the aggregates.

        Args:
            duration_ms: Elapsed time of the call
            succeeded: False if the call raised
            stack_depth: Calls already in progress when this one began
            observed_at_ms: Monotonic start time, used for throughput
            relative_ms: Start time relative to the recorder's reference
            memory_before: Heap sample before the call, if available
            memory_after: Heap sample after the call, if available
        """
        self.call_count += 1
        if not succeeded:
            self.error_count += 1

        self.total_duration_ms += duration_ms
        self.duration_samples.append(duration_ms)

        # Extrema track successful calls only
        if succeeded:
            if self.min_duration_ms is None or duration_ms < self.min_duration_ms:
                self.min_duration_ms = duration_ms
            if duration_ms > self.max_duration_ms:
                self.max_duration_ms = duration_ms

        if self.first_observed_at is None:
            self.first_observed_at = observed_at_ms
        self.last_observed_at = observed_at_ms

        self.total_stack_depth += stack_depth

        memory_delta = 0
        if memory_before is not None and memory_after is not None:
            self.memory_before_sum += memory_before
            self.memory_after_sum += memory_after
            self.memory_samples += 1
            memory_delta = memory_after - memory_before

        # deque(maxlen=...) evicts the oldest entry when full
        self.recent_calls.append(
            RecentCall(
                timestamp_ms=relative_ms,
                duration_ms=duration_ms,
                stack_depth=stack_depth,
                memory_delta_bytes=memory_delta,
            )
        )

    def reset(self) -> None:
        """Return every counter to its initial state, keeping the name."""
        self.call_count = 0
        self.error_count = 0
        self.total_duration_ms = 0.0
        self.duration_samples = []
        self.min_duration_ms = None
        self.max_duration_ms = 0.0
        self.first_observed_at = None
        self.last_observed_at = None
        self.total_stack_depth = 0
        self.memory_before_sum = 0
        self.memory_after_sum = 0
        self.memory_samples = 0
        self.recent_calls.clear()

    @property
    def has_calls(self) -> bool:
        """Check if at least one call was observed since the last reset."""
        return self.call_count > 0
