"""Call statistics recorder.

Accepts start/end observations keyed by operation name, keeps running
aggregates per operation and derives summary statistics on demand.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from ...const import HOTSPOT_LIMIT, RECENT_CALLS_CAPACITY, RECENT_CALLS_VIEW_SIZE
from ...domain.entities import OperationRecord
from ...domain.interfaces import IClock, IMemoryProbe
from ...domain.value_objects import CallOutcome, ObservationToken
from .active_call_stack import ActiveCallStack
from .derived_stats import DerivedStats
from .hotspot_report import HotspotReport

_LOGGER = logging.getLogger(__name__)


class CallStatisticsRecorder:
    """Records per-operation call statistics.

    The recorder exclusively owns the mapping from operation name to
    OperationRecord and the stack of in-progress observations used to
    measure nesting depth.

    Modes:
        - active: observations update records
        - inactive: observe_start returns None and nothing is recorded;
          observations started while active still complete normally

    Example:
        >>> recorder = CallStatisticsRecorder(MonotonicClock())
        >>> token = recorder.observe_start("render")
        >>> recorder.observe_end(token, CallOutcome.success())
        >>> recorder.snapshot()[0].executions
        1
    """

    def __init__(
        self,
        clock: IClock,
        memory_probe: Optional[IMemoryProbe] = None,
        recent_calls_capacity: int = RECENT_CALLS_CAPACITY,
        recent_calls_view: int = RECENT_CALLS_VIEW_SIZE,
        hotspot_limit: int = HOTSPOT_LIMIT,
        active: bool = True,
    ):
        """Initialize recorder.

        Args:
            clock: Monotonic time source
            memory_probe: Optional heap usage probe
            recent_calls_capacity: Ring buffer size per operation
            recent_calls_view: Ring buffer entries exposed by snapshot()
            hotspot_limit: Entries per hotspot ranking
            active: Initial mode
        """
        self._clock = clock
        self._memory_probe = memory_probe
        self._capacity = recent_calls_capacity
        self._recent_view = recent_calls_view
        self._hotspot_limit = hotspot_limit
        self._records: Dict[str, OperationRecord] = {}
        self._call_stack = ActiveCallStack()
        self._active = active
        self._closed = False
        self._generation = 0
        self._started_at = clock.now_ms()

        _LOGGER.debug(
            "Initialized CallStatisticsRecorder (capacity=%d, view=%d, memory=%s)",
            recent_calls_capacity,
            recent_calls_view,
            memory_probe is not None,
        )

    def register(self, operation: str) -> OperationRecord:
        """Create an empty record for an operation if it does not exist yet."""
        record = self._records.get(operation)
        if record is None:
            record = OperationRecord(operation, capacity=self._capacity)
            self._records[operation] = record
        return record

    def get_record(self, operation: str) -> Optional[OperationRecord]:
        """Return the record for an operation, or None if never seen."""
        return self._records.get(operation)

    @property
    def operation_names(self) -> List[str]:
        """Known operation names in registration order."""
        return list(self._records)

    @property
    def active_calls(self) -> Tuple[str, ...]:
        """Operations in progress in the current context, outermost first."""
        return self._call_stack.entries

    def observe_start(self, operation: str) -> Optional[ObservationToken]:
        """Begin observing one call of an operation.

        Args:
            operation: Operation name; unknown names are registered on the fly

        Returns:
            Token to pass to observe_end, or None while inactive
        """
        if not self._active:
            return None

        self.register(operation)
        memory_before = self._sample_memory()
        stack_depth = self._call_stack.push(operation)
        # Clock read last so probe overhead stays out of the duration
        started_at = self._clock.now_ms()

        return ObservationToken(
            operation=operation,
            started_at_ms=started_at,
            stack_depth=stack_depth,
            memory_before=memory_before,
            generation=self._generation,
        )

    def observe_end(self, token: Optional[ObservationToken], outcome: CallOutcome) -> None:
        """Finish an observation and fold it into the operation's record.

        A failed outcome is recorded like any other call; it never raises.

        Args:
            token: Token returned by observe_start (None is ignored)
            outcome: Whether the observed call succeeded
        """
        if token is None:
            return

        ended_at = self._clock.now_ms()
        duration_ms = max(0.0, ended_at - token.started_at_ms)
        memory_after = self._sample_memory() if token.memory_before is not None else None

        if token.generation == self._generation:
            self._call_stack.pop(token.operation)
        elif self._call_stack.entries[-1:] == (token.operation,):
            # Began before a reset that only cleared another context's stack
            self._call_stack.pop(token.operation)
        else:
            _LOGGER.debug(
                "Call %s began before the last reset, its stack entry is gone",
                token.operation,
            )

        if self._closed:
            _LOGGER.debug("Recorder torn down, dropping observation of %s", token.operation)
            return

        record = self.register(token.operation)
        record.record(
            duration_ms,
            succeeded=outcome.succeeded,
            stack_depth=token.stack_depth,
            observed_at_ms=token.started_at_ms,
            relative_ms=token.started_at_ms - self._started_at,
            memory_before=token.memory_before,
            memory_after=memory_after,
        )

        if _LOGGER.isEnabledFor(logging.DEBUG):
            if outcome.succeeded:
                _LOGGER.debug(
                    "Call: %s in %.4fms (depth %d, total calls: %d)",
                    token.operation,
                    duration_ms,
                    token.stack_depth,
                    record.call_count,
                )
            else:
                _LOGGER.debug(
                    "Call: %s in %.4fms FAILED (%s)",
                    token.operation,
                    duration_ms,
                    outcome.reason,
                )

    def reset(self) -> None:
        """Clear all counters and restart the time reference.

        Record entries stay registered; only their data is cleared.
        """
        self._generation += 1
        self._started_at = self._clock.now_ms()
        self._call_stack.clear()
        for record in self._records.values():
            record.reset()
        _LOGGER.debug("Reset statistics for %d operations", len(self._records))

    def snapshot(self) -> List[DerivedStats]:
        """Derive statistics for every operation with at least one call.

        Returns:
            DerivedStats ordered by executions, highest first
        """
        stats = [
            DerivedStats.from_record(record, recent_view=self._recent_view)
            for record in self._records.values()
            if record.has_calls
        ]
        # sorted() is stable: ties keep registration order
        return sorted(stats, key=lambda stat: stat.executions, reverse=True)

    def hotspots(self) -> HotspotReport:
        """Rank operations by latency, volume, total time and error rate."""
        return HotspotReport.from_stats(self.snapshot(), limit=self._hotspot_limit)

    def activate(self) -> None:
        """Record subsequent observations."""
        if self._closed:
            _LOGGER.warning("Recorder was torn down, ignoring activate()")
            return
        self._active = True
        _LOGGER.debug("Call recording enabled")

    def deactivate(self) -> None:
        """Ignore subsequent observations.

        Records are retained; observations already in progress still finish.
        """
        self._active = False
        _LOGGER.debug("Call recording disabled")

    @property
    def is_active(self) -> bool:
        """Check if observations are being recorded."""
        return self._active

    def teardown(self) -> None:
        """Discard all records and stop recording for good."""
        self._active = False
        self._closed = True
        self._generation += 1
        self._records.clear()
        self._call_stack.clear()
        _LOGGER.debug("Recorder torn down")

    def _sample_memory(self) -> Optional[int]:
        if self._memory_probe is None:
            return None
        return self._memory_probe.sample()
