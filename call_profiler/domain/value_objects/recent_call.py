"""RecentCall value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecentCall:
    """One entry of an operation's recent-call ring buffer.

    Attributes:
        timestamp_ms: Call start, relative to the recorder's start reference
        duration_ms: Call duration in milliseconds
        stack_depth: Calls already in progress when this one began
        memory_delta_bytes: Heap usage change across the call (0 if unknown)
    """

    timestamp_ms: float
    duration_ms: float
    stack_depth: int
    memory_delta_bytes: int = 0
