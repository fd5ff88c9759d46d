"""ObservationToken value object.

Captured state of one in-progress observation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ObservationToken:
    """Opaque start state handed back by observe_start.

    Attributes:
        operation: Name of the observed operation
        started_at_ms: Monotonic clock reading at call start
        stack_depth: Number of calls already in progress when this one began
        memory_before: Heap usage in bytes at call start, None if unavailable
        generation: Recorder reset count when the call began
    """

    operation: str
    started_at_ms: float
    stack_depth: int
    memory_before: Optional[int] = None
    generation: int = 0
