"""Monotonic clock backed by the high-resolution performance counter."""

import time

from ...domain.interfaces import IClock


class MonotonicClock(IClock):
    """IClock implementation using time.perf_counter."""

    def now_ms(self) -> float:
        """Return the performance counter in milliseconds."""
        return time.perf_counter() * 1000.0
