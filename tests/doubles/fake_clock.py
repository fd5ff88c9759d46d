"""Fake clock for deterministic durations."""

from call_profiler.domain.interfaces import IClock


class FakeClock(IClock):
    """Clock that only moves when told to.

    Example:
        >>> clock = FakeClock(start_ms=100.0)
        >>> clock.advance(5.0)
        >>> clock.now_ms()
        105.0
    """

    def __init__(self, start_ms: float = 0.0):
        """Initialize fake clock at a given reading."""
        self._now = start_ms
        self.reads = 0

    def now_ms(self) -> float:
        """Return the current reading."""
        self.reads += 1
        return self._now

    def advance(self, delta_ms: float) -> None:
        """Move the clock forward.

        Raises:
            ValueError: If delta is negative (monotonic clocks never go back)
        """
        if delta_ms < 0:
            raise ValueError("FakeClock cannot move backwards")
        self._now += delta_ms
