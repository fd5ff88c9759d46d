"""IClock interface for time sources."""

from abc import ABC, abstractmethod


class IClock(ABC):
    """Interface for monotonic time sources.

    The recorder only ever subtracts two readings, so the epoch is
    arbitrary. Readings must never go backwards.

    Example:
        >>> clock = MonotonicClock()
        >>> start = clock.now_ms()
        >>> elapsed = clock.now_ms() - start
    """

    @abstractmethod
    def now_ms(self) -> float:
        """Return the current reading in milliseconds."""
