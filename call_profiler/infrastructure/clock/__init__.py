"""Clock implementations."""

from .monotonic_clock import MonotonicClock

__all__ = ["MonotonicClock"]
