"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more predictable than the real clock and heap, and they
implement the actual interface contracts.

- FakeClock: manually advanced monotonic clock
- FakeMemoryProbe: returns scripted heap readings
- SampleWidget: small stand-in for a UI widget to instrument

Example:
    >>> from tests.doubles import FakeClock
    >>> clock = FakeClock()
    >>> token = recorder.observe_start("render")
    >>> clock.advance(12.5)
    >>> recorder.observe_end(token, CallOutcome.success())
"""

from .fake_clock import FakeClock
from .fake_memory_probe import FakeMemoryProbe
from .sample_widget import SampleWidget, SlottedWidget

__all__ = [
    "FakeClock",
    "FakeMemoryProbe",
    "SampleWidget",
    "SlottedWidget",
]
