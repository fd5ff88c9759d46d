"""Pytest configuration and fixtures for call profiler tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import call_profiler and tests.doubles
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from call_profiler.application.services import CallStatisticsRecorder
from call_profiler.domain.value_objects import CallOutcome
from tests.doubles import FakeClock, FakeMemoryProbe, SampleWidget


@pytest.fixture
def fake_clock() -> FakeClock:
    """Return a fake clock starting at 1000ms."""
    return FakeClock(start_ms=1000.0)


@pytest.fixture
def recorder(fake_clock) -> CallStatisticsRecorder:
    """Return an active recorder driven by the fake clock, no memory probe."""
    return CallStatisticsRecorder(fake_clock)


@pytest.fixture
def memory_probe() -> FakeMemoryProbe:
    """Return a probe alternating 1 KB before / 3 KB after each call."""
    return FakeMemoryProbe([1024, 3072] * 50)


@pytest.fixture
def widget() -> SampleWidget:
    """Return a fresh sample widget."""
    return SampleWidget()


@pytest.fixture
def observe(recorder, fake_clock):
    """Return a helper that records one call of a given duration.

    Example:
        >>> observe("render", 4.0)
        >>> observe("render", 2.0, succeeded=False)
    """

    def _observe(name: str, duration_ms: float, succeeded: bool = True) -> None:
        token = recorder.observe_start(name)
        fake_clock.advance(duration_ms)
        outcome = CallOutcome.success() if succeeded else CallOutcome.failure("failed")
        recorder.observe_end(token, outcome)

    return _observe
