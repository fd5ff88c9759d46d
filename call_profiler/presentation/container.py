"""Dependency Injection Container.

Holds the objects of one profiling session and wires them together:
infrastructure first (clock, memory probe), then the recorder, then the
instrumenter that feeds it. Tests pass fakes for the clock and probe.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..application.services import CallStatisticsRecorder
from ..config_loader import ProfilerConfig
from ..domain.interfaces import IClock, IMemoryProbe
from ..infrastructure.clock import MonotonicClock
from ..infrastructure.instrumentation import MethodInstrumenter
from ..infrastructure.memory import NullMemoryProbe, TracemallocProbe

_LOGGER = logging.getLogger(__name__)


@dataclass
class DIContainer:
    """Dependency Injection Container.

    Attributes:
        config: Validated session configuration
        clock: Monotonic time source
        memory_probe: Heap usage probe
        recorder: Call statistics recorder
        instrumenter: Member wrapper feeding the recorder

    Example:
        >>> container = create_container(ProfilerConfig())
        >>> container.instrumenter.instrument(widget)
        >>> container.recorder.snapshot()
    """

    config: ProfilerConfig
    clock: IClock
    memory_probe: IMemoryProbe
    recorder: CallStatisticsRecorder
    instrumenter: MethodInstrumenter


def create_container(
    config: Optional[ProfilerConfig] = None,
    clock: Optional[IClock] = None,
    memory_probe: Optional[IMemoryProbe] = None,
) -> DIContainer:
    """Factory function to create a fully-wired container.

    Args:
        config: Session configuration (defaults when None)
        clock: Time source (MonotonicClock when None)
        memory_probe: Heap probe (TracemallocProbe if config.track_memory,
            otherwise NullMemoryProbe, when None)

    Returns:
        Wired DIContainer. The recorder starts inactive; the caller activates
        it once instrumentation is in place.
    """
    if config is None:
        config = ProfilerConfig()
    if clock is None:
        clock = MonotonicClock()
    if memory_probe is None:
        memory_probe = (
            TracemallocProbe(start_tracing=True) if config.track_memory else NullMemoryProbe()
        )

    recorder = CallStatisticsRecorder(
        clock,
        memory_probe=memory_probe,
        recent_calls_capacity=config.recent_calls_capacity,
        recent_calls_view=config.recent_calls_view,
        hotspot_limit=config.hotspot_limit,
        active=False,
    )
    instrumenter = MethodInstrumenter(recorder, excluded=config.excluded_operations)

    _LOGGER.debug(
        "Created profiler container (clock=%s, memory_probe=%s)",
        type(clock).__name__,
        type(memory_probe).__name__,
    )

    return DIContainer(
        config=config,
        clock=clock,
        memory_probe=memory_probe,
        recorder=recorder,
        instrumenter=instrumenter,
    )
