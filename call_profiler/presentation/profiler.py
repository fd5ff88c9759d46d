"""Interactive profiling session for a live object."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from ..application.services import CallStatisticsRecorder, DerivedStats, HotspotReport
from ..config_loader import ProfilerConfig
from ..domain.exceptions import InstrumentationError
from ..domain.interfaces import IClock, IMemoryProbe
from .container import create_container
from .report_formatter import format_hotspots, format_statistics

_LOGGER = logging.getLogger(__name__)


class CallProfiler:
    """Instruments a live object and reports on its method calls.

    Construction wraps the target's public methods (or the explicit
    ``operations``) and, unless ``start_active`` is off, starts recording at
    once. destroy() puts the original methods back.

    Example:
        >>> profiler = CallProfiler(gantt_widget)
        >>> gantt_widget.render()
        >>> profiler.get_hotspots()
        >>> profiler.destroy()

        >>> with CallProfiler(gantt_widget, operations=["render"]) as profiler:
        ...     gantt_widget.render()
        ...     stats = profiler.get_stats(log_report=False)
    """

    def __init__(
        self,
        target: Any,
        config: Optional[ProfilerConfig] = None,
        *,
        operations: Optional[Iterable[str]] = None,
        clock: Optional[IClock] = None,
        memory_probe: Optional[IMemoryProbe] = None,
    ):
        """Initialize profiler and instrument the target.

        Args:
            target: Object whose methods are timed
            config: Session configuration (defaults when None)
            operations: Member names to wrap; discovered when None
            clock: Time source override
            memory_probe: Heap probe override

        Raises:
            InstrumentationError: If an explicit operation cannot be wrapped
        """
        if target is None:
            raise ValueError("No target instance provided")

        self._container = create_container(config, clock=clock, memory_probe=memory_probe)
        self._target = target
        self._destroyed = False

        try:
            self._container.instrumenter.instrument(target, operations)
        except InstrumentationError:
            self._container.instrumenter.restore()
            self._container.memory_probe.close()
            raise
        if self._container.config.start_active:
            self._container.recorder.activate()

    @property
    def recorder(self) -> CallStatisticsRecorder:
        """Recorder holding this session's statistics."""
        return self._container.recorder

    @property
    def instrumented_operations(self) -> List[str]:
        """Names of the wrapped members."""
        return self._container.instrumenter.instrumented_operations

    @property
    def is_active(self) -> bool:
        """Check if calls are being recorded."""
        return self._container.recorder.is_active

    def start(self) -> None:
        """Start (or resume) recording calls."""
        _LOGGER.info("Starting call profiler for %s", type(self._target).__name__)
        self._container.recorder.activate()

    def stop(self) -> None:
        """Pause recording. Wrapped methods keep working normally."""
        _LOGGER.info("Stopping call profiler for %s", type(self._target).__name__)
        self._container.recorder.deactivate()

    def reset(self) -> None:
        """Clear all statistics collected so far."""
        _LOGGER.info("Resetting call statistics")
        self._container.recorder.reset()

    def get_stats(self, log_report: bool = True) -> List[DerivedStats]:
        """Return derived statistics, most-called operation first.

        Args:
            log_report: Also log the formatted report at INFO level
        """
        stats = self._container.recorder.snapshot()
        if log_report:
            _LOGGER.info("\n%s", format_statistics(stats))
        return stats

    def get_hotspots(self, log_report: bool = True) -> HotspotReport:
        """Return the hotspot rankings.

        Args:
            log_report: Also log the formatted rankings at INFO level
        """
        report = self._container.recorder.hotspots()
        if log_report:
            _LOGGER.info("\n%s", format_hotspots(report))
        return report

    def destroy(self) -> None:
        """Restore the original methods and discard all statistics.

        Safe to call more than once.
        """
        if self._destroyed:
            return
        self._destroyed = True

        self._container.instrumenter.restore()
        self._container.recorder.teardown()
        self._container.memory_probe.close()
        _LOGGER.info(
            "Call profiler destroyed, original %s methods restored",
            type(self._target).__name__,
        )

    def __enter__(self) -> CallProfiler:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()
