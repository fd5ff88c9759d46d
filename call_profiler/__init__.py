"""Call profiler: per-method timing statistics for live objects.

Typical interactive use:

    >>> from call_profiler import CallProfiler
    >>> profiler = CallProfiler(widget)
    >>> ...  # interact with the widget
    >>> profiler.get_stats()
    >>> profiler.get_hotspots()
    >>> profiler.destroy()

The recorder can also be driven directly with observe_start/observe_end or
through the instrument_call decorator.
"""

from .application.services import CallStatisticsRecorder, DerivedStats, HotspotReport
from .config_loader import ProfilerConfig, load_profiler_config, validate_profiler_config
from .domain.exceptions import CallProfilerError, InstrumentationError, ProfilerConfigError
from .domain.value_objects import CallOutcome, ObservationToken, Percentiles, RecentCall
from .infrastructure.decorators import instrument_call
from .infrastructure.instrumentation import MethodInstrumenter
from .presentation import CallProfiler, format_hotspots, format_statistics

__all__ = [
    "CallOutcome",
    "CallProfiler",
    "CallProfilerError",
    "CallStatisticsRecorder",
    "DerivedStats",
    "HotspotReport",
    "InstrumentationError",
    "MethodInstrumenter",
    "ObservationToken",
    "Percentiles",
    "ProfilerConfig",
    "ProfilerConfigError",
    "RecentCall",
    "format_hotspots",
    "format_statistics",
    "instrument_call",
    "load_profiler_config",
    "validate_profiler_config",
]
