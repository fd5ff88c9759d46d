"""Application services for the call profiler.

The recorder is the only stateful service; DerivedStats and HotspotReport
are immutable views computed from its records.

One class per file.
"""

from .active_call_stack import ActiveCallStack
from .derived_stats import DerivedStats
from .hotspot_report import HotspotReport
from .call_statistics_recorder import CallStatisticsRecorder

__all__ = [
    "ActiveCallStack",
    "CallStatisticsRecorder",
    "DerivedStats",
    "HotspotReport",
]
