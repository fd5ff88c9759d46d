"""Presentation layer: reports, container and the profiler facade."""

from .container import DIContainer, create_container
from .profiler import CallProfiler
from .report_formatter import format_hotspots, format_statistics

__all__ = [
    "CallProfiler",
    "DIContainer",
    "create_container",
    "format_hotspots",
    "format_statistics",
]
