"""Memory probe implementations."""

from .tracemalloc_probe import NullMemoryProbe, TracemallocProbe

__all__ = [
    "NullMemoryProbe",
    "TracemallocProbe",
]
