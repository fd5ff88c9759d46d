"""Domain interfaces for the call profiler.

Contracts the infrastructure layer fulfils, so the recorder can be driven by
a real clock and heap probe in a session and by fakes in tests.
"""

from .i_clock import IClock
from .i_memory_probe import IMemoryProbe

__all__ = [
    "IClock",
    "IMemoryProbe",
]
