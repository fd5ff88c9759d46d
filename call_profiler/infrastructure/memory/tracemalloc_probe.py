"""Heap usage probes."""

import logging
import tracemalloc
from typing import Optional

from ...domain.interfaces import IMemoryProbe

_LOGGER = logging.getLogger(__name__)


class TracemallocProbe(IMemoryProbe):
    """Reports memory currently traced by tracemalloc.

    Without tracing the probe returns None, so calls are recorded without
    memory figures. With ``start_tracing=True`` the probe starts tracing
    itself and stops it again on close(), but only if it was the one that
    started it.

    Example:
        >>> probe = TracemallocProbe(start_tracing=True)
        >>> probe.sample() is not None
        True
        >>> probe.close()
    """

    def __init__(self, start_tracing: bool = False):
        """Initialize probe.

        Args:
            start_tracing: Start tracemalloc if it is not already tracing
        """
        self._owns_tracing = False
        if start_tracing and not tracemalloc.is_tracing():
            tracemalloc.start()
            self._owns_tracing = True
            _LOGGER.debug("Started tracemalloc for memory sampling")

    def sample(self) -> Optional[int]:
        """Return currently traced bytes, or None when not tracing."""
        if not tracemalloc.is_tracing():
            return None
        current, _peak = tracemalloc.get_traced_memory()
        return current

    def close(self) -> None:
        """Stop tracemalloc if this probe started it."""
        if self._owns_tracing:
            tracemalloc.stop()
            self._owns_tracing = False
            _LOGGER.debug("Stopped tracemalloc")


class NullMemoryProbe(IMemoryProbe):
    """Probe for sessions without memory sampling."""

    def sample(self) -> Optional[int]:
        """Always None."""
        return None
