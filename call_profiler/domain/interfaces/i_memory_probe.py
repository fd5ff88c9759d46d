"""IMemoryProbe interface for heap usage sampling."""

from abc import ABC, abstractmethod
from typing import Optional


class IMemoryProbe(ABC):
    """Interface for optional heap usage probes.

    A probe that cannot measure returns None; the recorder then skips
    memory accounting for that call rather than recording zeros.

    Example:
        >>> probe = TracemallocProbe(start_tracing=True)
        >>> before = probe.sample()
        >>> probe.close()
    """

    @abstractmethod
    def sample(self) -> Optional[int]:
        """Return current heap usage in bytes, or None if unavailable."""

    def close(self) -> None:
        """Release resources held by the probe.

        Safe to call more than once. The default implementation does nothing.
        """
