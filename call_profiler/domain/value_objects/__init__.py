"""Domain value objects.

Value objects are immutable objects defined by their attributes.
"""

from .call_outcome import CallOutcome
from .observation_token import ObservationToken
from .percentiles import Percentiles
from .recent_call import RecentCall

__all__ = [
    "CallOutcome",
    "ObservationToken",
    "Percentiles",
    "RecentCall",
]
