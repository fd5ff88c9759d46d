"""Infrastructure layer decorators."""

from .instrument import instrument_call

__all__ = [
    "instrument_call",
]
