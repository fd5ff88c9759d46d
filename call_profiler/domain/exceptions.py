"""Custom exceptions for the call profiler.

Failures of the measured callables are never wrapped in these: they are
recorded as data and re-raised to the caller unchanged. The exceptions here
cover misuse of the profiler itself.
"""


class CallProfilerError(Exception):
    """Base class for all call profiler errors."""


class ProfilerConfigError(CallProfilerError, ValueError):
    """Profiler configuration is missing fields or has invalid values.

    Subclasses ValueError so callers that already treat bad configuration
    as a ValueError keep working.

    Example:
        >>> raise ProfilerConfigError("hotspot_limit: value must be at least 1")
    """


class InstrumentationError(CallProfilerError):
    """An explicitly requested member cannot be instrumented.

    Raised when an operation name passed to the instrumenter does not exist
    on the target or is not callable. Members found by discovery that cannot
    be replaced are skipped instead.
    """
