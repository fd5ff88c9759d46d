"""Timing decorator that feeds a CallStatisticsRecorder."""

import inspect
from functools import wraps
from typing import Callable, Optional

from ...application.services import CallStatisticsRecorder
from ...domain.value_objects import CallOutcome


def instrument_call(
    recorder: CallStatisticsRecorder,
    operation_name: Optional[str] = None,
):
    """Decorator that times every call of a function.

    Anything raised by the function, including KeyboardInterrupt and task
    cancellation, is recorded as a failure and then re-raised unchanged. While the recorder is inactive the function runs
    untouched.

    Args:
        recorder: Recorder receiving the observations
        operation_name: Name to record under (defaults to the function name)

    Example:
        @instrument_call(recorder, "render")
        def render(self, rows):
            ...

        @instrument_call(recorder)
        async def refresh(self):
            ...
    """

    def decorator(func: Callable):
        name = operation_name or getattr(func, "__name__", repr(func))

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            token = recorder.observe_start(name)
            try:
                result = await func(*args, **kwargs)
            except BaseException as err:
                recorder.observe_end(token, CallOutcome.failure(err))
                raise
            recorder.observe_end(token, CallOutcome.success())
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            token = recorder.observe_start(name)
            try:
                result = func(*args, **kwargs)
            except BaseException as err:
                recorder.observe_end(token, CallOutcome.failure(err))
                raise
            recorder.observe_end(token, CallOutcome.success())
            return result

        return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper

    return decorator
