"""Tests for call profiler value objects."""

import dataclasses

import pytest

from call_profiler.domain.value_objects import CallOutcome, ObservationToken


def test_success_outcome():
    """Test success has no reason."""
    outcome = CallOutcome.success()

    assert outcome.succeeded is True
    assert outcome.reason is None


def test_failure_from_string():
    """Test failure keeps a plain reason."""
    outcome = CallOutcome.failure("row not found")

    assert outcome.succeeded is False
    assert outcome.reason == "row not found"


def test_failure_from_exception():
    """Test failure built from an exception names its type."""
    outcome = CallOutcome.failure(ValueError("bad zoom"))

    assert outcome.reason == "ValueError: bad zoom"


def test_token_is_immutable():
    """Test tokens cannot be altered after creation."""
    token = ObservationToken(operation="render", started_at_ms=1.0, stack_depth=0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        token.stack_depth = 3


def test_failure_keeps_exception():
    """Test the raised exception is kept on the outcome."""
    error = KeyError("row")
    outcome = CallOutcome.failure(error)

    assert outcome.error is error
    assert outcome.reason == "KeyError: 'row'"


def test_failure_reason_unprintable_exception():
    """Test a failing __str__ does not escape from reason."""

    class UnprintableError(Exception):
        def __str__(self):
            raise RuntimeError("cannot format")

    outcome = CallOutcome.failure(UnprintableError())

    assert outcome.reason == "UnprintableError: <unprintable>"
