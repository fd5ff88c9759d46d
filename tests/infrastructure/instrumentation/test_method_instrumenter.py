"""Tests for MethodInstrumenter."""

import logging

import pytest

from call_profiler.const import DEFAULT_EXCLUDED_OPERATIONS
from call_profiler.domain.exceptions import InstrumentationError
from call_profiler.infrastructure.instrumentation import MethodInstrumenter
from tests.doubles import SampleWidget, SlottedWidget


@pytest.fixture
def instrumenter(recorder):
    """Return an instrumenter using the default exclusions."""
    return MethodInstrumenter(recorder, excluded=DEFAULT_EXCLUDED_OPERATIONS)


class TestDiscover:
    """Test member discovery."""

    def test_public_callables_found(self, instrumenter, widget):
        """Test discovery lists public methods and callable attributes."""
        names = instrumenter.discover(widget)

        assert names == [
            "add_row",
            "fail",
            "load",
            "on_click",
            "refresh",
            "render",
            "version",
        ]

    def test_skips_private_excluded_properties_and_classes(self, instrumenter, widget):
        """Test non-candidates are filtered out."""
        names = instrumenter.discover(widget)

        for skipped in ("_layout", "get_state", "check_event", "row_count", "Row", "rows"):
            assert skipped not in names

    def test_property_not_evaluated(self, recorder):
        """Test discovery never runs property getters."""

        class Exploding:
            @property
            def broken(self):
                raise AssertionError("property evaluated")

            def ok(self):
                return True

        assert MethodInstrumenter(recorder).discover(Exploding()) == ["ok"]


class TestInstrument:
    """Test in-place wrapping."""

    def test_wrapped_calls_recorded(self, instrumenter, widget, recorder):
        """Test calls through the instance are recorded."""
        instrumenter.instrument(widget)

        widget.add_row("task 1")
        assert widget.render() == "rendered 1 rows"

        names = {s.name: s.executions for s in recorder.snapshot()}
        assert names == {"add_row": 1, "render": 1}

    def test_registers_all_wrapped_operations(self, instrumenter, widget, recorder):
        """Test wrapped names are registered before any call."""
        wrapped = instrumenter.instrument(widget)

        assert recorder.operation_names == wrapped
        assert instrumenter.instrumented_operations == wrapped

    def test_nested_method_depth(self, instrumenter, widget, recorder):
        """Test self-calls go through the wrapper and nest."""
        instrumenter.instrument(widget)

        widget.refresh()

        stats = {s.name: s for s in recorder.snapshot()}
        assert stats["render"].avg_stack_depth == 1.0
        assert stats["refresh"].avg_stack_depth == 0.0

    def test_explicit_operations(self, instrumenter, widget, recorder):
        """Test only the listed names are wrapped."""
        wrapped = instrumenter.instrument(widget, ["render"])

        widget.add_row("x")
        widget.render()

        assert wrapped == ["render"]
        assert [s.name for s in recorder.snapshot()] == ["render"]

    def test_explicit_may_include_excluded(self, instrumenter, widget):
        """Test exclusions only apply to discovery."""
        assert instrumenter.instrument(widget, ["get_state"]) == ["get_state"]

    def test_explicit_missing_raises(self, instrumenter, widget):
        """Test an unknown explicit name is an error."""
        with pytest.raises(InstrumentationError, match="no callable member 'zoom'"):
            instrumenter.instrument(widget, ["zoom"])

    def test_explicit_not_callable_raises(self, instrumenter, widget):
        """Test a non-callable explicit name is an error."""
        with pytest.raises(InstrumentationError):
            instrumenter.instrument(widget, ["rows"])

    def test_other_instances_untouched(self, instrumenter, widget, recorder):
        """Test wrapping one instance leaves the class alone."""
        instrumenter.instrument(widget)
        other = SampleWidget()

        other.render()

        assert recorder.snapshot() == []

    def test_exception_propagates(self, instrumenter, widget, recorder):
        """Test wrapped failures re-raise and are counted."""
        instrumenter.instrument(widget)

        with pytest.raises(RuntimeError, match="boom"):
            widget.fail()

        assert recorder.snapshot()[0].errors == 1

    def test_second_target_rejected(self, instrumenter, widget):
        """Test one instrumenter holds one target at a time."""
        instrumenter.instrument(widget)

        with pytest.raises(InstrumentationError, match="another target"):
            instrumenter.instrument(SampleWidget())

    def test_same_target_twice_does_not_double_wrap(self, instrumenter, widget, recorder):
        """Test instrumenting again skips already wrapped names."""
        instrumenter.instrument(widget)
        assert instrumenter.instrument(widget) == []

        widget.render()

        assert recorder.snapshot()[0].executions == 1

    def test_slotted_target_skipped(self, recorder, caplog):
        """Test members that cannot be replaced are skipped."""
        target = SlottedWidget()
        instrumenter = MethodInstrumenter(recorder)

        with caplog.at_level(logging.DEBUG):
            wrapped = instrumenter.instrument(target)

        assert wrapped == []
        assert target.bump() == 1
        assert "Cannot wrap bump" in caplog.text

    @pytest.mark.asyncio
    async def test_async_method(self, instrumenter, widget, recorder):
        """Test coroutine methods stay awaitable once wrapped."""
        instrumenter.instrument(widget)

        assert await widget.load() == 1

        assert recorder.snapshot()[0].name == "load"


class TestRestore:
    """Test restoring original members."""

    def test_restore_class_methods(self, instrumenter, widget, recorder):
        """Test class-level methods become plain again."""
        instrumenter.instrument(widget)
        instrumenter.restore()

        widget.render()

        assert "render" not in vars(widget)
        assert recorder.snapshot() == []
        assert instrumenter.instrumented_operations == []

    def test_restore_instance_attribute(self, instrumenter, widget):
        """Test instance-level callables get their original value back."""
        original = widget.on_click
        instrumenter.instrument(widget)
        assert widget.on_click is not original

        instrumenter.restore()

        assert widget.on_click is original

    def test_restore_idempotent(self, instrumenter, widget):
        """Test restore twice and restore without target are harmless."""
        instrumenter.restore()
        instrumenter.instrument(widget)
        instrumenter.restore()
        instrumenter.restore()

        assert widget.render() == "rendered 0 rows"

    def test_new_target_after_restore(self, instrumenter, widget):
        """Test a restored instrumenter accepts another target."""
        instrumenter.instrument(widget)
        instrumenter.restore()

        assert instrumenter.instrument(SampleWidget(), ["render"]) == ["render"]
