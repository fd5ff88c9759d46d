"""In-place instrumentation of an object's public methods."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Dict, Iterable, List, Optional

from ...application.services import CallStatisticsRecorder
from ...domain.exceptions import InstrumentationError
from ..decorators import instrument_call

_LOGGER = logging.getLogger(__name__)

_MISSING = object()


class MethodInstrumenter:
    """Replaces an object's callable members with timing wrappers.

    Members are resolved once, when instrument() runs: either the explicit
    list of operation names, or every public callable found by discover().
    Each wrapper is stored on the instance, so other instances of the same
    class are unaffected. restore() puts the original members back.

    Example:
        >>> instrumenter = MethodInstrumenter(recorder, excluded=["get_state"])
        >>> instrumenter.instrument(widget)
        ['render', 'scroll_to']
        >>> widget.render()  # timed
        >>> instrumenter.restore()
    """

    def __init__(
        self,
        recorder: CallStatisticsRecorder,
        excluded: Iterable[str] = (),
    ):
        """Initialize instrumenter.

        Args:
            recorder: Recorder receiving the observations
            excluded: Member names never wrapped by discovery
        """
        self._recorder = recorder
        self._excluded = frozenset(excluded)
        self._target: Any = None
        # name -> original instance attribute, or _MISSING if it came from the class
        self._originals: Dict[str, Any] = {}

    @property
    def excluded(self) -> frozenset:
        """Names skipped by discovery."""
        return self._excluded

    @property
    def instrumented_operations(self) -> List[str]:
        """Names currently wrapped, in wrapping order."""
        return list(self._originals)

    def discover(self, target: Any) -> List[str]:
        """List the public callable members of a target.

        Skips names starting with an underscore, excluded names, nested
        classes and properties. Properties are not evaluated.

        Args:
            target: Object to inspect

        Returns:
            Member names in alphabetical order
        """
        names = []
        for name in dir(target):
            if name.startswith("_") or name in self._excluded:
                continue
            try:
                static = inspect.getattr_static(target, name)
            except AttributeError:
                continue
            if isinstance(static, property) or inspect.isclass(static):
                continue
            try:
                value = getattr(target, name)
            except Exception as err:  # attribute access runs arbitrary descriptors
                _LOGGER.debug("Skipping %s: attribute access failed: %s", name, err)
                continue
            if callable(value) and not inspect.isclass(value):
                names.append(name)
        return names

    def instrument(
        self,
        target: Any,
        operations: Optional[Iterable[str]] = None,
    ) -> List[str]:
        """Wrap members of a target in place.

        Args:
            target: Object whose members are replaced
            operations: Names to wrap; discovered automatically when None

        Returns:
            Names that were wrapped

        Raises:
            InstrumentationError: If an explicit name is missing or not callable,
                or if another target is already instrumented
        """
        if self._target is not None and self._target is not target:
            raise InstrumentationError(
                "Instrumenter already holds another target; call restore() first"
            )

        explicit = operations is not None
        names = list(operations) if explicit else self.discover(target)
        self._target = target

        wrapped = []
        for name in names:
            if name in self._originals:
                continue

            original = getattr(target, name, _MISSING)
            if original is _MISSING or not callable(original):
                if explicit:
                    raise InstrumentationError(
                        f"{type(target).__name__} has no callable member {name!r}"
                    )
                continue

            previous = getattr(target, "__dict__", {}).get(name, _MISSING)
            try:
                setattr(target, name, instrument_call(self._recorder, name)(original))
            except (AttributeError, TypeError) as err:
                # __slots__, read-only descriptors and builtins cannot be replaced
                _LOGGER.debug("Cannot wrap %s: %s", name, err)
                continue

            self._originals[name] = previous
            self._recorder.register(name)
            wrapped.append(name)

        _LOGGER.info(
            "Wrapped %d %s members with call statistics",
            len(wrapped),
            type(target).__name__,
        )
        return wrapped

    def restore(self) -> None:
        """Put every original member back. Safe to call more than once."""
        if self._target is None:
            return

        for name, previous in self._originals.items():
            try:
                if previous is _MISSING:
                    delattr(self._target, name)
                else:
                    setattr(self._target, name, previous)
            except AttributeError as err:
                _LOGGER.warning("Could not restore %s: %s", name, err)

        _LOGGER.debug("Restored %d original members", len(self._originals))
        self._originals.clear()
        self._target = None
