"""Per-context stack of in-progress observations."""

from __future__ import annotations

import logging
from contextvars import ContextVar
from itertools import count
from typing import Tuple

_LOGGER = logging.getLogger(__name__)

_STACK_IDS = count()


class ActiveCallStack:
    """LIFO of operation names currently being observed.

    The stack lives in a ContextVar, so nesting depth is tracked per asyncio
    task (a task starts with a copy of its creator's stack) instead of in a
    single shared list. Within one thread of synchronous code it behaves like
    an ordinary list.

    Example:
        >>> stack = ActiveCallStack()
        >>> stack.push("render")
        0
        >>> stack.push("layout")
        1
        >>> stack.pop("layout")
        True
        >>> stack.depth
        1
    """

    def __init__(self) -> None:
        """Initialize an empty stack."""
        self._entries: ContextVar[Tuple[str, ...]] = ContextVar(
            f"call_profiler_active_calls_{next(_STACK_IDS)}", default=()
        )

    @property
    def depth(self) -> int:
        """Number of observations in progress in the current context."""
        return len(self._entries.get())

    @property
    def entries(self) -> Tuple[str, ...]:
        """In-progress operation names, outermost first."""
        return self._entries.get()

    def push(self, operation: str) -> int:
        """Push an operation and return the depth before the push."""
        entries = self._entries.get()
        self._entries.set(entries + (operation,))
        return len(entries)

    def pop(self, expected: str) -> bool:
        """Pop the top entry.

        A mismatched top is still popped; the stack keeps moving even when
        calls were not nested cleanly.

        Args:
            expected: Operation the caller believes is on top

        Returns:
            True if the popped entry matched, False on mismatch or empty stack
        """
        entries = self._entries.get()
        if not entries:
            _LOGGER.warning(
                "Call stack empty when ending %s; start/end calls are unbalanced",
                expected,
            )
            return False

        top = entries[-1]
        self._entries.set(entries[:-1])
        if top != expected:
            _LOGGER.warning(
                "Call stack mismatch: ending %s but %s was on top (depth %d)",
                expected,
                top,
                len(entries),
            )
            return False
        return True

    def clear(self) -> None:
        """Drop all entries of the current context."""
        self._entries.set(())
