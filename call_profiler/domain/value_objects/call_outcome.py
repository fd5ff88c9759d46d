"""CallOutcome value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class CallOutcome:
    """Result of an observed call: success, or failure with a reason.

    A failure built from an exception keeps the exception itself; its text
    is only rendered when ``reason`` is read.

    Example:
        >>> CallOutcome.success().succeeded
        True
        >>> CallOutcome.failure(KeyError("row")).reason
        "KeyError: 'row'"
    """

    succeeded: bool
    detail: Optional[str] = None
    error: Optional[BaseException] = field(default=None, compare=False)

    @classmethod
    def success(cls) -> CallOutcome:
        """Create a successful outcome."""
        return cls(succeeded=True)

    @classmethod
    def failure(cls, reason: Union[str, BaseException]) -> CallOutcome:
        """Create a failed outcome.

        Args:
            reason: Description of the failure, or the raised exception
        """
        if isinstance(reason, BaseException):
            return cls(succeeded=False, error=reason)
        return cls(succeeded=False, detail=reason)

    @property
    def reason(self) -> Optional[str]:
        """Human readable failure description, None on success."""
        if self.error is None:
            return self.detail
        error_type = type(self.error).__name__
        try:
            message = str(self.error)
        except Exception:
            return f"{error_type}: <unprintable>"
        return f"{error_type}: {message}"
