"""Domain entities for the call profiler.

Entities have identity and mutable state. An OperationRecord is identified
by its operation name and accumulates data for as long as the recorder
keeps it.
"""

from .operation_record import OperationRecord

__all__ = [
    "OperationRecord",
]
