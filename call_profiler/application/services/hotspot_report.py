"""Hotspot report data structure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from ...const import HOTSPOT_LIMIT
from .derived_stats import DerivedStats


@dataclass(frozen=True)
class HotspotReport:
    """Operations ranked by four cost metrics.

    Attributes:
        slowest: Highest average duration first
        most_called: Highest call count first
        biggest_total_time: Highest total duration first
        most_error_prone: Highest error rate first, only operations with errors
    """

    slowest: List[DerivedStats]
    most_called: List[DerivedStats]
    biggest_total_time: List[DerivedStats]
    most_error_prone: List[DerivedStats]

    @classmethod
    def from_stats(
        cls, stats: Sequence[DerivedStats], limit: int = HOTSPOT_LIMIT
    ) -> HotspotReport:
        """Rank a snapshot; each ranking keeps at most ``limit`` entries."""
        failing = [stat for stat in stats if stat.errors > 0]
        return cls(
            slowest=sorted(stats, key=lambda s: s.avg_time_ms, reverse=True)[:limit],
            most_called=sorted(stats, key=lambda s: s.executions, reverse=True)[:limit],
            biggest_total_time=sorted(
                stats, key=lambda s: s.total_time_ms, reverse=True
            )[:limit],
            most_error_prone=sorted(
                failing, key=lambda s: s.error_rate_percent, reverse=True
            )[:limit],
        )

    @property
    def is_empty(self) -> bool:
        """Check if nothing has been observed."""
        return not self.most_called

    def as_dict(self) -> Dict[str, Any]:
        """Plain dict form keyed by ranking name."""
        return {
            "slowest": [stat.as_dict() for stat in self.slowest],
            "most_called": [stat.as_dict() for stat in self.most_called],
            "biggest_total_time": [stat.as_dict() for stat in self.biggest_total_time],
            "most_error_prone": [stat.as_dict() for stat in self.most_error_prone],
        }
