"""Plain-text rendering of statistics and hotspot reports."""

from __future__ import annotations

from typing import List, Sequence

from ..application.services import DerivedStats, HotspotReport

_RULE = "=" * 47


def format_statistics(stats: Sequence[DerivedStats]) -> str:
    """Render a snapshot as a multi-line report.

    Args:
        stats: Snapshot as returned by CallStatisticsRecorder.snapshot()

    Returns:
        Report text without a trailing newline
    """
    lines = ["CALL EXECUTION STATISTICS", _RULE]

    if not stats:
        lines.append("No function executions recorded yet.")
        return "\n".join(lines)

    total_calls = sum(stat.executions for stat in stats)
    total_time = sum(stat.total_time_ms for stat in stats)
    lines.append(f"Total: {total_calls} calls in {total_time:.3f}ms")
    lines.append(_RULE)

    for index, stat in enumerate(stats, start=1):
        lines.append("")
        lines.extend(_format_operation(index, stat))

    lines.append("")
    lines.append(_RULE)
    return "\n".join(lines)


def _format_operation(index: int, stat: DerivedStats) -> List[str]:
    pct = stat.percentiles
    lines = [
        f"{index}. {stat.name}",
        f"   Executions: {stat.executions} ({stat.calls_per_second:.2f}/sec)",
        f"   Total Time: {stat.total_time_ms:.3f}ms",
        f"   Avg: {stat.avg_time_ms:.4f}ms | Min: {stat.min_time_ms:.4f}ms"
        f" | Max: {stat.max_time_ms:.4f}ms",
        f"   Percentiles: P50={pct.p50:.4f}ms | P90={pct.p90:.4f}ms"
        f" | P95={pct.p95:.4f}ms | P99={pct.p99:.4f}ms",
        f"   StdDev: {stat.std_dev_ms:.4f}ms | Efficiency: {stat.efficiency:.2f} calls/ms",
        f"   Stack Depth: {stat.avg_stack_depth:.1f} avg"
        f" | Memory: {stat.avg_memory_delta_kb:.1f}KB avg",
    ]
    if stat.errors:
        lines.append(f"   Errors: {stat.errors} ({stat.error_rate_percent:.1f}%)")
    if stat.recent_calls:
        recent = ", ".join(f"{call.duration_ms:.2f}ms" for call in stat.recent_calls)
        lines.append(f"   Recent calls: {recent}")
    return lines


def format_hotspots(report: HotspotReport) -> str:
    """Render the four hotspot rankings.

    The error-prone section is omitted when no operation failed.
    """
    lines = ["PERFORMANCE HOTSPOTS", "=" * 23]

    lines.append("")
    lines.append("Slowest functions (by avg time):")
    lines.extend(
        f"{i}. {stat.name}: {stat.avg_time_ms:.4f}ms avg"
        for i, stat in enumerate(report.slowest, start=1)
    )

    lines.append("")
    lines.append("Most called functions:")
    lines.extend(
        f"{i}. {stat.name}: {stat.executions} calls"
        for i, stat in enumerate(report.most_called, start=1)
    )

    lines.append("")
    lines.append("Biggest time consumers:")
    lines.extend(
        f"{i}. {stat.name}: {stat.total_time_ms:.3f}ms total"
        for i, stat in enumerate(report.biggest_total_time, start=1)
    )

    if report.most_error_prone:
        lines.append("")
        lines.append("Most error-prone functions:")
        lines.extend(
            f"{i}. {stat.name}: {stat.error_rate_percent:.1f}% error rate"
            for i, stat in enumerate(report.most_error_prone, start=1)
        )

    return "\n".join(lines)
