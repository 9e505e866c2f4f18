"""Statistics and formatting helpers for lead-time reporting.

This module provides utilities for:
- Computing mean, median and maximum from a single ascending sort of samples.
- Formatting second-based durations as whole seconds or whole minutes.
- Building a human-readable lead-time report.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .models import LeadTimeStats

_UNIT_SECONDS = {"seconds": 1, "minutes": 60}


def compute_statistics(samples: Sequence[int]) -> Optional[LeadTimeStats]:
    """Compute mean, median, max and sample count for lead-time samples.

    The median is the element at index ``N // 2`` of the ascending-sorted
    samples, so for an even count it is the upper of the two middle values
    rather than their average.

    Args:
        samples: Lead-time samples in whole seconds.

    Returns:
        A ``LeadTimeStats`` instance, or ``None`` when there are no samples.
    """
    if not samples:
        return None

    ordered = sorted(samples)
    count = len(ordered)

    return LeadTimeStats(
        count=count,
        mean=sum(ordered) / count,
        median=ordered[count // 2],
        maximum=ordered[-1],
    )


def format_duration(seconds: Optional[float], unit: str = "minutes") -> str:
    """Format a duration in seconds as a whole number of ``unit``.

    Args:
        seconds: Duration in seconds.
        unit: Either ``"seconds"`` or ``"minutes"``.

    Returns:
        ``"n/a"`` when ``seconds`` is ``None``; otherwise the duration
        truncated to whole units, e.g. ``"59 minutes"``.

    Raises:
        ValueError: If ``unit`` is not supported.
    """
    if unit not in _UNIT_SECONDS:
        raise ValueError(f"Unsupported duration unit: {unit!r}")

    if seconds is None:
        return "n/a"

    return f"{int(seconds // _UNIT_SECONDS[unit])} {unit}"


def generate_report(
    repo: str,
    team: str,
    stats: Optional[LeadTimeStats],
    unit: str = "minutes",
) -> str:
    """Generate a human-readable lead-time report for a repository and team.

    Args:
        repo: Repository display name, usually ``owner/name``.
        team: Team display name, usually ``org/team``.
        stats: Computed statistics, or ``None`` when no samples were found.
        unit: Unit passed to :func:`format_duration`.

    Returns:
        Formatted multi-line text report.
    """
    lines = [
        f"Repository: {repo}",
        f"Team: {team}",
        "Lead Time Report (commit authored to CI completed)",
        "",
    ]

    if stats is None:
        lines.append("No data: no merged pull requests by team members with completed CI.")
        return "\n".join(lines)

    lines.extend(
        [
            f"   Samples: {stats.count}",
            f"   Mean: {format_duration(stats.mean, unit)}",
            f"   Median: {format_duration(stats.median, unit)}",
            f"   Max: {format_duration(stats.maximum, unit)}",
        ]
    )

    return "\n".join(lines)
