"""
Pace range generation.

Produces the rows of the pace table from the user's slowest pace, fastest
pace and step. Paces are whole seconds per kilometer, bounded by the absolute
domain 2:00/km to 9:00/km whatever the configuration asks for.
"""

from typing import List

from ..models.pace_table import (
    ABS_MAX_PACE_SECONDS,
    ABS_MIN_PACE_SECONDS,
    PaceEntry,
    PaceRangeConfig,
)


def format_pace(seconds_per_km: int) -> str:
    """Format pace in seconds/km to m:ss string."""
    minutes = seconds_per_km // 60
    seconds = seconds_per_km % 60
    return f"{minutes}:{seconds:02d}"


def _entry(seconds: int) -> PaceEntry:
    return PaceEntry(label=format_pace(seconds), seconds=seconds)


def generate_paces(config: PaceRangeConfig) -> List[PaceEntry]:
    """
    Pace rows from slowest to fastest.

    Stepping starts at the slowest pace (clamped to 9:00/km) and goes down by
    interval_seconds while at or above the fastest pace (clamped to 2:00/km).
    Both clamped bounds are always present, even when the step does not land
    on them.

    Returns:
        Paces sorted by descending seconds, or an empty list when the
        configuration is inverted, has a non-positive step or lies entirely
        outside the absolute domain
    """
    if not config.is_valid:
        return []

    start = min(config.max_seconds, ABS_MAX_PACE_SECONDS)
    end = max(config.min_seconds, ABS_MIN_PACE_SECONDS)

    seconds = list(range(start, end - 1, -config.interval_seconds))
    if end not in seconds:
        seconds.append(end)
    if start not in seconds:
        seconds.append(start)

    return [_entry(s) for s in sorted(seconds, reverse=True)]
