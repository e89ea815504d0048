"""
Time arithmetic for distances run at a constant pace.

Times are plain float seconds. An impossible computation (non-positive pace
or VMA) returns None instead of raising, and format_duration renders None
as a fixed placeholder.
"""

import math
from typing import Optional

PLACEHOLDER = "--:--"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def time_for(distance_meters: float, pace_seconds_per_km: float) -> Optional[float]:
    """
    Seconds needed to cover a distance at a given pace.

    Args:
        distance_meters: Distance in meters
        pace_seconds_per_km: Pace in seconds per kilometer

    Returns:
        Elapsed seconds, or None when the pace is not positive

    Example:
        >>> time_for(5000, 240)
        1200.0
    """
    if pace_seconds_per_km <= 0:
        return None
    return distance_meters * pace_seconds_per_km / 1000


def format_duration(total_seconds: Optional[float]) -> str:
    """
    Format seconds as hh:mm:ss, or mm:ss when under an hour.

    Seconds are rounded half-up; a rounded 60 carries into the minutes and a
    resulting 60 minutes carries into the hours. Missing, non-finite or
    non-positive input gives "--:--".
    """
    if total_seconds is None or not math.isfinite(total_seconds) or total_seconds <= 0:
        return PLACEHOLDER

    hours = int(total_seconds // 3600)
    minutes = int((total_seconds % 3600) // 60)
    seconds = round_half_up(total_seconds % 60)

    if seconds == 60:
        minutes += 1
        seconds = 0
    if minutes == 60:
        hours += 1
        minutes = 0

    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def vma_pace_seconds(vma_kmh: Optional[float]) -> Optional[float]:
    """Pace in seconds per km when running at VMA (km/h), None if VMA is unusable."""
    if vma_kmh is None or not math.isfinite(vma_kmh) or vma_kmh <= 0:
        return None
    return 3600 / vma_kmh
