"""
Effort color mapping.

A distance's soutien bounds (percentages of VMA) define the pace window a
runner can hold over it:

    fastest pace = VMA pace / (max_soutien / 100)
    slowest pace = VMA pace / (min_soutien / 100)

Paces inside the window are normalized to t in [0, 1], 0 at the fastest pace
and 1 at the slowest, and mapped to rgb(255*t, 255*(1-t), 0): green at the
fast end of the window shading to red at the slow end. Paces outside the
window, non-finite paces, distances without bounds and unusable VMA values
get no color.
"""

import math
from typing import Optional

from ..models.distances import DistanceEntry
from ..models.pace_table import ColorSample
from .timing import round_half_up, vma_pace_seconds


def effort_pace_window(distance: DistanceEntry, vma: Optional[float]) -> Optional[tuple[float, float]]:
    """(fastest, slowest) sustainable pace in seconds/km, or None."""
    vma_pace = vma_pace_seconds(vma)
    if vma_pace is None or not distance.has_effort_bounds:
        return None
    min_pace = vma_pace / (distance.max_soutien / 100)
    max_pace = vma_pace / (distance.min_soutien / 100)
    return min_pace, max_pace


def color_for(pace_seconds: float, distance: DistanceEntry, vma: Optional[float]) -> Optional[ColorSample]:
    """
    Color of a table cell for the given pace and distance.

    Args:
        pace_seconds: Pace of the row, seconds per km
        distance: Column distance; must carry soutien bounds to be colored
        vma: Maximal aerobic speed in km/h

    Returns:
        ColorSample with rgb(255*t, 255*(1-t), 0), or None for no color
    """
    window = effort_pace_window(distance, vma)
    if window is None:
        return None

    min_pace, max_pace = window
    if not math.isfinite(pace_seconds):
        return None
    if pace_seconds < min_pace or pace_seconds > max_pace:
        return None

    span = max_pace - min_pace
    t = (pace_seconds - min_pace) / span if span > 0 else 0.0
    red = round_half_up(t * 255)
    return ColorSample(t=t, red=red, green=255 - red, blue=0)
