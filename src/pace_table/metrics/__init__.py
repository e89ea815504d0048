"""Pure pace, time, split and color computations."""

from .timing import PLACEHOLDER, time_for, format_duration, vma_pace_seconds
from .splits import generate_splits, splits_for, format_distance_label
from .paces import generate_paces, format_pace
from .colors import color_for, effort_pace_window

__all__ = [
    "PLACEHOLDER",
    "time_for",
    "format_duration",
    "vma_pace_seconds",
    "generate_splits",
    "splits_for",
    "format_distance_label",
    "generate_paces",
    "format_pace",
    "color_for",
    "effort_pace_window",
]
