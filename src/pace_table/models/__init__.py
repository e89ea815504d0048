"""Data models for distances, paces and assembled tables."""

from .distances import (
    DistanceEntry,
    DistanceCatalog,
    OFFICIAL_DISTANCES,
    TRAINING_DISTANCES,
)
from .pace_table import (
    ABS_MIN_PACE_SECONDS,
    ABS_MAX_PACE_SECONDS,
    TableMode,
    TableStatus,
    PaceEntry,
    PaceRangeConfig,
    SplitSpec,
    DistanceSelection,
    ColorSample,
    TableCell,
    TableRow,
    PaceTable,
)

__all__ = [
    "DistanceEntry",
    "DistanceCatalog",
    "OFFICIAL_DISTANCES",
    "TRAINING_DISTANCES",
    "ABS_MIN_PACE_SECONDS",
    "ABS_MAX_PACE_SECONDS",
    "TableMode",
    "TableStatus",
    "PaceEntry",
    "PaceRangeConfig",
    "SplitSpec",
    "DistanceSelection",
    "ColorSample",
    "TableCell",
    "TableRow",
    "PaceTable",
]
