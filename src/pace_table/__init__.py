"""Pace and split time reference tables for runners."""

from pace_table.models import (
    DistanceEntry,
    DistanceCatalog,
    OFFICIAL_DISTANCES,
    TRAINING_DISTANCES,
    PaceEntry,
    PaceRangeConfig,
    SplitSpec,
    DistanceSelection,
    ColorSample,
    PaceTable,
    TableMode,
    TableStatus,
)
from pace_table.metrics import (
    time_for,
    format_duration,
    format_pace,
    generate_paces,
    generate_splits,
    color_for,
)
from pace_table.services import (
    build_table,
    list_distances,
    list_paces,
    TableSession,
    PreferencesService,
)

__version__ = "0.1.0"

__all__ = [
    "DistanceEntry",
    "DistanceCatalog",
    "OFFICIAL_DISTANCES",
    "TRAINING_DISTANCES",
    "PaceEntry",
    "PaceRangeConfig",
    "SplitSpec",
    "DistanceSelection",
    "ColorSample",
    "PaceTable",
    "TableMode",
    "TableStatus",
    "time_for",
    "format_duration",
    "format_pace",
    "generate_paces",
    "generate_splits",
    "color_for",
    "build_table",
    "list_distances",
    "list_paces",
    "TableSession",
    "PreferencesService",
]
