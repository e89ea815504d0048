"""Pace table assembly.

This service handles:
- Choosing the distance columns for the selected mode
- Generating the pace rows from the pace range configuration
- Computing, formatting and optionally coloring every cell
- Recomputing a table when, and only when, its inputs change
"""

import logging
from functools import lru_cache
from typing import Optional, Tuple

from ..metrics.colors import color_for
from ..metrics.paces import generate_paces
from ..metrics.splits import generate_splits
from ..metrics.timing import format_duration, time_for, vma_pace_seconds
from ..models.distances import OFFICIAL_DISTANCES, TRAINING_DISTANCES, DistanceEntry
from ..models.pace_table import (
    DistanceSelection,
    PaceEntry,
    PaceRangeConfig,
    PaceTable,
    TableCell,
    TableMode,
    TableRow,
    TableStatus,
)
from .preferences_service import PreferencesService

logger = logging.getLogger(__name__)


STATUS_MESSAGES = {
    TableStatus.AWAITING_SELECTION: "Select a race distance to see split times.",
    TableStatus.INVALID_PACE_CONFIG: (
        "Invalid pace configuration. Check that the slowest pace is slower than "
        "the fastest pace and within the limits (2:00-9:00)."
    ),
    TableStatus.NO_DISTANCES: "No distances to display for the selected mode.",
}


@lru_cache(maxsize=128)
def list_distances(
    mode: TableMode,
    selection: Optional[DistanceSelection] = None,
) -> Tuple[DistanceEntry, ...]:
    """
    Distance columns for a mode.

    Intermediate mode needs a selected official race; without one (or with an
    unknown key) there are no columns.
    """
    mode = TableMode(mode)
    if mode == TableMode.INTERVAL:
        return TRAINING_DISTANCES.all()
    if mode == TableMode.INTERMEDIATE:
        race = OFFICIAL_DISTANCES.lookup(selection.race_key if selection else None)
        if race is None:
            return ()
        return tuple(generate_splits(race.meters, race.label, selection.split_interval_meters))
    return OFFICIAL_DISTANCES.all()


@lru_cache(maxsize=128)
def list_paces(config: PaceRangeConfig) -> Tuple[PaceEntry, ...]:
    """Pace rows, slowest first; empty for an invalid configuration."""
    return tuple(generate_paces(config))


def resolve_status(
    mode: TableMode,
    selection: Optional[DistanceSelection],
    paces: Optional[Tuple[PaceEntry, ...]],
    distances: Tuple[DistanceEntry, ...],
) -> TableStatus:
    """Tell apart the causes of an empty table.

    Passing paces=None judges the distance columns alone.
    """
    has_paces = paces is None or bool(paces)
    if has_paces and distances:
        return TableStatus.READY
    if mode == TableMode.INTERMEDIATE and (selection is None or not selection.race_key):
        return TableStatus.AWAITING_SELECTION
    if not has_paces:
        return TableStatus.INVALID_PACE_CONFIG
    return TableStatus.NO_DISTANCES


def table_title(mode: TableMode, selection: Optional[DistanceSelection] = None) -> str:
    if mode == TableMode.INTERVAL:
        return "Pace table (intervals)"
    if mode == TableMode.INTERMEDIATE:
        race = OFFICIAL_DISTANCES.lookup(selection.race_key if selection else None)
        return f"Split times ({race.label if race else 'select a distance'})"
    return "Pace table (official distances)"


def build_table(
    mode: TableMode,
    config: PaceRangeConfig,
    selection: Optional[DistanceSelection] = None,
    vma: Optional[float] = None,
    color_enabled: bool = False,
) -> PaceTable:
    """
    Assemble the pace x distance grid.

    Args:
        mode: Which distances to use as columns
        config: Pace range configuration for the rows
        selection: Race and split interval, used by the intermediate mode
        vma: Maximal aerobic speed in km/h, used for color mode
        color_enabled: Whether to color cells; only official distances carry
            the bounds needed for it

    Returns:
        PaceTable whose status says why it is empty, if it is
    """
    mode = TableMode(mode)
    paces = list_paces(config)
    distances = list_distances(mode, selection)
    status = resolve_status(mode, selection, paces, distances)
    colorize = color_enabled and mode == TableMode.OFFICIAL

    rows = []
    if status == TableStatus.READY:
        for pace in paces:
            cells = []
            for distance in distances:
                seconds = time_for(distance.meters, pace.seconds)
                cells.append(TableCell(
                    distance_label=distance.label,
                    meters=distance.meters,
                    seconds=seconds,
                    time=format_duration(seconds),
                    color=color_for(pace.seconds, distance, vma) if colorize else None,
                ))
            rows.append(TableRow(pace=pace, cells=cells))

    vma_pace = vma_pace_seconds(vma)
    logger.debug(
        f"Built {mode.value} table: {len(paces)} paces x {len(distances)} distances ({status.value})"
    )
    return PaceTable(
        mode=mode,
        title=table_title(mode, selection),
        status=status,
        message=STATUS_MESSAGES.get(status),
        columns=list(distances),
        rows=rows,
        color_enabled=colorize,
        vma_pace=format_duration(vma_pace) if vma_pace is not None else None,
    )


class TableSession:
    """Holds the current table inputs and rebuilds the table when they change.

    Setters only record the new input; the table is rebuilt from scratch the
    next time it is read after any input differs from the last build. When a
    PreferencesService is given, pace range, VMA and split interval changes
    are persisted through it.
    """

    def __init__(
        self,
        config: PaceRangeConfig,
        mode: TableMode = TableMode.OFFICIAL,
        selection: Optional[DistanceSelection] = None,
        vma: Optional[float] = None,
        color_enabled: bool = False,
        preferences: Optional[PreferencesService] = None,
    ):
        self.mode = TableMode(mode)
        self.config = config
        self.selection = selection or DistanceSelection()
        self.vma = vma
        self.color_enabled = color_enabled
        self._preferences = preferences
        self._snapshot = None
        self._table: Optional[PaceTable] = None
        self.rebuild_count = 0

    @classmethod
    def from_preferences(cls, preferences: PreferencesService, mode: TableMode = TableMode.OFFICIAL) -> "TableSession":
        """Start a session from stored preferences."""
        prefs = preferences.get_preferences()
        return cls(
            config=prefs.pace_config,
            mode=mode,
            selection=DistanceSelection(split_interval_meters=prefs.split_interval_meters),
            vma=prefs.vma_kmh,
            preferences=preferences,
        )

    def set_mode(self, mode: TableMode) -> None:
        self.mode = TableMode(mode)

    def set_pace_config(self, config: PaceRangeConfig) -> None:
        self.config = config
        if self._preferences is not None:
            self._preferences.update_preferences(
                max_pace_seconds=config.max_seconds,
                min_pace_seconds=config.min_seconds,
                pace_interval_seconds=config.interval_seconds,
            )

    def select_race(self, race_key: Optional[str]) -> None:
        self.selection = self.selection.model_copy(update={"race_key": race_key})

    def set_split_interval(self, meters: int) -> None:
        self.selection = self.selection.model_copy(update={"split_interval_meters": meters})
        if self._preferences is not None:
            self._preferences.update_preferences(split_interval_meters=meters)

    def set_vma(self, vma: Optional[float]) -> None:
        self.vma = vma
        if self._preferences is not None and vma is not None:
            self._preferences.update_preferences(vma=f"{vma:g}")

    def toggle_color(self) -> bool:
        self.color_enabled = not self.color_enabled
        return self.color_enabled

    def _inputs(self):
        return (self.mode, self.config, self.selection, self.vma, self.color_enabled)

    @property
    def table(self) -> PaceTable:
        """The table for the current inputs, rebuilt only if they changed."""
        inputs = self._inputs()
        if self._table is None or inputs != self._snapshot:
            self._table = build_table(*inputs)
            self._snapshot = inputs
            self.rebuild_count += 1
        return self._table
