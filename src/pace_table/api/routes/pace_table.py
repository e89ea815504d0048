"""
Pace Table API Routes

Endpoints exposing the distance catalogs, pace rows, time arithmetic,
effort colors and fully assembled pace tables.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from ...exceptions import DistanceNotFoundError
from ...metrics.colors import color_for
from ...metrics.timing import format_duration, time_for
from ...models.distances import OFFICIAL_DISTANCES, TRAINING_DISTANCES, DistanceEntry
from ...models.pace_table import (
    ColorSample,
    DistanceSelection,
    PaceEntry,
    PaceRangeConfig,
    PaceTable,
    TableMode,
    TableStatus,
)
from ...services.table_service import build_table, list_distances, list_paces, resolve_status

logger = logging.getLogger(__name__)
router = APIRouter()


# =============================================================================
# Request/Response Models
# =============================================================================

class DistancesResponse(BaseModel):
    """Distance columns for a mode."""
    mode: TableMode
    status: TableStatus
    distances: List[DistanceEntry]


class PacesResponse(BaseModel):
    """Pace rows for a configuration, slowest first."""
    status: TableStatus
    paces: List[PaceEntry]


class TimeResponse(BaseModel):
    """Time to cover a distance at a pace."""
    meters: float
    pace_seconds: float
    seconds: Optional[float] = Field(None, description="None when the pace is not positive")
    formatted: str


class FormatResponse(BaseModel):
    formatted: str


class ColorResponse(BaseModel):
    """Effort color of a pace over a distance."""
    distance_key: str
    pace_seconds: float
    color: Optional[ColorSample] = None
    css: Optional[str] = None


class TableRequest(BaseModel):
    """Request to assemble a full pace table."""
    mode: TableMode = TableMode.OFFICIAL
    pace_config: PaceRangeConfig
    selection: Optional[DistanceSelection] = None
    vma: Optional[float] = Field(None, description="Maximal aerobic speed in km/h")
    color_enabled: bool = False

    class Config:
        json_schema_extra = {
            "example": {
                "mode": "official",
                "pace_config": {"max_seconds": 420, "min_seconds": 180, "interval_seconds": 15},
                "vma": 16,
                "color_enabled": True,
            }
        }


# =============================================================================
# Helper Functions
# =============================================================================

def _require_race(race_key: Optional[str]) -> None:
    """Reject a race key that is not an official distance."""
    if race_key and race_key not in OFFICIAL_DISTANCES:
        raise DistanceNotFoundError(race_key, catalog=OFFICIAL_DISTANCES.name)


def _find_distance(key: str) -> DistanceEntry:
    """Look a key up in the official catalog, then the training one."""
    entry = OFFICIAL_DISTANCES.lookup(key) or TRAINING_DISTANCES.lookup(key)
    if entry is None:
        raise DistanceNotFoundError(key, catalog="any")
    return entry


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/distances", response_model=DistancesResponse)
async def get_distances(
    mode: TableMode = Query(TableMode.OFFICIAL),
    race_key: Optional[str] = Query(None, description="Official race, for intermediate mode"),
    split_interval: int = Query(1000, description="Split interval in meters"),
):
    """List the distance columns of a mode."""
    _require_race(race_key)
    selection = DistanceSelection(race_key=race_key, split_interval_meters=split_interval)
    distances = list_distances(mode, selection)
    status = resolve_status(mode, selection, None, distances)
    return DistancesResponse(mode=mode, status=status, distances=list(distances))


@router.get("/paces", response_model=PacesResponse)
async def get_paces(
    max_seconds: int = Query(..., description="Slowest pace, seconds per km"),
    min_seconds: int = Query(..., description="Fastest pace, seconds per km"),
    interval_seconds: int = Query(..., description="Step between rows"),
):
    """List pace rows for a pace range configuration."""
    config = PaceRangeConfig(
        max_seconds=max_seconds,
        min_seconds=min_seconds,
        interval_seconds=interval_seconds,
    )
    paces = list_paces(config)
    status = TableStatus.READY if paces else TableStatus.INVALID_PACE_CONFIG
    return PacesResponse(status=status, paces=list(paces))


@router.get("/time", response_model=TimeResponse)
async def get_time(
    meters: float = Query(..., ge=0),
    pace_seconds: float = Query(...),
):
    """Time needed to cover a distance at a pace."""
    seconds = time_for(meters, pace_seconds)
    return TimeResponse(
        meters=meters,
        pace_seconds=pace_seconds,
        seconds=seconds,
        formatted=format_duration(seconds),
    )


@router.get("/format", response_model=FormatResponse)
async def get_formatted_duration(seconds: Optional[float] = Query(None)):
    """Format a duration in seconds as hh:mm:ss or mm:ss."""
    return FormatResponse(formatted=format_duration(seconds))


@router.get("/color", response_model=ColorResponse)
async def get_color(
    pace_seconds: float = Query(...),
    distance_key: str = Query(...),
    vma: float = Query(..., description="Maximal aerobic speed in km/h"),
):
    """Effort color of a pace over a catalog distance, null when uncolored."""
    distance = _find_distance(distance_key)
    sample = color_for(pace_seconds, distance, vma)
    return ColorResponse(
        distance_key=distance_key,
        pace_seconds=pace_seconds,
        color=sample,
        css=sample.css if sample else None,
    )


@router.post("/table", response_model=PaceTable)
async def create_table(request: TableRequest):
    """
    Assemble a complete pace table.

    Rows are paces from the slowest to the fastest configured pace; columns
    depend on the mode:

    - **official**: race distances, colorable against VMA
    - **interval**: 100m to 5000m training distances
    - **intermediate**: splits of the selected race
    """
    if request.selection:
        _require_race(request.selection.race_key)
    table = build_table(
        request.mode,
        request.pace_config,
        request.selection,
        vma=request.vma,
        color_enabled=request.color_enabled,
    )
    logger.info(f"Served {table.mode.value} table with status {table.status.value}")
    return table
