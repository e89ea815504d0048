"""Pace table models.

This module defines Pydantic models for:
- Pace rows and the user's pace range configuration
- Split specifications for intermediate times
- Color samples for effort color mode
- The assembled table returned to callers
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .distances import DistanceEntry


# Hard limits of the representable pace domain, in seconds per km
ABS_MIN_PACE_SECONDS = 2 * 60  # 2:00/km
ABS_MAX_PACE_SECONDS = 9 * 60  # 9:00/km


class TableMode(str, Enum):
    """Which set of distances the table shows as columns."""
    OFFICIAL = "official"
    INTERVAL = "interval"
    INTERMEDIATE = "intermediate"


class TableStatus(str, Enum):
    """Why a table is (or is not) populated."""
    READY = "ready"
    INVALID_PACE_CONFIG = "invalid_pace_config"
    AWAITING_SELECTION = "awaiting_selection"
    NO_DISTANCES = "no_distances"


class PaceEntry(BaseModel):
    """A pace row: seconds needed to cover one kilometer."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Pace as m:ss, e.g. '4:30'")
    seconds: int = Field(
        ..., ge=ABS_MIN_PACE_SECONDS, le=ABS_MAX_PACE_SECONDS, description="Seconds per km"
    )


class PaceRangeConfig(BaseModel):
    """User-chosen slowest/fastest paces and the step between rows.

    No cross-field validation is applied: an inverted or out-of-domain
    configuration is a legitimate input that yields an empty pace list.
    """

    model_config = ConfigDict(frozen=True)

    max_seconds: int = Field(..., description="Slowest pace shown, seconds per km")
    min_seconds: int = Field(..., description="Fastest pace shown, seconds per km")
    interval_seconds: int = Field(..., description="Step between two rows, in seconds")

    @classmethod
    def from_minutes_seconds(
        cls,
        max_minutes: int,
        max_secs: int,
        min_minutes: int,
        min_secs: int,
        interval_seconds: int,
    ) -> "PaceRangeConfig":
        """Build a config from separate minute and second pickers."""
        return cls(
            max_seconds=max_minutes * 60 + max_secs,
            min_seconds=min_minutes * 60 + min_secs,
            interval_seconds=interval_seconds,
        )

    @property
    def is_valid(self) -> bool:
        """False when the configuration can only produce an empty pace list."""
        return not (
            self.max_seconds < self.min_seconds
            or self.interval_seconds <= 0
            or self.max_seconds < ABS_MIN_PACE_SECONDS
            or self.min_seconds > ABS_MAX_PACE_SECONDS
        )


class SplitSpec(BaseModel):
    """How a race is broken into checkpoints."""

    model_config = ConfigDict(frozen=True)

    race_meters: float
    race_label: str
    interval_meters: float


class DistanceSelection(BaseModel):
    """Race and split interval chosen for the intermediate mode."""

    model_config = ConfigDict(frozen=True)

    race_key: Optional[str] = Field(None, description="Official catalog key of the race")
    split_interval_meters: int = Field(default=1000, description="Distance between checkpoints")


class ColorSample(BaseModel):
    """Effort color of a cell: t=0 at the hard bound, t=1 at the easy bound."""

    model_config = ConfigDict(frozen=True)

    t: float = Field(..., ge=0, le=1)
    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(default=0, ge=0, le=255)

    @property
    def css(self) -> str:
        return f"rgb({self.red}, {self.green}, {self.blue})"


class TableCell(BaseModel):
    """Time for one (pace, distance) pair."""
    distance_label: str
    meters: float
    seconds: Optional[float] = Field(None, description="None when the time is undefined")
    time: str
    color: Optional[ColorSample] = None


class TableRow(BaseModel):
    """One pace and its times across every distance column."""
    pace: PaceEntry
    cells: List[TableCell] = Field(default_factory=list)


class PaceTable(BaseModel):
    """A fully assembled pace x distance grid."""
    mode: TableMode
    title: str
    status: TableStatus
    message: Optional[str] = Field(None, description="Explanation shown instead of an empty table")
    columns: List[DistanceEntry] = Field(default_factory=list)
    rows: List[TableRow] = Field(default_factory=list)
    color_enabled: bool = False
    vma_pace: Optional[str] = Field(None, description="Pace at VMA, formatted")

    @property
    def is_ready(self) -> bool:
        return self.status == TableStatus.READY
