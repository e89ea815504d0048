"""Distance catalogs for the pace table.

Two disjoint catalogs are defined here:
- OFFICIAL_DISTANCES: race distances carrying "soutien" bounds, the percentage
  of VMA a runner can sustain over the distance
- TRAINING_DISTANCES: short fixed distances (100m to 5000m) used for interval
  sessions, without bounds

Both are built once at import time and validated; neither can be mutated.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..exceptions import CatalogValidationError

logger = logging.getLogger(__name__)


class DistanceEntry(BaseModel):
    """A distance column of the pace table."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Catalog key")
    label: str = Field(..., min_length=1, description="Column header, e.g. '10km'")
    meters: float = Field(..., gt=0, description="Distance in meters")
    min_soutien: Optional[float] = Field(None, gt=0, description="Lowest sustainable % of VMA")
    max_soutien: Optional[float] = Field(None, gt=0, description="Highest sustainable % of VMA")

    @model_validator(mode="after")
    def check_soutien_order(self) -> "DistanceEntry":
        if (
            self.min_soutien is not None
            and self.max_soutien is not None
            and self.min_soutien > self.max_soutien
        ):
            raise ValueError("min_soutien must not exceed max_soutien")
        return self

    @property
    def has_effort_bounds(self) -> bool:
        """True when both soutien bounds are present."""
        return self.min_soutien is not None and self.max_soutien is not None


class DistanceCatalog:
    """Immutable, ordered registry of distances keyed by string.

    Insertion order is the display order of the table columns.
    """

    def __init__(self, name: str, entries: Iterable[DistanceEntry]):
        self.name = name
        by_key = {}
        for entry in entries:
            if entry.key in by_key:
                raise CatalogValidationError(
                    f"Duplicate key '{entry.key}' in {name} catalog", key=entry.key
                )
            by_key[entry.key] = entry
        self._entries: Mapping[str, DistanceEntry] = MappingProxyType(by_key)
        logger.debug(f"Loaded {name} catalog with {len(by_key)} distances")

    @classmethod
    def from_records(cls, name: str, records: Iterable[dict]) -> "DistanceCatalog":
        """Build a catalog from plain dicts, validating every record."""
        entries = []
        for record in records:
            try:
                entries.append(DistanceEntry(**record))
            except ValidationError as e:
                raise CatalogValidationError(
                    f"Invalid distance in {name} catalog: {e.errors()[0]['msg']}",
                    key=record.get("key"),
                ) from e
        return cls(name, entries)

    def lookup(self, key: Optional[str]) -> Optional[DistanceEntry]:
        """Return the entry for key, or None when it is not in this catalog."""
        if key is None:
            return None
        return self._entries.get(key)

    def all(self) -> Tuple[DistanceEntry, ...]:
        return tuple(self._entries.values())

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._entries.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[DistanceEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DistanceCatalog(name={self.name!r}, keys={list(self._entries)})"


# Race distances with the range of VMA percentage usually sustained over them
OFFICIAL_DISTANCES = DistanceCatalog.from_records("official", [
    {"key": "1500m", "label": "1500m", "meters": 1500, "min_soutien": 100, "max_soutien": 106},
    {"key": "3000m", "label": "3000m", "meters": 3000, "min_soutien": 92, "max_soutien": 97},
    {"key": "5km", "label": "5km", "meters": 5000, "min_soutien": 88, "max_soutien": 93},
    {"key": "10km", "label": "10km", "meters": 10000, "min_soutien": 84, "max_soutien": 90},
    {"key": "15km", "label": "15km", "meters": 15000, "min_soutien": 81, "max_soutien": 87},
    {"key": "semi", "label": "Semi-marathon", "meters": 21097.5, "min_soutien": 78, "max_soutien": 84},
    {"key": "marathon", "label": "Marathon", "meters": 42195, "min_soutien": 72, "max_soutien": 80},
])

TRAINING_DISTANCES = DistanceCatalog.from_records("training", [
    {"key": f"{meters}m", "label": f"{meters}m", "meters": meters}
    for meters in (100, 200, 300, 400, 500, 600, 800, 1000, 1500, 2000, 3000, 5000)
])
