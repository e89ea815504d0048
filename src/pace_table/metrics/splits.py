"""Intermediate checkpoints ("splits") within a race."""

from typing import List

from ..models.distances import DistanceEntry
from ..models.pace_table import SplitSpec


def format_distance_label(meters: float) -> str:
    """Label a checkpoint in km from 1000m upward, in meters below."""
    if meters >= 1000:
        return f"{meters / 1000:g}km"
    return f"{meters:g}m"


def generate_splits(race_meters: float, race_label: str, interval_meters: float) -> List[DistanceEntry]:
    """
    Checkpoints every interval_meters up to the end of the race.

    The result is strictly increasing, ends exactly at race_meters and holds
    exactly one entry labeled race_label: the final checkpoint is relabeled
    when the race is an exact multiple of the interval, appended otherwise.

    Args:
        race_meters: Race distance in meters
        race_label: Label of the race, used for the finish checkpoint
        interval_meters: Distance between two checkpoints

    Returns:
        Checkpoints as bound-less DistanceEntry objects, empty when either
        distance is not positive
    """
    if interval_meters <= 0 or race_meters <= 0:
        return []

    count = int(race_meters // interval_meters)
    splits = []
    for k in range(1, count + 1):
        meters = k * interval_meters
        label = format_distance_label(meters)
        splits.append(DistanceEntry(key=label, label=label, meters=meters))

    finish = DistanceEntry(key=race_label, label=race_label, meters=race_meters)
    if not splits or splits[-1].meters != race_meters:
        splits.append(finish)
    else:
        splits[-1] = finish
    return splits


def splits_for(spec: SplitSpec) -> List[DistanceEntry]:
    """generate_splits driven by a SplitSpec."""
    return generate_splits(spec.race_meters, spec.race_label, spec.interval_meters)
