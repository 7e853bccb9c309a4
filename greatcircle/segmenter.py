# greatcircle/segmenter.py
"""
Cuts a sampled path into runs wherever consecutive samples jump across the
antimeridian. The decision is made per adjacent pair only, so a sparsely
sampled path can miss a crossing that denser sampling would catch.
"""
from typing import List, Sequence

from .constants import GreatCircleConstants
from .data_models import Coordinate, CoordinateRun

def crossing_threshold(offset: float) -> float:
    """
    Longitude step above which a pair is treated as a dateline wrap.

    A step above 360 - offset means both samples lie within `offset` degrees
    of the antimeridian on opposite sides. The threshold never drops below
    the 180 degree baseline, which no ordinary step along a minor arc exceeds.
    """
    return max(GreatCircleConstants.DATELINE_BASELINE_DEG,
               GreatCircleConstants.FULL_CIRCLE_DEG - offset)

def find_crossings(coords: Sequence[Coordinate], offset: float = GreatCircleConstants.DEFAULT_OFFSET) -> List[int]:
    """Indices i such that the pair (coords[i], coords[i + 1]) crosses the dateline."""
    threshold = crossing_threshold(offset)
    return [i for i in range(len(coords) - 1)
            if abs(coords[i + 1].lon - coords[i].lon) > threshold]

def split_at_antimeridian(coords: Sequence[Coordinate],
                          offset: float = GreatCircleConstants.DEFAULT_OFFSET) -> List[CoordinateRun]:
    """
    Partitions `coords` into runs at each detected crossing.

    No point is inserted at the dateline; each break falls between two
    existing samples, so the runs together hold exactly the input coordinates.
    Without a crossing the result is a single run equal to the input.
    """
    if not coords:
        return []

    runs: List[CoordinateRun] = []
    start = 0
    for i in find_crossings(coords, offset):
        runs.append(tuple(coords[start:i + 1]))
        start = i + 1
    runs.append(tuple(coords[start:]))
    return runs
