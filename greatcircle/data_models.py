# greatcircle/data_models.py
"""
Defines the value types shared by the interpolator, the segmenter and the
geometry builders. Every stage creates new instances; nothing is mutated
after construction.
"""
import math
from dataclasses import dataclass
from typing import List, Tuple

@dataclass(frozen=True)
class Coordinate:
    """A (longitude, latitude) pair in degrees."""
    lon: float
    lat: float

    def to_position(self) -> List[float]:
        """GeoJSON position, longitude first."""
        return [self.lon, self.lat]

    def to_radians(self) -> Tuple[float, float]:
        return math.radians(self.lon), math.radians(self.lat)

# A contiguous slice of a sampled path that does not cross the antimeridian.
CoordinateRun = Tuple[Coordinate, ...]
