# greatcircle/interpolator.py
"""
Samples the minor great-circle arc between two coordinates.

Points are spaced evenly by interpolation fraction f = i / (npoints - 1),
computed on unit-sphere Cartesian vectors and converted back to degrees.
"""
import numpy as np
from typing import Tuple

from .data_models import Coordinate

def angular_distance(start: Coordinate, end: Coordinate) -> float:
    """Great-circle separation of two coordinates in radians (haversine form)."""
    lon1, lat1 = start.to_radians()
    lon2, lat2 = end.to_radians()
    a = np.sin((lat2 - lat1) / 2)**2 + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2)**2
    return float(2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))

def interpolate(start: Coordinate, end: Coordinate, npoints: int) -> Tuple[Coordinate, ...]:
    """
    Returns `npoints` coordinates along the great circle from `start` to `end`.

    The first and last coordinates equal `start` and `end` up to rounding.
    `start` and `end` must not coincide: sin(d) is zero there and the weights
    are undefined.
    """
    lon1, lat1 = start.to_radians()
    lon2, lat2 = end.to_radians()
    d = angular_distance(start, end)

    f = np.linspace(0.0, 1.0, npoints)
    a = np.sin((1 - f) * d) / np.sin(d)
    b = np.sin(f * d) / np.sin(d)

    x = a * np.cos(lat1) * np.cos(lon1) + b * np.cos(lat2) * np.cos(lon2)
    y = a * np.cos(lat1) * np.sin(lon1) + b * np.cos(lat2) * np.sin(lon2)
    z = a * np.sin(lat1) + b * np.sin(lat2)

    lats = np.degrees(np.arctan2(z, np.sqrt(x**2 + y**2)))
    lons = np.degrees(np.arctan2(y, x))
    return tuple(Coordinate(lon=float(lon), lat=float(lat)) for lon, lat in zip(lons, lats))
