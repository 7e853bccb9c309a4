# greatcircle/utils/coordinates.py
"""
Coordinate normalization and spherical projection helpers. Logging is omitted
here as these are high-frequency, low-level functions.
"""
import math
from numbers import Real
from typing import Any, Mapping, Sequence

import numpy as np
from shapely.geometry import Point

from ..constants import GreatCircleConstants
from ..data_models import Coordinate
from ..exceptions import InvalidPointError

def normalize_longitude(lon: float) -> float:
    """Wraps a longitude into [-180, 180], keeping +180 as is."""
    if -GreatCircleConstants.MAX_LONGITUDE_DEG <= lon <= GreatCircleConstants.MAX_LONGITUDE_DEG:
        return lon
    return (lon + 540.0) % 360.0 - 180.0

def _position_to_coordinate(position: Any, original: Any) -> Coordinate:
    if isinstance(position, np.ndarray):
        position = position.tolist()
    if isinstance(position, (str, bytes)) or not isinstance(position, Sequence) or len(position) < 2:
        raise InvalidPointError(original, "Coordinate must be a sequence of at least two numbers")

    lon, lat = position[0], position[1]
    for value in (lon, lat):
        if not isinstance(value, Real) or isinstance(value, bool) or not math.isfinite(value):
            raise InvalidPointError(original, "Coordinate values must be finite numbers")
    if abs(lon) > GreatCircleConstants.MAX_LONGITUDE_DEG:
        raise InvalidPointError(original, "Longitude out of range")
    if abs(lat) > GreatCircleConstants.MAX_LATITUDE_DEG:
        raise InvalidPointError(original, "Latitude out of range")
    return Coordinate(lon=float(lon), lat=float(lat))

def get_coord(obj: Any) -> Coordinate:
    """
    Normalizes a point-like value into a Coordinate.

    Accepts a Coordinate, a raw [lon, lat] position, a GeoJSON Point geometry,
    a GeoJSON Feature wrapping a Point, or a shapely Point.

    Raises:
        InvalidPointError: if the value is not a valid point.
    """
    if isinstance(obj, Coordinate):
        return obj
    if isinstance(obj, Point):
        if obj.is_empty:
            raise InvalidPointError(obj, "Point is empty")
        return _position_to_coordinate(list(obj.coords[0]), obj)
    if isinstance(obj, Mapping):
        if obj.get("type") == "Feature":
            geometry = obj.get("geometry")
            if not isinstance(geometry, Mapping) or geometry.get("type") != "Point":
                raise InvalidPointError(obj, "Feature geometry must be a Point")
            return _position_to_coordinate(geometry.get("coordinates"), obj)
        if obj.get("type") == "Point":
            return _position_to_coordinate(obj.get("coordinates"), obj)
        raise InvalidPointError(obj, "coord must be GeoJSON Point or an Array of numbers")
    return _position_to_coordinate(obj, obj)

def destination_point(origin: Coordinate, distance_deg: float, bearing_deg: float) -> Coordinate:
    """
    Calculates the coordinate reached by travelling from `origin` along
    `bearing_deg` for an angular distance of `distance_deg` on the sphere.
    """
    lon_rad, lat_rad = origin.to_radians()
    bearing_rad = math.radians(bearing_deg)
    angular_distance = math.radians(distance_deg)

    dest_lat_rad = math.asin(math.sin(lat_rad) * math.cos(angular_distance) +
                             math.cos(lat_rad) * math.sin(angular_distance) * math.cos(bearing_rad))
    dest_lon_rad = lon_rad + math.atan2(math.sin(bearing_rad) * math.sin(angular_distance) * math.cos(lat_rad),
                                        math.cos(angular_distance) - math.sin(lat_rad) * math.sin(dest_lat_rad))
    return Coordinate(lon=normalize_longitude(math.degrees(dest_lon_rad)), lat=math.degrees(dest_lat_rad))

def almost_antipode(origin: Coordinate, bearing_deg: float) -> Coordinate:
    """The point 179.999 degrees away along `bearing_deg`, just short of the antipode."""
    return destination_point(origin, GreatCircleConstants.ALMOST_ANTIPODE_DEG, bearing_deg)
