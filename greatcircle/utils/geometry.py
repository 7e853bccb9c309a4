# greatcircle/utils/geometry.py
"""
Builds GeoJSON line features from coordinate runs, plus a few helpers for
consumers: coordinate truncation and conversion to shapely geometries.
"""
from typing import Any, Dict, Optional, Sequence

from shapely.geometry import shape
from shapely.errors import ShapelyError
from shapely.geometry.base import BaseGeometry

from ..constants import GreatCircleConstants
from ..data_models import Coordinate
from ..exceptions import GeometryError

def _feature(geometry: Dict[str, Any], properties: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "properties": properties if properties is not None else {},
        "geometry": geometry,
    }

def line_string(coords: Sequence[Coordinate], properties: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Wraps an ordered coordinate sequence into a LineString feature."""
    if len(coords) < 2:
        raise GeometryError("coordinates must be an array of two or more positions")
    geometry = {"type": "LineString", "coordinates": [c.to_position() for c in coords]}
    return _feature(geometry, properties)

def multi_line_string(runs: Sequence[Sequence[Coordinate]],
                      properties: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Wraps several coordinate runs into a MultiLineString feature. Single-point runs are allowed."""
    if not runs:
        raise GeometryError("MultiLineString requires at least one run")
    if any(len(run) == 0 for run in runs):
        raise GeometryError("MultiLineString runs must not be empty")
    geometry = {
        "type": "MultiLineString",
        "coordinates": [[c.to_position() for c in run] for run in runs],
    }
    return _feature(geometry, properties)

def _round_positions(coordinates: Any, precision: int) -> Any:
    # A position is a list of numbers; anything deeper is a list of positions.
    if coordinates and isinstance(coordinates[0], (int, float)):
        return [round(value, precision) for value in coordinates]
    return [_round_positions(item, precision) for item in coordinates]

def truncate(feature: Dict[str, Any], precision: int = GreatCircleConstants.DEFAULT_PRECISION) -> Dict[str, Any]:
    """Returns a copy of `feature` with every coordinate rounded to `precision` decimals."""
    geometry = feature["geometry"]
    return {
        **feature,
        "geometry": {**geometry, "coordinates": _round_positions(geometry["coordinates"], precision)},
    }

def to_shapely(feature: Dict[str, Any]) -> BaseGeometry:
    """
    Converts a line feature into a shapely LineString or MultiLineString.
    Shapely rejects single-point runs, so split routes with one must be
    handled by the caller.
    """
    try:
        return shape(feature["geometry"])
    except (ShapelyError, ValueError, TypeError) as e:
        raise GeometryError(f"Cannot convert feature to shapely geometry: {e}") from e
