"""
greatcircle - Great-circle routes between two points on a spherical Earth,
emitted as GeoJSON lines and split where they cross the antimeridian.
"""

from .core import great_circle
from .config import ArcOptions
from .data_models import Coordinate
from .exceptions import (
    GreatCircleError,
    InvalidOptionsError,
    MissingEndpointError,
    InvalidPointError,
    GeometryError,
)
from .interpolator import interpolate, angular_distance
from .segmenter import split_at_antimeridian, find_crossings, crossing_threshold

__all__ = [
    'great_circle',
    'ArcOptions',
    'Coordinate',
    'GreatCircleError',
    'InvalidOptionsError',
    'MissingEndpointError',
    'InvalidPointError',
    'GeometryError',
    'interpolate',
    'angular_distance',
    'split_at_antimeridian',
    'find_crossings',
    'crossing_threshold',
]
