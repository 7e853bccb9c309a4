from .coordinates import get_coord, destination_point, almost_antipode, normalize_longitude
from .geometry import line_string, multi_line_string, truncate, to_shapely

__all__ = [
    "get_coord",
    "destination_point",
    "almost_antipode",
    "normalize_longitude",
    "line_string",
    "multi_line_string",
    "truncate",
    "to_shapely",
]
