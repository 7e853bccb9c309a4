# greatcircle/core.py
"""
The entry point for great-circle routes. Resolves the options and endpoints,
samples the arc, splits it at the antimeridian and assembles the GeoJSON
line feature.
"""
import logging
from typing import Any, Dict, Optional

from .config import ArcOptions
from .data_models import Coordinate
from .exceptions import MissingEndpointError
from .interpolator import interpolate
from .segmenter import split_at_antimeridian
from .utils.coordinates import almost_antipode, get_coord
from .utils.geometry import line_string, multi_line_string

logger = logging.getLogger(__name__)

def _resolve_end(start: Coordinate, end: Any, bearing: Optional[float]) -> Coordinate:
    if end is not None:
        return get_coord(end)
    if bearing is None:
        raise MissingEndpointError()
    end_coord = almost_antipode(start, bearing)
    logger.debug(f"Synthesized end {end_coord} from bearing {bearing} at ({start.lon}, {start.lat})")
    return end_coord

def great_circle(start: Any, end: Any = None, options: Any = None, **overrides: Any) -> Dict[str, Any]:
    """
    Calculates a great-circle route as a GeoJSON LineString or MultiLineString
    feature. Routes crossing the antimeridian are split into a MultiLineString.
    When `start` and `end` coincide, a LineString repeating `start` `npoints`
    times is returned.

    Args:
        start: Source point (Coordinate, [lon, lat], GeoJSON Point or Point Feature, shapely Point).
        end: Destination point, optional when a bearing is given.
        options: Mapping or ArcOptions with `properties`, `npoints`, `offset`, `bearing`.
        **overrides: The same option names as keywords; they win over `options`.

    Returns:
        A GeoJSON Feature dict.

    Raises:
        InvalidOptionsError: options are not a valid configuration.
        InvalidPointError: start or end is not a valid point.
        MissingEndpointError: neither end nor bearing was provided.
    """
    opts = ArcOptions.from_value(options, **overrides)
    start_coord = get_coord(start)
    end_coord = _resolve_end(start_coord, end, opts.bearing)

    if start_coord == end_coord:
        logger.debug(f"Start and end coincide at ({start_coord.lon}, {start_coord.lat}); returning degenerate line.")
        return line_string([start_coord] * opts.npoints, opts.properties)

    logger.debug(
        f"Great circle ({start_coord.lon}, {start_coord.lat}) -> ({end_coord.lon}, {end_coord.lat}), "
        f"npoints={opts.npoints}, offset={opts.offset}"
    )
    coords = interpolate(start_coord, end_coord, opts.npoints)
    runs = split_at_antimeridian(coords, opts.offset)

    if len(runs) == 1:
        return line_string(runs[0], opts.properties)

    logger.info(f"Route split at the antimeridian into {len(runs)} runs.")
    return multi_line_string(runs, opts.properties)
