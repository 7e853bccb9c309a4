# greatcircle/tests/test_coordinates.py
import math

import numpy as np
import pytest
from shapely.geometry import Point

from greatcircle.data_models import Coordinate
from greatcircle.exceptions import InvalidPointError
from greatcircle.utils.coordinates import (
    almost_antipode,
    destination_point,
    get_coord,
    normalize_longitude,
)
from greatcircle.interpolator import angular_distance

POINT_GEOMETRY = {"type": "Point", "coordinates": [-122, 48]}
POINT_FEATURE = {"type": "Feature", "properties": {}, "geometry": POINT_GEOMETRY}

# --- get_coord ---

@pytest.mark.parametrize("value", [
    [-122, 48],
    (-122, 48),
    [-122, 48, 120.5],
    np.array([-122.0, 48.0]),
    POINT_GEOMETRY,
    POINT_FEATURE,
    Point(-122, 48),
    Coordinate(-122, 48),
])
def test_get_coord_accepts_point_like_inputs(value):
    assert get_coord(value) == Coordinate(-122.0, 48.0)

@pytest.mark.parametrize("value", [
    None,
    "-122,48",
    [-122],
    [True, False],
    ["-122", "48"],
    [math.nan, 0],
    [0, math.inf],
    [181, 0],
    [0, -90.5],
    {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
    {"type": "Feature", "properties": {}, "geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}},
    {"type": "Feature", "properties": {}, "geometry": None},
    {"coordinates": [0, 0]},
    Point(),
])
def test_get_coord_rejects_invalid_points(value):
    with pytest.raises(InvalidPointError):
        get_coord(value)

def test_invalid_point_error_keeps_value():
    with pytest.raises(InvalidPointError) as exc_info:
        get_coord([1])
    assert exc_info.value.value == [1]

# --- normalize_longitude ---

@pytest.mark.parametrize("lon, expected", [
    (0, 0),
    (180, 180),
    (-180, -180),
    (190, -170),
    (-190, 170),
    (-302, 58),
    (540, -180),
])
def test_normalize_longitude(lon, expected):
    assert normalize_longitude(lon) == pytest.approx(expected)

# --- destination_point ---

def test_destination_due_east_on_equator():
    dest = destination_point(Coordinate(0, 0), 90, 90)
    assert dest.lon == pytest.approx(90)
    assert dest.lat == pytest.approx(0, abs=1e-9)

def test_destination_due_north_reaches_pole():
    dest = destination_point(Coordinate(0, 0), 90, 0)
    assert dest.lat == pytest.approx(90)

def test_destination_distance_matches():
    origin = Coordinate(-122, 48)
    dest = destination_point(origin, 45, 123)
    assert math.degrees(angular_distance(origin, dest)) == pytest.approx(45)

def test_destination_longitude_is_normalized():
    dest = destination_point(Coordinate(170, 0), 20, 90)
    assert dest.lon == pytest.approx(-170)

def test_almost_antipode_stops_short_of_antipode():
    origin = Coordinate(-122, 48)
    dest = almost_antipode(origin, 270)
    assert math.degrees(angular_distance(origin, dest)) == pytest.approx(179.999, abs=1e-6)
    assert dest.lon == pytest.approx(58, abs=0.01)
    assert dest.lat == pytest.approx(-48, abs=0.01)
