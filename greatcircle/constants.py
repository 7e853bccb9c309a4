# greatcircle/constants.py

class GreatCircleConstants:
    DEFAULT_NPOINTS: int = 100
    MIN_NPOINTS: int = 2
    # Split sensitivity in degrees. Higher values split more eagerly.
    DEFAULT_OFFSET: float = 10.0

    # Synthesized endpoints stop short of the exact antipode, where sin(d) == 0.
    ALMOST_ANTIPODE_DEG: float = 179.999

    # Smallest longitude step between adjacent samples that can only be a wrap.
    DATELINE_BASELINE_DEG: float = 180.0
    FULL_CIRCLE_DEG: float = 360.0

    MAX_LONGITUDE_DEG: float = 180.0
    MAX_LATITUDE_DEG: float = 90.0

    EARTH_RADIUS_KM: float = 6371.0088
    DEFAULT_PRECISION: int = 6
