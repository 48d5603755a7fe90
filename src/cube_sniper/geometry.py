from math import atan2, cos, isfinite, nan, radians, sin, sqrt

from cube_sniper.models import Coordinate

# Mean Earth radius; treating the Earth as a sphere is accurate to ~0.5%.
EARTH_RADIUS_MI = 3959.0

LatLong = Coordinate | tuple[float, float]


def haversine_distance(a: LatLong, b: LatLong) -> float:
    """Compute the great-circle distance in miles between two points.

    Points are given in decimal degrees, either as Coordinate or (lat, lon).

    Args:
        a: First point.
        b: Second point.

    Returns:
        Distance in miles. NaN if any input is NaN or infinite.
    """
    lat1, lon1 = a
    lat2, lon2 = b
    if not all(isfinite(v) for v in (lat1, lon1, lat2, lon2)):
        return nan

    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)

    h = sin(dlat / 2) * sin(dlat / 2) + cos(radians(lat1)) * cos(
        radians(lat2)
    ) * sin(dlon / 2) * sin(dlon / 2)
    # rounding can push h just past 1 for antipodal points
    h = min(h, 1.0)
    c = 2 * atan2(sqrt(h), sqrt(1 - h))

    return EARTH_RADIUS_MI * c
