"""Spherical averaging of position fixes.

Averaging latitude and longitude arithmetically breaks near the antimeridian
(the mean of 179 and -179 is 0, on the wrong side of the planet) and near the
poles. Instead each fix is mapped to a unit vector on the sphere, the vectors
are averaged, and the mean vector is mapped back to latitude and longitude.

    x = cos(lat) * cos(lon)
    y = cos(lat) * sin(lon)
    z = sin(lat)

    lat = atan2(z, sqrt(x^2 + y^2))
    lon = atan2(y, x)

The model is a sphere, not the WGS84 ellipsoid.
"""

import math
from collections.abc import Sequence

from positioning.nmea.types import Fix


def _to_unit_vector(fix: Fix) -> tuple[float, float, float]:
    latitude = math.radians(fix.latitude_degrees)
    longitude = math.radians(fix.longitude_degrees)
    return (
        math.cos(latitude) * math.cos(longitude),
        math.cos(latitude) * math.sin(longitude),
        math.sin(latitude),
    )


def spherical_mean(fixes: Sequence[Fix]) -> Fix | None:
    """Average fixes as unit vectors on a sphere.

    Args:
        fixes: Fixes to average, in any order.

    Returns:
        None for an empty sequence, the fix itself for a single fix, and the
        spherical centroid otherwise. The result is left as ``atan2``
        produces it: latitude within [-90, 90], longitude within
        [-180, 180].

    Example:
        >>> spherical_mean([Fix(0.0, 179.0), Fix(0.0, -179.0)])
        Fix(latitude_degrees=0.0, longitude_degrees=180.0)
    """
    if not fixes:
        return None
    if len(fixes) == 1:
        return fixes[0]

    x_sum = y_sum = z_sum = 0.0
    for fix in fixes:
        x, y, z = _to_unit_vector(fix)
        x_sum += x
        y_sum += y
        z_sum += z

    count = len(fixes)
    x_mean = x_sum / count
    y_mean = y_sum / count
    z_mean = z_sum / count

    return Fix(
        latitude_degrees=math.degrees(math.atan2(z_mean, math.hypot(x_mean, y_mean))),
        longitude_degrees=math.degrees(math.atan2(y_mean, x_mean)),
    )
