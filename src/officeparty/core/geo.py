from __future__ import annotations
from dataclasses import dataclass
from math import acos, cos, pi, sin

"""
Geospatial helpers.

A tiny geometry layer: the invite radius only spans tens of kilometers, so the
spherical law of cosines is accurate enough and we avoid GIS dependencies.
"""

# Mean Earth radius in meters.
EARTH_RADIUS_M = 6_371_009


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


def degrees_to_radians(degrees: float) -> float:
    return degrees * pi / 180


def great_circle_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute great-circle distance in meters between two points.

    Coordinates are not range-checked: out-of-range degrees still give a
    well-defined (if meaningless) distance.
    """
    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    lat1 = degrees_to_radians(lat1)
    lon1 = degrees_to_radians(lon1)
    lat2 = degrees_to_radians(lat2)
    lon2 = degrees_to_radians(lon2)

    a = sin(lat1) * sin(lat2)
    b = cos(lat1) * cos(lat2) * cos(abs(lon2 - lon1))
    # Rounding can push a + b just past 1.0 for nearly coincident points.
    central_angle = acos(min(1.0, max(-1.0, a + b)))
    return central_angle * EARTH_RADIUS_M


def distance_between_m(a: GeoPoint, b: GeoPoint) -> float:
    """Point-based wrapper around `great_circle_m`."""
    return great_circle_m(a.lat, a.lon, b.lat, b.lon)
