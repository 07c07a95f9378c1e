"""Great-circle distance in statute miles. Pure Python, no external deps."""

from __future__ import annotations

import math
from typing import Callable

from zipradius.models import ZipCode

# One degree of arc is 60 nautical miles, 1.1515 statute miles each.
MILES_PER_DEGREE = 60 * 1.1515

KM_PER_MILE = 1.609344


def central_angle_miles(
    lat1_sin: float,
    lat1_cos: float,
    lat2_sin: float,
    lat2_cos: float,
    delta_lon: float,
    cos: Callable[[float], float] = math.cos,
) -> float:
    """Spherical law of cosines on precomputed latitude sine/cosine pairs.

    ``delta_lon`` is in decimal degrees. The cosine of the central angle is
    clamped to [-1, 1] so rounding on coincident points cannot push ``acos``
    out of its domain.
    """
    c = lat1_sin * lat2_sin + lat1_cos * lat2_cos * cos(math.radians(delta_lon))
    c = max(-1.0, min(1.0, c))
    return math.degrees(math.acos(c)) * MILES_PER_DEGREE


def great_circle_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in statute miles.

    Inputs are decimal degrees.
    """
    rlat1, rlat2 = math.radians(lat1), math.radians(lat2)
    return central_angle_miles(
        math.sin(rlat1), math.cos(rlat1),
        math.sin(rlat2), math.cos(rlat2),
        lon1 - lon2,
    )


def distance(a: ZipCode, b: ZipCode) -> float:
    """Distance between two records in miles, reusing their cached trig values."""
    if a.code == b.code:
        return 0.0
    return central_angle_miles(
        a.latitude_sin, a.latitude_cos,
        b.latitude_sin, b.latitude_cos,
        a.longitude - b.longitude,
    )


def miles_to_km(miles: float) -> float:
    return miles * KM_PER_MILE


def km_to_miles(km: float) -> float:
    return km / KM_PER_MILE
