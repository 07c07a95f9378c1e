"""Exact and radius lookups over a loaded dataset.

Both queries are linear scans of the flat record list.
"""

from __future__ import annotations

import logging
from typing import Sequence

from zipradius.geo import distance
from zipradius.models import RadiusMatch, ZipCode

logger = logging.getLogger(__name__)

# Radii below this return only the centre record, without any trigonometry.
MIN_RADIUS_MILES = 0.1

# Distances below this are reported as exactly 0.
DISTANCE_NOISE_FLOOR = 0.1


def find(code: str, zips: Sequence[ZipCode]) -> ZipCode | None:
    """Return the first record whose code equals ``code``, or None."""
    for z in zips:
        if z.code == code:
            return z
    return None


def find_in_radius(code: str, radius_miles: float, zips: Sequence[ZipCode]) -> list[RadiusMatch]:
    """All records within ``radius_miles`` of the record for ``code``.

    The centre itself is included at distance 0. Results keep dataset order.
    An unknown code yields an empty list.
    A NaN radius matches nothing, so it also yields an empty list.
    """
    center = find(code, zips)
    if center is None:
        logger.debug("Radius query for unknown code %r", code)
        return []

    if radius_miles < MIN_RADIUS_MILES:
        return [RadiusMatch(zip=center, distance=0.0)]

    found: list[RadiusMatch] = []
    for z in zips:
        d = distance(center, z)
        if d < DISTANCE_NOISE_FLOOR:
            d = 0.0

        if d <= radius_miles:
            found.append(RadiusMatch(zip=z, distance=d))

    logger.debug(
        "Radius query %s (%.2f mi): %d of %d records", code, radius_miles, len(found), len(zips),
    )
    return found


def sort_by_distance(matches: Sequence[RadiusMatch]) -> list[RadiusMatch]:
    """Nearest first; ties keep their original order."""
    return sorted(matches, key=lambda m: m.distance)
