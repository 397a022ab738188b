"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Distance between consecutive track samples.
"""

from __future__ import annotations

from haversine import Unit, haversine

from utils.constants import EARTH_RADIUS_M
from utils.track_types import Sample


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in metres on a sphere of radius ``EARTH_RADIUS_M``."""
    central_angle = haversine((lat1, lon1), (lat2, lon2), unit=Unit.RADIANS)
    return central_angle * EARTH_RADIUS_M


def segment_distance_m(prev: Sample, curr: Sample, from_coordinates: bool) -> float:
    """Distance covered between two samples.

    Uses the geodesic estimate when ``from_coordinates`` is set, otherwise the
    difference of the device's cumulative distance field. The difference is not
    clamped: a device that rewinds its counter yields a negative segment.
    A pair missing the needed field contributes nothing.
    """
    if from_coordinates:
        if not (prev.has_coordinates and curr.has_coordinates):
            return 0.0
        return haversine_m(prev.latitude, prev.longitude, curr.latitude, curr.longitude)

    if prev.cumulative_distance_m is None or curr.cumulative_distance_m is None:
        return 0.0
    return curr.cumulative_distance_m - prev.cumulative_distance_m
