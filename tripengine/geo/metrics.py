"""Great-circle distance and travel-time estimates.

Distances are straight-line (haversine) approximations; no routing or traffic
data is involved. Travel speeds come from Settings, per-mode floors and
fixed buffers are constants below.
"""

import math
from collections.abc import Iterable

from tripengine.config import get_settings
from tripengine.models.common import Coordinate, TravelMode

EARTH_RADIUS_KM = 6371.0

# Minimum minutes charged for any hop, per mode
MIN_MINUTES: dict[TravelMode, int] = {
    TravelMode.walk: 5,
    TravelMode.drive: 5,
    TravelMode.transit: 10,
}

# Fixed overhead added to the moving time (parking, waiting for a vehicle)
BUFFER_MINUTES: dict[TravelMode, int] = {
    TravelMode.walk: 0,
    TravelMode.drive: 5,
    TravelMode.transit: 8,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates in kilometres."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    h = min(h, 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def _speed_kmh(mode: TravelMode) -> float:
    settings = get_settings()
    if mode == TravelMode.walk:
        return settings.walk_speed_kmh
    if mode == TravelMode.drive:
        return settings.drive_speed_kmh
    return settings.transit_speed_kmh


def travel_minutes(distance: float, mode: TravelMode | str) -> int:
    """Estimate whole minutes needed to cover a distance with a given mode.

    Args:
        distance: Distance in kilometres (zero or negative yields the floor)
        mode: walk, transit or drive

    Returns:
        Minutes rounded to the nearest integer, never below the mode's floor
    """
    mode = TravelMode(mode)
    moving = round_half_up(max(distance, 0.0) / _speed_kmh(mode) * 60)
    return max(MIN_MINUTES[mode], moving + BUFFER_MINUTES[mode])


def centroid(coordinates: Iterable[Coordinate]) -> Coordinate | None:
    """Arithmetic mean of latitudes and longitudes, None when empty."""
    points = list(coordinates)
    if not points:
        return None
    lat = sum(p.latitude for p in points) / len(points)
    lon = sum(p.longitude for p in points) / len(points)
    return Coordinate(latitude=lat, longitude=lon)
