"""
Geodesic helpers on a spherical Earth (radius 6371 km).
Distances are in kilometers, bearings in degrees clockwise from north.
"""

import math
from typing import NamedTuple, Sequence

import numpy as np

EARTH_RADIUS_KM = 6371.0


class Point(NamedTuple):
    lat: float
    lon: float


def to_radians(deg: float) -> float:
    return deg * (math.pi / 180)


def to_degrees(rad: float) -> float:
    return rad / math.pi * 180


def haversine_km(a: Point, b: Point) -> float:
    """Great-circle distance between a and b in km (haversine formula)."""
    dlat = to_radians(b[0] - a[0])
    dlon = to_radians(b[1] - a[1])
    lat1, lat2 = to_radians(a[0]), to_radians(b[0])
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # clamp: rounding can push h a hair past 1 for antipodal points
    h = min(1.0, max(0.0, h))
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def destination_point(origin: Point, distance_km: float, bearing_deg: float) -> Point:
    """Point reached from origin after distance_km along the initial bearing bearing_deg.

    Bearings outside [0, 360) are fine (e.g. bearing + 120). No wraparound is applied
    to the result beyond what the trigonometry produces.
    """
    lat1 = to_radians(origin[0])
    lon1 = to_radians(origin[1])
    brng = to_radians(bearing_deg)
    d_r = distance_km / EARTH_RADIUS_KM

    sin_lat2 = math.sin(lat1) * math.cos(d_r) + math.cos(lat1) * math.sin(d_r) * math.cos(brng)
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
    lon2 = lon1 + math.atan2(
        math.sin(brng) * math.sin(d_r) * math.cos(lat1),
        math.cos(d_r) - math.sin(lat1) * math.sin(lat2),
    )
    return Point(to_degrees(lat2), to_degrees(lon2))


def haversine_km_many(origin: Point, lats: Sequence[float], lons: Sequence[float]) -> np.ndarray:
    """Haversine distance in km from origin to each (lats[i], lons[i])."""
    lat = np.radians(np.asarray(lats, dtype=float))
    lon = np.radians(np.asarray(lons, dtype=float))
    lat0 = math.radians(origin[0])
    lon0 = math.radians(origin[1])
    h = np.sin((lat - lat0) / 2) ** 2 + math.cos(lat0) * np.cos(lat) * np.sin((lon - lon0) / 2) ** 2
    h = np.clip(h, 0.0, 1.0)
    return EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))
